"""Default values shared by the core and the CLI."""

# Score
DEFAULT_SCORE = 0

# Examples
DEFAULT_EXAMPLE_COUNT = 3
MIN_EXAMPLE_COUNT = 1

# Quiz
DEFAULT_TEST_COUNT = 10
MIN_TEST_COUNT = 1
TEST_REVEAL_DELAY_SECONDS = 1.0

# Meanings passed as a single CLI argument are split on this separator
MEANING_SEPARATOR = ","

# Anki export
ANKI_MEANING_SEPARATOR = "; "
ANKI_EXAMPLE_SEPARATOR = "<br>"
