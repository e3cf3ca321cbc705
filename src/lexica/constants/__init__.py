"""Project-wide constants."""

from lexica.constants.defaults import (
    ANKI_EXAMPLE_SEPARATOR,
    ANKI_MEANING_SEPARATOR,
    DEFAULT_EXAMPLE_COUNT,
    DEFAULT_SCORE,
    DEFAULT_TEST_COUNT,
    MEANING_SEPARATOR,
    MIN_EXAMPLE_COUNT,
    MIN_TEST_COUNT,
    TEST_REVEAL_DELAY_SECONDS,
)
from lexica.constants.paths import (
    DICTIONARY_FILE_SUFFIX,
    ENCODING_UTF8,
    get_config_path,
    get_dictionaries_dir,
    get_dictionary_path,
    get_lexica_home,
    get_state_path,
)

# Anki export columns
FRONT = "front"
BACK = "back"
EXAMPLES = "examples"
TAGS = "tags"
ANKI_COLUMNS = [FRONT, BACK, EXAMPLES, TAGS]

__all__ = [
    "ANKI_COLUMNS",
    "ANKI_EXAMPLE_SEPARATOR",
    "ANKI_MEANING_SEPARATOR",
    "BACK",
    "DEFAULT_EXAMPLE_COUNT",
    "DEFAULT_SCORE",
    "DEFAULT_TEST_COUNT",
    "DICTIONARY_FILE_SUFFIX",
    "ENCODING_UTF8",
    "EXAMPLES",
    "FRONT",
    "MEANING_SEPARATOR",
    "MIN_EXAMPLE_COUNT",
    "MIN_TEST_COUNT",
    "TAGS",
    "TEST_REVEAL_DELAY_SECONDS",
    "get_config_path",
    "get_dictionaries_dir",
    "get_dictionary_path",
    "get_lexica_home",
    "get_state_path",
]
