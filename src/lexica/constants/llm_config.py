"""LLM configuration constants."""

# =============================================================================
# Provider settings
# =============================================================================

DEFAULT_TEMPERATURE = 0.0  # Determinism for reproducibility

DEFAULT_MODEL_OPENAI = "gpt-4.1-mini"
DEFAULT_MODEL_ANTHROPIC = "claude-3-5-haiku-20241022"
DEFAULT_MODEL_GEMINI = "gemini-2.5-flash"

# SDK-backed providers
PROVIDER_OPENAI = "openai"
PROVIDER_ANTHROPIC = "anthropic"
PROVIDER_GEMINI = "gemini"

# External CLI tools
PROVIDER_CODEX = "codex"
PROVIDER_CLAUDE_CODE = "claude-code"

SDK_PROVIDERS = (PROVIDER_OPENAI, PROVIDER_ANTHROPIC, PROVIDER_GEMINI)
CLI_PROVIDERS = (PROVIDER_CODEX, PROVIDER_CLAUDE_CODE)
ALL_PROVIDERS = CLI_PROVIDERS + SDK_PROVIDERS

DEFAULT_PROVIDER = PROVIDER_CODEX

# command + base args for each CLI tool; the prompt is appended last
CLI_PROVIDER_COMMANDS: dict[str, tuple[str, ...]] = {
    PROVIDER_CODEX: ("codex", "exec"),
    PROVIDER_CLAUDE_CODE: ("claude", "-p"),
}
CLI_TIMEOUT_SECONDS = 180.0

# =============================================================================
# Retry settings
# =============================================================================

MAX_RETRIES = 2
RETRY_DELAY_SECONDS = 1.0

# =============================================================================
# Example generation
# =============================================================================

MAX_EXAMPLE_TOKENS = 1024

EXAMPLE_SYSTEM_PROMPT = (
    "You write short, natural example sentences for a language learner's "
    "vocabulary notebook. Reply with the sentences only."
)
