"""Base types and abstract classes for LLM integration."""

import logging
import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from lexica.constants.llm_config import (
    ALL_PROVIDERS,
    CLI_PROVIDERS,
    DEFAULT_TEMPERATURE,
    MAX_EXAMPLE_TOKENS,
    PROVIDER_ANTHROPIC,
    PROVIDER_GEMINI,
    PROVIDER_OPENAI,
)
from lexica.constants.llm_pricing import estimate_cost

logger = logging.getLogger(__name__)


@dataclass
class LLMResponse:
    """Response from an LLM provider.

    Attributes:
        content: The text content of the response.
        model: The model (or CLI tool) used for generation.
        input_tokens: Number of input tokens.
        output_tokens: Number of output tokens.
        cost_usd: Estimated cost in USD.
    """

    content: str
    model: str
    input_tokens: int = 0
    output_tokens: int = 0
    cost_usd: float = 0.0

    @property
    def total_tokens(self) -> int:
        """Total tokens used (input + output)."""
        return self.input_tokens + self.output_tokens


class LLMProvider(ABC):
    """Abstract base class for LLM providers.

    Implementations raise on failure; callers at the application boundary
    turn exceptions into ``ai-failed`` Results.
    """

    @abstractmethod
    def complete(self, prompt: str, **kwargs) -> LLMResponse:
        """Execute a completion request.

        Args:
            prompt: The prompt text to send to the LLM.
            **kwargs: Additional provider-specific parameters.

        Returns:
            LLMResponse with the completion result.
        """

    @abstractmethod
    def estimate_cost(self, input_tokens: int, output_tokens: int) -> float:
        """Estimate cost in USD for given token counts."""


class APIKeyProvider(LLMProvider):
    """Provider backed by a vendor SDK authenticated with an API key.

    Subclasses set ``name``, ``api_key_env`` and ``default_model`` and build
    their SDK client in ``_create_client``.

    Args:
        api_key: API key. If not provided, reads from ``api_key_env``.
        model: Model to use. Defaults to ``default_model``.
        temperature: Sampling temperature. Defaults to 0.0.
        max_tokens: Output token limit for one example batch.
    """

    name: str
    api_key_env: str
    default_model: str

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        temperature: float = DEFAULT_TEMPERATURE,
        max_tokens: int = MAX_EXAMPLE_TOKENS,
    ):
        self.api_key = api_key or os.environ.get(self.api_key_env)
        if not self.api_key:
            raise ValueError(
                f"{self.api_key_env} not found. Set it in the environment or a .env file."
            )

        self.model = model or self.default_model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.client = self._create_client(self.api_key)

    @abstractmethod
    def _create_client(self, api_key: str) -> Any:
        """Create the SDK client."""

    def estimate_cost(self, input_tokens: int, output_tokens: int) -> float:
        try:
            return estimate_cost(
                provider=self.name,
                model=self.model,
                input_tokens=input_tokens,
                output_tokens=output_tokens,
            )
        except KeyError:
            logger.debug(f"No pricing for {self.name}/{self.model}")
            return 0.0

    def _response(
        self, content: str, model: str, input_tokens: int, output_tokens: int
    ) -> LLMResponse:
        return LLMResponse(
            content=content,
            model=model,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            cost_usd=self.estimate_cost(input_tokens, output_tokens),
        )


def get_provider(provider_name: str, model: str | None = None, **kwargs) -> LLMProvider:
    """Factory function to get an LLM provider.

    Args:
        provider_name: One of "codex", "claude-code", "openai", "anthropic", "gemini".
        model: Optional model name for SDK providers. Uses default if not specified.
        **kwargs: Additional provider-specific arguments (e.g. ``args`` for CLI tools).

    Returns:
        Configured LLMProvider instance.

    Raises:
        ValueError: If provider_name is unknown.

    Examples:
        >>> provider = get_provider("codex")
        >>> provider = get_provider("claude-code", args=["--model", "sonnet"])
        >>> provider = get_provider("openai", "gpt-4.1-nano")
    """
    # Import here to avoid circular imports
    from lexica.llm.providers.anthropic import AnthropicProvider
    from lexica.llm.providers.cli import CLIToolProvider
    from lexica.llm.providers.gemini import GeminiProvider
    from lexica.llm.providers.openai import OpenAIProvider

    if provider_name not in ALL_PROVIDERS:
        raise ValueError(f"Unknown provider: {provider_name}. Available: {list(ALL_PROVIDERS)}")

    if provider_name in CLI_PROVIDERS:
        return CLIToolProvider(tool=provider_name, **kwargs)

    providers = {
        PROVIDER_OPENAI: OpenAIProvider,
        PROVIDER_ANTHROPIC: AnthropicProvider,
        PROVIDER_GEMINI: GeminiProvider,
    }
    return providers[provider_name](model=model, **kwargs)
