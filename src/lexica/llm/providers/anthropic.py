"""Anthropic provider implementation."""

from anthropic import Anthropic

from lexica.constants.llm_config import (
    DEFAULT_MODEL_ANTHROPIC,
    EXAMPLE_SYSTEM_PROMPT,
    PROVIDER_ANTHROPIC,
)
from lexica.llm.base import APIKeyProvider, LLMResponse


class AnthropicProvider(APIKeyProvider):
    """Anthropic Messages API. Reads ANTHROPIC_API_KEY."""

    name = PROVIDER_ANTHROPIC
    api_key_env = "ANTHROPIC_API_KEY"
    default_model = DEFAULT_MODEL_ANTHROPIC

    def _create_client(self, api_key: str) -> Anthropic:
        return Anthropic(api_key=api_key)

    def complete(self, prompt: str, **kwargs) -> LLMResponse:
        response = self.client.messages.create(
            model=self.model,
            system=EXAMPLE_SYSTEM_PROMPT,
            messages=[{"role": "user", "content": prompt}],
            temperature=kwargs.get("temperature", self.temperature),
            max_tokens=kwargs.get("max_tokens", self.max_tokens),
        )

        # only text blocks carry sentences
        text = "".join(
            block.text for block in response.content if getattr(block, "type", "text") == "text"
        )
        return self._response(
            text,
            response.model,
            response.usage.input_tokens,
            response.usage.output_tokens,
        )
