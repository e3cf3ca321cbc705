"""OpenAI provider implementation."""

from openai import OpenAI

from lexica.constants.llm_config import (
    DEFAULT_MODEL_OPENAI,
    EXAMPLE_SYSTEM_PROMPT,
    PROVIDER_OPENAI,
)
from lexica.llm.base import APIKeyProvider, LLMResponse


class OpenAIProvider(APIKeyProvider):
    """OpenAI chat completions. Reads OPENAI_API_KEY."""

    name = PROVIDER_OPENAI
    api_key_env = "OPENAI_API_KEY"
    default_model = DEFAULT_MODEL_OPENAI

    def _create_client(self, api_key: str) -> OpenAI:
        return OpenAI(api_key=api_key)

    def complete(self, prompt: str, **kwargs) -> LLMResponse:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {"role": "system", "content": EXAMPLE_SYSTEM_PROMPT},
                {"role": "user", "content": prompt},
            ],
            temperature=kwargs.get("temperature", self.temperature),
            max_tokens=kwargs.get("max_tokens", self.max_tokens),
            seed=kwargs.get("seed", 42),
        )

        usage = response.usage
        return self._response(
            response.choices[0].message.content or "",
            response.model,
            usage.prompt_tokens if usage else 0,
            usage.completion_tokens if usage else 0,
        )
