"""Gemini provider implementation."""

from google import genai
from google.genai import types

from lexica.constants.llm_config import (
    DEFAULT_MODEL_GEMINI,
    EXAMPLE_SYSTEM_PROMPT,
    PROVIDER_GEMINI,
)
from lexica.llm.base import APIKeyProvider, LLMResponse


class GeminiProvider(APIKeyProvider):
    """Google Gemini via google-genai. Reads GOOGLE_API_KEY."""

    name = PROVIDER_GEMINI
    api_key_env = "GOOGLE_API_KEY"
    default_model = DEFAULT_MODEL_GEMINI

    def _create_client(self, api_key: str) -> genai.Client:
        return genai.Client(api_key=api_key)

    def complete(self, prompt: str, **kwargs) -> LLMResponse:
        config = types.GenerateContentConfig(
            system_instruction=EXAMPLE_SYSTEM_PROMPT,
            temperature=kwargs.get("temperature", self.temperature),
            max_output_tokens=kwargs.get("max_tokens", self.max_tokens),
            # a few sentences need no thinking budget
            thinking_config=(
                types.ThinkingConfig(thinking_budget=0) if "flash" in self.model else None
            ),
        )
        response = self.client.models.generate_content(
            model=self.model, contents=prompt, config=config
        )

        usage = response.usage_metadata
        return self._response(
            response.text or "",
            self.model,
            (usage.prompt_token_count or 0) if usage else 0,
            (usage.candidates_token_count or 0) if usage else 0,
        )
