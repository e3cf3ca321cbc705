"""LLM providers module."""

from lexica.llm.providers.anthropic import AnthropicProvider
from lexica.llm.providers.cli import CLIToolProvider, LLMCommandError
from lexica.llm.providers.gemini import GeminiProvider
from lexica.llm.providers.openai import OpenAIProvider

__all__ = [
    "AnthropicProvider",
    "CLIToolProvider",
    "GeminiProvider",
    "LLMCommandError",
    "OpenAIProvider",
]
