"""LLM integration module.

Provides:
- LLMProvider abstract base class for different LLM backends
- Concrete providers for OpenAI, Anthropic, Gemini and external CLI tools
- Retry utilities for robust LLM calls
- The async example generator used by ``lexica examples <term> generate``
"""

from lexica.llm.base import LLMProvider, LLMResponse, get_provider
from lexica.llm.example_generator import (
    ExampleParseError,
    build_example_prompt,
    create_example_generator,
    parse_example_lines,
)
from lexica.llm.retry import LLMRetryError, call_llm_with_retry

__all__ = [
    "ExampleParseError",
    "LLMProvider",
    "LLMResponse",
    "LLMRetryError",
    "build_example_prompt",
    "call_llm_with_retry",
    "create_example_generator",
    "get_provider",
    "parse_example_lines",
]
