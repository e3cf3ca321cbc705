"""Example-sentence generation on top of an LLM provider.

``create_example_generator`` adapts a blocking ``LLMProvider`` to the async
``ExampleGenerator`` protocol used by ``lexica.core.commands.generate_examples``.
Provider errors never escape: they become ``ai-failed`` Results.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from lexica.config import AIConfig, LexicaConfig
from lexica.constants.llm_config import MAX_RETRIES, RETRY_DELAY_SECONDS
from lexica.core.example import ExampleGenerator, ExampleRequest
from lexica.core.result import Result, fail_ai, succeed
from lexica.llm.base import LLMProvider, get_provider
from lexica.llm.retry import call_llm_with_retry

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[AIConfig], LLMProvider]


class ExampleParseError(ValueError):
    """The model output did not contain enough example sentences."""


def build_example_prompt(request: ExampleRequest) -> str:
    return "\n".join(
        [
            "You are generating example sentences for a language learner.",
            f"Dictionary: {request.dictionary_name}",
            f"Language: {request.language.source} -> {request.language.target}",
            f"Term: {request.term}",
            f"Meaning: {request.meaning}",
            f"Return exactly {request.count} concise example sentences "
            f"written in {request.language.source} that use the term.",
            "Output plain text, one sentence per line.",
        ]
    )


def parse_example_lines(text: str, count: int) -> list[str]:
    """Split model output into ``count`` example sentences.

    One sentence per line; blank lines are dropped and extra lines truncated.

    Raises:
        ExampleParseError: If the output is empty or has fewer than ``count`` lines.
    """
    lines = [line.strip() for line in text.strip().splitlines()]
    examples = [line for line in lines if line]
    if not examples:
        raise ExampleParseError("Empty AI output")
    if len(examples) < count:
        raise ExampleParseError(f"Expected {count} examples, got {len(examples)}")
    return examples[:count]


def provider_from_config(ai: AIConfig) -> LLMProvider:
    """Build the provider named in the ``ai`` config section."""
    if ai.args:
        return get_provider(ai.provider, ai.model, args=ai.args)
    return get_provider(ai.provider, ai.model)


def create_example_generator(
    config: LexicaConfig,
    provider_factory: ProviderFactory = provider_from_config,
    max_retries: int = MAX_RETRIES,
    retry_delay: float = RETRY_DELAY_SECONDS,
) -> ExampleGenerator:
    """Create an async example generator for ``config.ai``.

    The provider is built lazily on the first request, so a missing API key
    surfaces as ``ai-failed`` rather than at CLI start.
    """

    def generate_blocking(request: ExampleRequest) -> list[str]:
        provider = provider_factory(config.ai)
        response = call_llm_with_retry(
            provider,
            build_example_prompt(request),
            max_retries=max_retries,
            retry_delay=retry_delay,
        )
        examples = parse_example_lines(response.content, request.count)
        logger.info(
            f"Generated {len(examples)} examples for '{request.term}' "
            f"via {config.ai.provider} (${response.cost_usd:.4f})"
        )
        return examples

    async def generate(request: ExampleRequest) -> Result[list[str]]:
        try:
            examples = await asyncio.to_thread(generate_blocking, request)
        except Exception as e:
            # retry errors chain the provider's own error, which carries the reason
            cause = e.__cause__ or e
            logger.warning(f"Example generation failed for '{request.term}': {cause}")
            return fail_ai(str(cause) or "AI command failed")
        return succeed(examples)

    return generate
