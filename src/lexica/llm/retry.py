"""Retry wrapper for LLM calls."""

import logging
import time
from typing import Callable

from lexica.constants.llm_config import MAX_RETRIES, RETRY_DELAY_SECONDS
from lexica.llm.base import LLMProvider, LLMResponse

logger = logging.getLogger(__name__)


class LLMRetryError(RuntimeError):
    """Raised when every attempt of an LLM call failed."""


def call_llm_with_retry(
    provider: LLMProvider,
    prompt: str,
    max_retries: int = MAX_RETRIES,
    retry_delay: float = RETRY_DELAY_SECONDS,
    on_retry: Callable[[int, Exception], None] | None = None,
    sleep: Callable[[float], None] | None = None,
) -> LLMResponse:
    """Call ``provider.complete`` with exponential backoff.

    Args:
        provider: LLM provider instance
        prompt: Prompt text
        max_retries: Retries after the first attempt (default: 2)
        retry_delay: Base delay between retries in seconds, doubled each retry
        on_retry: Optional callback called on each failure (attempt_num, error)
        sleep: Sleep function (default: time.sleep)

    Returns:
        LLMResponse from the provider

    Raises:
        LLMRetryError: If the call fails on every attempt. The last error is
            chained as ``__cause__``.
    """
    attempts = max_retries + 1
    for attempt in range(attempts):
        try:
            return provider.complete(prompt)
        except Exception as e:
            logger.warning(f"LLM call failed (attempt {attempt + 1}/{attempts}): {e}")
            if on_retry:
                on_retry(attempt + 1, e)
            if attempt + 1 >= attempts:
                raise LLMRetryError(f"LLM call failed after {attempts} attempts: {e}") from e
            delay = retry_delay * (2**attempt)
            logger.info(f"Retrying LLM call in {delay:.1f}s...")
            (sleep or time.sleep)(delay)

    # max_retries < 0
    raise LLMRetryError("LLM call was not attempted")
