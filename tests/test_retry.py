"""Tests for retry logic around LLM calls."""

from unittest.mock import MagicMock

import pytest

from lexica.llm.base import LLMResponse
from lexica.llm.retry import LLMRetryError, call_llm_with_retry


def test_returns_first_success():
    provider = MagicMock()
    provider.complete.return_value = LLMResponse(content="ok", model="m")
    sleeps = []

    response = call_llm_with_retry(provider, "prompt", sleep=sleeps.append)

    assert response.content == "ok"
    assert provider.complete.call_count == 1
    assert sleeps == []


def test_retries_with_exponential_backoff():
    provider = MagicMock()
    provider.complete.side_effect = [
        RuntimeError("busy"),
        RuntimeError("busy"),
        LLMResponse(content="ok", model="m"),
    ]
    sleeps = []
    retries = []

    response = call_llm_with_retry(
        provider,
        "prompt",
        max_retries=2,
        retry_delay=0.5,
        on_retry=lambda attempt, error: retries.append(attempt),
        sleep=sleeps.append,
    )

    assert response.content == "ok"
    assert sleeps == [0.5, 1.0]
    assert retries == [1, 2]


def test_raises_after_all_attempts():
    provider = MagicMock()
    provider.complete.side_effect = RuntimeError("down")

    with pytest.raises(LLMRetryError, match="after 3 attempts: down") as excinfo:
        call_llm_with_retry(provider, "prompt", max_retries=2, sleep=lambda _: None)

    assert provider.complete.call_count == 3
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_no_retries():
    provider = MagicMock()
    provider.complete.side_effect = RuntimeError("down")
    sleeps = []

    with pytest.raises(LLMRetryError):
        call_llm_with_retry(provider, "prompt", max_retries=0, sleep=sleeps.append)

    assert provider.complete.call_count == 1
    assert sleeps == []
