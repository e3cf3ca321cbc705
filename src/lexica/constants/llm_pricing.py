"""LLM Pricing Reference.

Pricing used to report the cost of example generation.
All prices are per 1 MILLION tokens.
"""

from dataclasses import dataclass
from typing import Literal


@dataclass
class ModelPricing:
    """Pricing for a single model."""

    input: float  # $ per 1M input tokens
    output: float  # $ per 1M output tokens


OPENAI_PRICING: dict[str, ModelPricing] = {
    "gpt-4.1": ModelPricing(input=2.00, output=8.00),
    "gpt-4.1-mini": ModelPricing(input=0.40, output=1.60),
    "gpt-4.1-nano": ModelPricing(input=0.10, output=0.40),
    "gpt-4o-mini": ModelPricing(input=0.15, output=0.60),
}

ANTHROPIC_PRICING: dict[str, ModelPricing] = {
    "claude-3-5-haiku-20241022": ModelPricing(input=0.80, output=4.00),
    "claude-haiku-4-5-20251001": ModelPricing(input=1.00, output=5.00),
    "claude-sonnet-4-5-20250929": ModelPricing(input=3.00, output=15.00),
}

GEMINI_PRICING: dict[str, ModelPricing] = {
    "gemini-2.5-flash": ModelPricing(input=0.30, output=2.50),
    "gemini-2.5-flash-lite": ModelPricing(input=0.10, output=0.40),
    "gemini-2.5-pro": ModelPricing(input=1.25, output=10.00),
}

PRICING_BY_PROVIDER: dict[str, dict[str, ModelPricing]] = {
    "openai": OPENAI_PRICING,
    "anthropic": ANTHROPIC_PRICING,
    "gemini": GEMINI_PRICING,
}


def estimate_cost(
    provider: Literal["openai", "anthropic", "gemini"],
    model: str,
    input_tokens: int,
    output_tokens: int,
) -> float:
    """Estimate cost in USD for a request.

    Raises:
        KeyError: If provider or model is unknown.
    """
    pricing = PRICING_BY_PROVIDER[provider][model]
    return (input_tokens * pricing.input + output_tokens * pricing.output) / 1_000_000
