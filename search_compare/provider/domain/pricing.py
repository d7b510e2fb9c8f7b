"""Per-provider token pricing used for cost estimates."""

from dataclasses import dataclass

from search_compare.provider.domain.usage import TokenUsage


@dataclass(frozen=True)
class TokenPrice:
    """USD price per million tokens."""

    input_per_million: float
    output_per_million: float


PRICING: dict[str, TokenPrice] = {
    "nova": TokenPrice(input_per_million=2.50, output_per_million=12.50),
    "claude": TokenPrice(input_per_million=3.00, output_per_million=15.00),
    "gemini": TokenPrice(input_per_million=2.00, output_per_million=12.00),
    "grok": TokenPrice(input_per_million=3.00, output_per_million=15.00),
}


def estimate_cost_usd(provider_name: str, usage: TokenUsage) -> float:
    """Return the USD cost of ``usage`` for the named provider, or 0.0 if unpriced."""
    price = PRICING.get(provider_name)
    if price is None:
        return 0.0
    return (
        usage.input_tokens * price.input_per_million
        + usage.output_tokens * price.output_per_million
    ) / 1_000_000
