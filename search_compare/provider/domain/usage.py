"""TokenUsage value object — token counts reported by a provider."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TokenUsage:
    """Immutable value object capturing token usage from a single provider query."""

    input_tokens: int = 0
    output_tokens: int = 0
