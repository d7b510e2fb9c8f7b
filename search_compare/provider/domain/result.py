"""ProviderResult value object — the outcome of a single provider query."""

from pydantic import BaseModel, ConfigDict, Field

from search_compare.provider.domain.citation import Citation
from search_compare.provider.domain.usage import TokenUsage


class ProviderResult(BaseModel):
    """Immutable value object capturing one provider's answer or failure.

    When ``error`` is set the result is unusable for scoring and ranking, but
    it is still carried through so the failure can be displayed.
    """

    model_config = ConfigDict(frozen=True)

    text: str = ""
    citations: list[Citation] = Field(default_factory=list)
    duration_ms: int = Field(default=0, ge=0)
    usage: TokenUsage = Field(default_factory=TokenUsage)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def word_count(self) -> int:
        return len(self.text.split())

    @classmethod
    def failed(cls, error: str, duration_ms: int = 0) -> "ProviderResult":
        """Build a result that carries only a failure reason."""
        return cls(error=error, duration_ms=duration_ms)
