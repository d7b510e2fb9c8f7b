"""CitationCheck value object and the link health score derived from it."""

from pydantic import BaseModel, ConfigDict, Field

NEUTRAL_LINK_HEALTH = 5


class CitationCheck(BaseModel):
    """Outcome of probing one citation URL.

    ``healthy`` is true only when a response arrived with a status in [200, 400)
    after following redirects. Transport failures carry ``status_code`` 0 and a
    non-empty ``error``.
    """

    model_config = ConfigDict(frozen=True)

    url: str
    status_code: int = 0
    healthy: bool = False
    latency_ms: int = Field(default=0, ge=0)
    error: str = ""


def is_healthy_status(status_code: int) -> bool:
    return 200 <= status_code < 400


def count_healthy(checks: list[CitationCheck]) -> int:
    return sum(1 for check in checks if check.healthy)


def link_health_score(checks: list[CitationCheck]) -> int:
    """Map a list of checks to an integer score in [1, 10].

    No citations scores the neutral 5. Otherwise 0% healthy scores 1 and 100%
    healthy scores 10.
    """
    if not checks:
        return NEUTRAL_LINK_HEALTH
    return min(10, count_healthy(checks) * 9 // len(checks) + 1)
