"""ComparisonObserver port — domain events emitted during a comparison run."""

from typing import Protocol


class ComparisonObserver(Protocol):
    """Observer port for comparison run events.

    Implementations may log to structlog, render progress, or record for tests.
    """

    def comparison_started(self, query: str, provider_names: list[str]) -> None: ...

    def provider_skipped(self, provider: str, reason: str) -> None: ...

    def provider_query_started(self, provider: str) -> None: ...

    def provider_query_completed(
        self, provider: str, duration_ms: int, num_citations: int, score: int
    ) -> None: ...

    def provider_query_failed(self, provider: str, reason: str) -> None: ...

    def comparison_completed(
        self, total_results: int, failed_results: int, elapsed_seconds: float
    ) -> None: ...

    def comparison_empty(self, skipped: list[str]) -> None: ...
