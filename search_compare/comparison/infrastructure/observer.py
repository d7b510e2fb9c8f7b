"""Structlog implementation of the ComparisonObserver port."""

import structlog


class StructlogComparisonObserver:
    """Delegates comparison run events to structlog.

    Satisfies the ComparisonObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def comparison_started(self, query: str, provider_names: list[str]) -> None:
        self._log.info(
            "comparison.started",
            query=query,
            providers=provider_names,
        )

    def provider_skipped(self, provider: str, reason: str) -> None:
        self._log.warning("comparison.provider_skipped", provider=provider, reason=reason)

    def provider_query_started(self, provider: str) -> None:
        self._log.debug("comparison.provider_query_started", provider=provider)

    def provider_query_completed(
        self, provider: str, duration_ms: int, num_citations: int, score: int
    ) -> None:
        self._log.info(
            "comparison.provider_query_completed",
            provider=provider,
            duration_ms=duration_ms,
            num_citations=num_citations,
            score=score,
        )

    def provider_query_failed(self, provider: str, reason: str) -> None:
        self._log.error(
            "comparison.provider_query_failed",
            provider=provider,
            reason=reason,
        )

    def comparison_completed(
        self, total_results: int, failed_results: int, elapsed_seconds: float
    ) -> None:
        self._log.info(
            "comparison.completed",
            total_results=total_results,
            failed_results=failed_results,
            elapsed_seconds=round(elapsed_seconds, 3),
        )

    def comparison_empty(self, skipped: list[str]) -> None:
        self._log.warning("comparison.empty", skipped=skipped)
