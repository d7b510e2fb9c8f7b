"""CompositeComparisonObserver — fans out all events to a list of observers."""

from search_compare.comparison.domain.observer import ComparisonObserver


class CompositeComparisonObserver:
    """Delegates every observer event to each observer in order.

    Does NOT inherit from ComparisonObserver (structural typing via Protocol).
    """

    def __init__(self, observers: list[ComparisonObserver]) -> None:
        self._observers = observers

    def comparison_started(self, query: str, provider_names: list[str]) -> None:
        for obs in self._observers:
            obs.comparison_started(query=query, provider_names=provider_names)

    def provider_skipped(self, provider: str, reason: str) -> None:
        for obs in self._observers:
            obs.provider_skipped(provider=provider, reason=reason)

    def provider_query_started(self, provider: str) -> None:
        for obs in self._observers:
            obs.provider_query_started(provider=provider)

    def provider_query_completed(
        self, provider: str, duration_ms: int, num_citations: int, score: int
    ) -> None:
        for obs in self._observers:
            obs.provider_query_completed(
                provider=provider,
                duration_ms=duration_ms,
                num_citations=num_citations,
                score=score,
            )

    def provider_query_failed(self, provider: str, reason: str) -> None:
        for obs in self._observers:
            obs.provider_query_failed(provider=provider, reason=reason)

    def comparison_completed(
        self, total_results: int, failed_results: int, elapsed_seconds: float
    ) -> None:
        for obs in self._observers:
            obs.comparison_completed(
                total_results=total_results,
                failed_results=failed_results,
                elapsed_seconds=elapsed_seconds,
            )

    def comparison_empty(self, skipped: list[str]) -> None:
        for obs in self._observers:
            obs.comparison_empty(skipped=skipped)
