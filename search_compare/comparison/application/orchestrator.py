"""Orchestrator — fans one query out to every available provider concurrently."""

import asyncio
import itertools
import time

from search_compare.comparison.domain.heuristic import heuristic_score
from search_compare.comparison.domain.observer import ComparisonObserver
from search_compare.comparison.domain.ranked import (
    ComparisonOutcome,
    RankedResult,
    SkippedProvider,
)
from search_compare.core.fanout import gather_all
from search_compare.provider.domain.provider import Provider
from search_compare.provider.domain.result import ProviderResult
from search_compare.provider.infrastructure.errors import ProviderAuthError
from search_compare.provider.infrastructure.registry import ProviderRegistry

DEADLINE_EXCEEDED = "deadline exceeded"


class Orchestrator:
    """Runs providers in parallel with per-provider failure isolation.

    Every unit of work captures its own failure in ``ProviderResult.error``, so
    one provider failing never prevents or aborts the others. The run waits for
    every unit before returning; the only time limit besides each adapter's own
    is the optional shared deadline.
    """

    def __init__(
        self,
        registry: ProviderRegistry,
        observer: ComparisonObserver,
        query_timeout_seconds: float | None = None,
    ) -> None:
        self._registry = registry
        self._observer = observer
        self._query_timeout_seconds = query_timeout_seconds

    async def run_all(self, query: str, verbose: bool = False) -> ComparisonOutcome:
        """Query every registered provider that passes the auth pre-flight."""
        available, skipped = self._preflight(providers=self._registry.providers())
        return await self._run(
            query=query, available=available, skipped=skipped, verbose=verbose
        )

    async def run_one(
        self, name: str, query: str, verbose: bool = False
    ) -> ComparisonOutcome:
        """Query a single named provider.

        Raises:
            ProviderNotFoundError: if ``name`` is not registered.
        """
        provider = self._registry.require(name)
        available, skipped = self._preflight(providers=[provider])
        return await self._run(
            query=query, available=available, skipped=skipped, verbose=verbose
        )

    def _preflight(
        self, providers: list[Provider]
    ) -> tuple[list[Provider], list[SkippedProvider]]:
        available: list[Provider] = []
        skipped: list[SkippedProvider] = []
        for provider in providers:
            try:
                provider.check_auth()
            except ProviderAuthError as exc:
                skipped.append(SkippedProvider(name=provider.name, reason=exc.reason))
                self._observer.provider_skipped(provider=provider.name, reason=exc.reason)
                continue
            available.append(provider)
        return available, skipped

    async def _run(
        self,
        query: str,
        available: list[Provider],
        skipped: list[SkippedProvider],
        verbose: bool,
    ) -> ComparisonOutcome:
        self._observer.comparison_started(
            query=query, provider_names=[p.name for p in available]
        )
        if not available:
            self._observer.comparison_empty(skipped=[s.name for s in skipped])
            return ComparisonOutcome(results=[], skipped=skipped)

        started_at = time.monotonic()
        deadline = self._deadline()
        arrival = itertools.count()

        async def unit(provider: Provider) -> tuple[int, RankedResult]:
            ranked = await self._query_one(
                provider=provider, query=query, verbose=verbose, deadline=deadline
            )
            return next(arrival), ranked

        completed = await gather_all(available, unit)

        # Arrival order first, so equal scores keep it under the stable sort.
        completed.sort(key=lambda item: item[0])
        results = [ranked for _, ranked in completed]
        results.sort(key=lambda r: r.heuristic_score, reverse=True)

        self._observer.comparison_completed(
            total_results=len(results),
            failed_results=sum(1 for r in results if not r.result.ok),
            elapsed_seconds=time.monotonic() - started_at,
        )
        return ComparisonOutcome(results=results, skipped=skipped)

    async def _query_one(
        self,
        provider: Provider,
        query: str,
        verbose: bool,
        deadline: float | None,
    ) -> RankedResult:
        self._observer.provider_query_started(provider=provider.name)
        start = time.monotonic()
        try:
            async with asyncio.timeout_at(deadline):
                result = await provider.query(query, verbose=verbose)
        except TimeoutError:
            result = ProviderResult.failed(
                error=DEADLINE_EXCEEDED, duration_ms=_elapsed_ms(start)
            )
        except Exception as exc:  # noqa: BLE001
            result = ProviderResult.failed(
                error=f"unexpected error: {exc}", duration_ms=_elapsed_ms(start)
            )

        score = heuristic_score(result)
        if result.ok:
            self._observer.provider_query_completed(
                provider=provider.name,
                duration_ms=result.duration_ms,
                num_citations=len(result.citations),
                score=score,
            )
        else:
            self._observer.provider_query_failed(
                provider=provider.name, reason=result.error or ""
            )

        return RankedResult(provider=provider, result=result, heuristic_score=score)

    def _deadline(self) -> float | None:
        if self._query_timeout_seconds is None:
            return None
        return asyncio.get_running_loop().time() + self._query_timeout_seconds


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
