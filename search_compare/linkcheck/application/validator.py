"""LinkValidator — probes every citation of one result concurrently."""

import time
from collections.abc import Sequence

from search_compare.core.fanout import gather_all
from search_compare.linkcheck.domain.check import CitationCheck, is_healthy_status
from search_compare.linkcheck.domain.prober import LinkProber
from search_compare.linkcheck.infrastructure.errors import LinkProbeError
from search_compare.provider.domain.citation import Citation


class LinkValidator:
    """Turns a citation list into an index-aligned list of CitationChecks.

    ``checks[i]`` always describes ``citations[i]``; a failed probe is recorded
    on its own check and never affects the others.
    """

    def __init__(self, prober: LinkProber) -> None:
        self._prober = prober

    async def validate(self, citations: Sequence[Citation]) -> list[CitationCheck]:
        return await gather_all(citations, self._check)

    async def _check(self, citation: Citation) -> CitationCheck:
        start = time.monotonic()
        try:
            status_code = await self._prober.head(citation.url)
        except LinkProbeError as exc:
            return CitationCheck(
                url=citation.url,
                latency_ms=_elapsed_ms(start),
                error=exc.reason,
            )
        except Exception as exc:  # noqa: BLE001
            return CitationCheck(
                url=citation.url,
                latency_ms=_elapsed_ms(start),
                error=f"unexpected error: {exc}",
            )

        return CitationCheck(
            url=citation.url,
            status_code=status_code,
            healthy=is_healthy_status(status_code),
            latency_ms=_elapsed_ms(start),
        )


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
