"""RankedResult and the outcome types of a comparison run."""

from dataclasses import dataclass, field, replace

from search_compare.judge.domain.score import JudgeScore
from search_compare.provider.domain.citation import Citation
from search_compare.provider.domain.provider import Provider
from search_compare.provider.domain.result import ProviderResult


@dataclass(frozen=True)
class RankedResult:
    """One provider's result as it is sorted and displayed.

    ``judge_score`` is None when judging was skipped, failed, or the result errored.
    """

    provider: Provider
    result: ProviderResult
    heuristic_score: int = 0
    judge_score: JudgeScore | None = None

    @property
    def overall(self) -> float:
        """Rank key used after judging; unscored results rank as 0."""
        return self.judge_score.overall if self.judge_score is not None else 0.0

    def with_judge_score(self, score: JudgeScore) -> "RankedResult":
        return replace(self, judge_score=score)


@dataclass(frozen=True)
class SkippedProvider:
    """A provider excluded before the run because its credentials are missing."""

    name: str
    reason: str


@dataclass(frozen=True)
class ComparisonOutcome:
    """Everything one comparison run produced.

    An empty ``results`` list means no provider was available to run, which is
    distinct from every provider having run and errored.
    """

    results: list[RankedResult] = field(default_factory=list)
    skipped: list[SkippedProvider] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.results

    @property
    def all_failed(self) -> bool:
        return bool(self.results) and not any(r.result.ok for r in self.results)


def unique_sources(results: list[RankedResult]) -> list[Citation]:
    """Return every distinct citation URL across successful results, in rank order."""
    sources: list[Citation] = []
    seen: set[str] = set()
    for ranked in results:
        if not ranked.result.ok:
            continue
        for citation in ranked.result.citations:
            if citation.url and citation.url not in seen:
                seen.add(citation.url)
                sources.append(citation)
    return sources
