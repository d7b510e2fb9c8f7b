"""JudgeOutcome — the Judge's result list plus an optional scoring failure."""

from dataclasses import dataclass, field

from search_compare.comparison.domain.ranked import RankedResult
from search_compare.judge.infrastructure.errors import JudgeInvocationError


@dataclass(frozen=True)
class JudgeOutcome:
    """Results handed back by the Judge.

    When ``error`` is set the results are the input list, unscored and in
    their original order; callers can still display them.
    """

    results: list[RankedResult] = field(default_factory=list)
    error: JudgeInvocationError | None = None

    @property
    def scored(self) -> bool:
        return self.error is None and any(
            r.judge_score is not None for r in self.results
        )
