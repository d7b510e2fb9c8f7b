"""JudgeObserver port — domain events emitted while judging a comparison."""

from typing import Protocol


class JudgeObserver(Protocol):
    """Observer port for judge domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def judge_links_validated(self, provider: str, healthy: int, total: int) -> None: ...

    def judge_skipped(self, reason: str) -> None: ...

    def judge_scoring_started(self, model: str, num_providers: int) -> None: ...

    def judge_scoring_completed(self, duration_ms: int, num_evaluations: int) -> None: ...

    def judge_scoring_failed(self, reason: str) -> None: ...

    def judge_evaluation_unmatched(self, provider: str) -> None: ...

    def judge_high_temperature_warned(self, temperature: float) -> None: ...
