"""Structlog implementation of the JudgeObserver port."""

import structlog


class StructlogJudgeObserver:
    """Delegates judge domain events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_links_validated(self, provider: str, healthy: int, total: int) -> None:
        self._log.debug(
            "judge.links_validated",
            provider=provider,
            healthy=healthy,
            total=total,
        )

    def judge_skipped(self, reason: str) -> None:
        self._log.info("judge.skipped", reason=reason)

    def judge_scoring_started(self, model: str, num_providers: int) -> None:
        self._log.info(
            "judge.scoring_started",
            model=model,
            num_providers=num_providers,
        )

    def judge_scoring_completed(self, duration_ms: int, num_evaluations: int) -> None:
        self._log.info(
            "judge.scoring_completed",
            duration_ms=duration_ms,
            num_evaluations=num_evaluations,
        )

    def judge_scoring_failed(self, reason: str) -> None:
        self._log.error("judge.scoring_failed", reason=reason)

    def judge_evaluation_unmatched(self, provider: str) -> None:
        self._log.warning("judge.evaluation_unmatched", provider=provider)

    def judge_high_temperature_warned(self, temperature: float) -> None:
        self._log.warning("judge.high_temperature_warned", temperature=temperature)
