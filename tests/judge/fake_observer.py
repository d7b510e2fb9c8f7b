"""FakeJudgeObserver — records judge domain events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinksValidatedEvent:
    provider: str
    healthy: int
    total: int


@dataclass(frozen=True)
class ScoringStartedEvent:
    model: str
    num_providers: int


@dataclass(frozen=True)
class ScoringCompletedEvent:
    duration_ms: int
    num_evaluations: int


class FakeJudgeObserver:
    """Records all emitted judge events as typed frozen dataclasses.

    Use in tests to assert which events were emitted and with what data,
    without mocking or patching.
    """

    def __init__(self) -> None:
        self.links_validated: list[LinksValidatedEvent] = []
        self.skipped: list[str] = []
        self.started: list[ScoringStartedEvent] = []
        self.completed: list[ScoringCompletedEvent] = []
        self.failed: list[str] = []
        self.unmatched: list[str] = []
        self.temperature_warnings: list[float] = []

    def judge_links_validated(self, provider: str, healthy: int, total: int) -> None:
        self.links_validated.append(
            LinksValidatedEvent(provider=provider, healthy=healthy, total=total)
        )

    def judge_skipped(self, reason: str) -> None:
        self.skipped.append(reason)

    def judge_scoring_started(self, model: str, num_providers: int) -> None:
        self.started.append(ScoringStartedEvent(model=model, num_providers=num_providers))

    def judge_scoring_completed(self, duration_ms: int, num_evaluations: int) -> None:
        self.completed.append(
            ScoringCompletedEvent(duration_ms=duration_ms, num_evaluations=num_evaluations)
        )

    def judge_scoring_failed(self, reason: str) -> None:
        self.failed.append(reason)

    def judge_evaluation_unmatched(self, provider: str) -> None:
        self.unmatched.append(provider)

    def judge_high_temperature_warned(self, temperature: float) -> None:
        self.temperature_warnings.append(temperature)
