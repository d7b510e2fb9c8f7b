"""ProgressComparisonObserver — renders one Rich status row per provider on stderr."""

from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)

PENDING = "pending"
DONE = "done"
FAILED = "failed"

_STATUS_MARKUP = {
    PENDING: "[grey50]searching…[/grey50]",
    DONE: "[bright_green]done[/bright_green]",
    FAILED: "[red]failed[/red]",
}


class ProgressComparisonObserver:
    """Shows a spinner per provider until its query completes or fails.

    Pass ``disabled=True`` to track status without any terminal output (useful
    in tests).

    Does NOT inherit from ComparisonObserver (structural typing via Protocol).
    """

    def __init__(self, disabled: bool = False) -> None:
        self._disabled = disabled
        self._status: dict[str, str] = {}
        self._task_ids: dict[str, TaskID] = {}
        self._progress: Progress | None = None

    @property
    def status(self) -> dict[str, str]:
        return dict(self._status)

    def comparison_started(self, query: str, provider_names: list[str]) -> None:
        self._status = {name: PENDING for name in provider_names}
        self._task_ids = {}
        self._progress = None

        if self._disabled or not provider_names:
            return

        self._progress = Progress(
            SpinnerColumn(finished_text="•"),
            TextColumn("{task.description}"),
            TextColumn("{task.fields[status]}"),
            TimeElapsedColumn(),
            console=Console(stderr=True),
            transient=True,
        )
        pad_width = max(len(name) for name in provider_names)
        for name in provider_names:
            self._task_ids[name] = self._progress.add_task(
                description=f"[bold]{name:<{pad_width}}[/bold]",
                total=1,
                status=_STATUS_MARKUP[PENDING],
            )
        self._progress.start()

    def provider_skipped(self, provider: str, reason: str) -> None:
        pass

    def provider_query_started(self, provider: str) -> None:
        pass

    def provider_query_completed(
        self, provider: str, duration_ms: int, num_citations: int, score: int
    ) -> None:
        self._finish(provider=provider, status=DONE)

    def provider_query_failed(self, provider: str, reason: str) -> None:
        self._finish(provider=provider, status=FAILED)

    def comparison_completed(
        self, total_results: int, failed_results: int, elapsed_seconds: float
    ) -> None:
        self._stop()

    def comparison_empty(self, skipped: list[str]) -> None:
        self._stop()

    def _finish(self, provider: str, status: str) -> None:
        if provider not in self._status:
            return
        self._status[provider] = status
        if self._progress is not None and provider in self._task_ids:
            self._progress.update(
                self._task_ids[provider],
                completed=1,
                status=_STATUS_MARKUP[status],
            )

    def _stop(self) -> None:
        if self._progress is not None:
            self._progress.stop()
        self._progress = None
        self._task_ids = {}
