"""ProviderObserver port — domain events emitted by vendor adapters."""

from typing import Protocol


class ProviderObserver(Protocol):
    """Observer port for provider adapter events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def provider_request_sent(self, provider: str, model: str, detail: str) -> None: ...

    def provider_response_parsed(
        self, provider: str, duration_ms: int, num_citations: int
    ) -> None: ...

    def provider_request_failed(self, provider: str, reason: str) -> None: ...
