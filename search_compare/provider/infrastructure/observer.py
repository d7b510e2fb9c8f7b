"""Structlog implementation of the ProviderObserver port."""

import structlog


class StructlogProviderObserver:
    """Delegates provider adapter events to structlog.

    Satisfies the ProviderObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def provider_request_sent(self, provider: str, model: str, detail: str) -> None:
        self._log.debug(
            "provider.request_sent",
            provider=provider,
            model=model,
            detail=detail,
        )

    def provider_response_parsed(
        self, provider: str, duration_ms: int, num_citations: int
    ) -> None:
        self._log.debug(
            "provider.response_parsed",
            provider=provider,
            duration_ms=duration_ms,
            num_citations=num_citations,
        )

    def provider_request_failed(self, provider: str, reason: str) -> None:
        self._log.warning(
            "provider.request_failed",
            provider=provider,
            reason=reason,
        )
