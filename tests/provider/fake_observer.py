"""FakeProviderObserver — records provider adapter events for assertion in tests."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RequestSentEvent:
    provider: str
    model: str
    detail: str


@dataclass(frozen=True)
class ResponseParsedEvent:
    provider: str
    duration_ms: int
    num_citations: int


@dataclass(frozen=True)
class RequestFailedEvent:
    provider: str
    reason: str


class FakeProviderObserver:
    """Records all emitted provider events as typed frozen dataclasses."""

    def __init__(self) -> None:
        self.sent: list[RequestSentEvent] = []
        self.parsed: list[ResponseParsedEvent] = []
        self.failed: list[RequestFailedEvent] = []

    def provider_request_sent(self, provider: str, model: str, detail: str) -> None:
        self.sent.append(RequestSentEvent(provider=provider, model=model, detail=detail))

    def provider_response_parsed(
        self, provider: str, duration_ms: int, num_citations: int
    ) -> None:
        self.parsed.append(
            ResponseParsedEvent(
                provider=provider, duration_ms=duration_ms, num_citations=num_citations
            )
        )

    def provider_request_failed(self, provider: str, reason: str) -> None:
        self.failed.append(RequestFailedEvent(provider=provider, reason=reason))
