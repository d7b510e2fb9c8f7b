"""RestProvider — shared query/auth flow for adapters that speak a vendor REST API."""

import os
import time

import httpx

from search_compare.config.domain.provider import ProviderConfig
from search_compare.provider.domain.observer import ProviderObserver
from search_compare.provider.domain.result import ProviderResult
from search_compare.provider.infrastructure.errors import (
    ProviderAuthError,
    ProviderQueryError,
)
from search_compare.provider.infrastructure.http import JsonObject, post_json


class RestProvider:
    """Base for vendor adapters: resolves credentials, POSTs, and parses the reply.

    Subclasses describe the vendor (identity, env vars, endpoint, payload) and
    turn the decoded JSON body into a ProviderResult. Every failure between
    the request and the parsed result is captured in ``ProviderResult.error``.
    """

    name: str = ""
    display_name: str = ""
    emoji: str = "⚪"
    default_model: str = ""
    api_key_env_vars: tuple[str, ...] = ()
    request_detail: str = "sending request"

    def __init__(
        self,
        config: ProviderConfig,
        observer: ProviderObserver,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._observer = observer
        self._transport = transport

    @property
    def model(self) -> str:
        return self._config.model or self.default_model

    def check_auth(self) -> None:
        """Raise ProviderAuthError unless an API key is configured or in the environment."""
        if self._api_key() is None:
            raise ProviderAuthError(
                provider=self.name,
                reason=f"{self.api_key_env_vars[0]} not set",
            )

    async def query(self, text: str, verbose: bool = False) -> ProviderResult:
        api_key = self._api_key()
        if api_key is None:
            return ProviderResult.failed(error=f"{self.api_key_env_vars[0]} not set")

        if verbose:
            self._observer.provider_request_sent(
                provider=self.name, model=self.model, detail=self.request_detail
            )

        start = time.monotonic()
        try:
            body = await post_json(
                provider=self.name,
                url=self.endpoint(),
                payload=self.build_payload(text=text),
                headers=self.build_headers(api_key=api_key),
                timeout_seconds=self._config.timeout_seconds,
                transport=self._transport,
            )
            parsed = self.parse_response(body=body)
        except ProviderQueryError as exc:
            duration_ms = _elapsed_ms(start)
            self._observer.provider_request_failed(provider=self.name, reason=exc.reason)
            return ProviderResult.failed(error=exc.reason, duration_ms=duration_ms)

        duration_ms = _elapsed_ms(start)
        self._observer.provider_response_parsed(
            provider=self.name,
            duration_ms=duration_ms,
            num_citations=len(parsed.citations),
        )
        return parsed.model_copy(update={"duration_ms": duration_ms})

    # Vendor hooks

    def endpoint(self) -> str:
        raise NotImplementedError

    def build_headers(self, api_key: str) -> dict[str, str]:
        raise NotImplementedError

    def build_payload(self, text: str) -> JsonObject:
        raise NotImplementedError

    def parse_response(self, body: JsonObject) -> ProviderResult:
        """Turn a decoded body into a ProviderResult.

        Raises:
            ProviderQueryError: if the body does not have the expected shape.
        """
        raise NotImplementedError

    def _api_key(self) -> str | None:
        if self._config.api_key:
            return self._config.api_key
        for var in self.api_key_env_vars:
            value = os.environ.get(var)
            if value:
                return value
        return None


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)
