"""Shared HTTP plumbing for the REST-based vendor adapters."""

from typing import Any, TypeAlias

import httpx

from search_compare.provider.infrastructure.errors import ProviderQueryError

JsonObject: TypeAlias = dict[str, Any]


async def post_json(
    provider: str,
    url: str,
    payload: JsonObject,
    headers: dict[str, str],
    timeout_seconds: float,
    transport: httpx.AsyncBaseTransport | None = None,
) -> JsonObject:
    """POST ``payload`` and return the decoded JSON object.

    Raises:
        ProviderQueryError: on transport failure, a non-200 status, or a body
            that is not a JSON object.
    """
    try:
        async with httpx.AsyncClient(
            timeout=timeout_seconds, transport=transport
        ) as client:
            response = await client.post(url, json=payload, headers=headers)
    except httpx.HTTPError as exc:
        raise ProviderQueryError(provider=provider, reason=f"API error: {exc}") from exc

    if response.status_code != httpx.codes.OK:
        raise ProviderQueryError(
            provider=provider,
            reason=f"API error (status {response.status_code}): {response.text}",
        )

    try:
        body = response.json()
    except ValueError as exc:
        raise ProviderQueryError(provider=provider, reason=f"parse error: {exc}") from exc

    if not isinstance(body, dict):
        raise ProviderQueryError(
            provider=provider, reason="parse error: response is not a JSON object"
        )
    return body
