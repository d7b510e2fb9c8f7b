"""HttpxLinkProber — HEAD probing over httpx with redirect following."""

import httpx

from search_compare.linkcheck.infrastructure.errors import LinkProbeError

DEFAULT_TIMEOUT_SECONDS = 5.0


class HttpxLinkProber:
    """Satisfies the LinkProber protocol using one short-lived AsyncClient per probe."""

    def __init__(
        self,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._transport = transport

    async def head(self, url: str) -> int:
        """Return the final status code for a HEAD request to ``url``.

        Raises:
            LinkProbeError: on an unparseable URL or host, a timeout, or a
                transport failure.
        """
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout_seconds,
                follow_redirects=True,
                transport=self._transport,
            ) as client:
                response = await client.head(url)
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            # ValueError covers host names the IDNA codec rejects.
            raise LinkProbeError(url=url, reason=str(exc) or type(exc).__name__) from exc

        return response.status_code
