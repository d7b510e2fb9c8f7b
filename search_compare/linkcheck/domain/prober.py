"""LinkProber Protocol — the outbound existence check used by link validation."""

from typing import Protocol


class LinkProber(Protocol):
    """Issues a body-less existence probe against a URL, following redirects.

    Returns the final status code. Raises LinkProbeError when no response
    could be obtained.
    """

    async def head(self, url: str) -> int: ...
