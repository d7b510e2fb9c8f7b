"""Error types raised by link-check infrastructure."""

from search_compare.core.errors import SearchCompareError


class LinkProbeError(SearchCompareError):
    """Raised when a citation URL cannot be probed at all."""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(f"Failed to probe link '{url}': {reason}")
