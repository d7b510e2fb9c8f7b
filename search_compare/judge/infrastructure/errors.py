"""Error types raised by judge infrastructure."""

from search_compare.core.errors import SearchCompareError


class JudgeInvocationError(SearchCompareError):
    """Raised when the judge cannot be invoked or returns unusable structured output."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Failed to score responses: {reason}")
