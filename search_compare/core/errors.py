"""Base exception class for all search-compare-specific errors."""


class SearchCompareError(Exception):
    """Base class for all search-compare errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
