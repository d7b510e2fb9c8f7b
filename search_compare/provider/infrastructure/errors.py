"""Error types raised by provider infrastructure."""

from search_compare.core.errors import SearchCompareError


class ProviderAuthError(SearchCompareError):
    """Raised by check_auth when a provider lacks the credentials it needs."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"Failed to authenticate provider '{provider}': {reason}")


class ProviderQueryError(SearchCompareError):
    """Raised inside an adapter when a vendor call or its response parsing fails."""

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"Failed to query provider '{provider}': {reason}")


class ProviderNotFoundError(SearchCompareError):
    """Raised when a provider name is not present in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Failed to find provider '{name}': available providers are"
            f" {', '.join(available) or 'none'}"
        )


class ProviderTypeNotSupportedError(SearchCompareError):
    """Raised when the config names a provider with no adapter."""

    def __init__(self, provider_type: str) -> None:
        super().__init__(
            f"Failed to create provider: unsupported provider type '{provider_type}'"
        )
