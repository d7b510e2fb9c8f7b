"""Provider Protocol — structural interface for all web-grounded search backends."""

from typing import Protocol

from search_compare.provider.domain.result import ProviderResult


class Provider(Protocol):
    """Structural interface satisfied by every vendor adapter.

    ``query`` never raises for vendor failures: network, HTTP and parse errors
    are captured in ``ProviderResult.error``.
    """

    name: str
    display_name: str
    emoji: str

    def check_auth(self) -> None:
        """Raise ProviderAuthError if the provider's credentials are missing."""
        ...

    async def query(self, text: str, verbose: bool = False) -> ProviderResult: ...
