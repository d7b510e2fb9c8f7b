"""ProviderRegistry — explicit name → Provider lookup built once at startup."""

import httpx

from search_compare.config.domain.provider import ProviderConfig
from search_compare.provider.domain.observer import ProviderObserver
from search_compare.provider.domain.provider import Provider
from search_compare.provider.infrastructure.claude import ClaudeProvider
from search_compare.provider.infrastructure.errors import (
    ProviderNotFoundError,
    ProviderTypeNotSupportedError,
)
from search_compare.provider.infrastructure.gemini import GeminiProvider
from search_compare.provider.infrastructure.grok import GrokProvider
from search_compare.provider.infrastructure.nova import NovaProvider
from search_compare.provider.infrastructure.rest import RestProvider

_REST_ADAPTERS: dict[str, type[RestProvider]] = {
    ClaudeProvider.name: ClaudeProvider,
    GeminiProvider.name: GeminiProvider,
    GrokProvider.name: GrokProvider,
}


class ProviderRegistry:
    """Holds the providers available to one process. Registration order is irrelevant."""

    def __init__(self) -> None:
        self._providers: dict[str, Provider] = {}

    def register(self, provider: Provider) -> None:
        """Add provider, replacing any earlier provider with the same name."""
        self._providers[provider.name] = provider

    def get(self, name: str) -> Provider | None:
        return self._providers.get(name)

    def require(self, name: str) -> Provider:
        """Return the named provider.

        Raises:
            ProviderNotFoundError: if no provider with that name is registered.
        """
        provider = self.get(name)
        if provider is None:
            raise ProviderNotFoundError(name=name, available=self.list_names())
        return provider

    def list_names(self) -> list[str]:
        return sorted(self._providers)

    def providers(self) -> list[Provider]:
        """Return all providers in name order."""
        return [self._providers[name] for name in self.list_names()]


def create_provider_registry(
    configs: dict[str, ProviderConfig],
    observer: ProviderObserver,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProviderRegistry:
    """Build a registry with one adapter per configured provider name.

    Raises:
        ProviderTypeNotSupportedError: if a configured name has no adapter.
    """
    registry = ProviderRegistry()
    for name, config in configs.items():
        registry.register(
            _create_provider(
                name=name, config=config, observer=observer, transport=transport
            )
        )
    return registry


def _create_provider(
    name: str,
    config: ProviderConfig,
    observer: ProviderObserver,
    transport: httpx.AsyncBaseTransport | None,
) -> Provider:
    if name == NovaProvider.name:
        return NovaProvider(config=config, observer=observer)

    adapter = _REST_ADAPTERS.get(name)
    if adapter is None:
        raise ProviderTypeNotSupportedError(provider_type=name)
    return adapter(config=config, observer=observer, transport=transport)
