"""Top-level SearchConfig aggregate — the root configuration object."""

from typing import TypeAlias

from pydantic import BaseModel, Field

from search_compare.config.domain.judge import JudgeConfig
from search_compare.config.domain.link_check import LinkCheckConfig
from search_compare.config.domain.provider import ProviderConfig

ProviderName: TypeAlias = str

DEFAULT_PROVIDERS: tuple[ProviderName, ...] = ("nova", "claude", "gemini", "grok")


def _default_providers() -> dict[ProviderName, ProviderConfig]:
    return {name: ProviderConfig() for name in DEFAULT_PROVIDERS}


class SearchConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a search-compare run.

    Every field has a default, so an absent config file means "all built-in
    providers with their vendor defaults".
    """

    query_timeout_seconds: float | None = Field(default=None, gt=0.0)
    judge: JudgeConfig = Field(default_factory=JudgeConfig)
    link_check: LinkCheckConfig = Field(default_factory=LinkCheckConfig)
    providers: dict[ProviderName, ProviderConfig] = Field(
        default_factory=_default_providers, min_length=1
    )
