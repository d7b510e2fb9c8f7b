"""Provider adapter configuration model."""

from pydantic import BaseModel, Field


class ProviderConfig(BaseModel, frozen=True):
    """Settings for one vendor adapter. Unset fields fall back to adapter defaults."""

    model: str | None = Field(default=None, min_length=1)
    api_key: str | None = None
    timeout_seconds: float = Field(default=300.0, gt=0.0)
