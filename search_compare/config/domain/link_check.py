"""Link-check configuration model."""

from pydantic import BaseModel, Field


class LinkCheckConfig(BaseModel, frozen=True):
    timeout_seconds: float = Field(default=5.0, gt=0.0)
