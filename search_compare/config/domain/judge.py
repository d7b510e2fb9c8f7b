"""Judge configuration model."""

from pydantic import BaseModel, Field

DEFAULT_JUDGE_MODEL = "anthropic/claude-haiku-4-5-20251001"


class JudgeConfig(BaseModel, frozen=True):
    model: str = Field(default=DEFAULT_JUDGE_MODEL, min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    max_tokens: int = Field(default=2048, gt=0)
