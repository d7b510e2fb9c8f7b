"""Judge scoring models — per-provider evaluations and the weighted JudgeScore."""

from pydantic import BaseModel, ConfigDict, Field

SCORE_WEIGHTS: dict[str, float] = {
    "quality": 0.25,
    "link_health": 0.15,
    "recency": 0.20,
    "significance": 0.20,
    "impact": 0.20,
}

NO_EVALUATION_REASONING = "Judge did not return an evaluation for this provider"


class JudgeEvaluation(BaseModel):
    """One provider's qualitative scores as returned by the scoring LLM.

    ``provider`` is the label the judge used; it is matched back to a provider
    by name, so it may not be exactly the display name that was sent.
    """

    model_config = ConfigDict(frozen=True)

    provider: str = Field(min_length=1)
    quality: int = Field(ge=1, le=10)
    recency: int = Field(ge=1, le=10)
    significance: int = Field(ge=1, le=10)
    impact: int = Field(ge=1, le=10)
    reasoning: str


class JudgeEvaluationBatch(BaseModel):
    """Structured-output envelope requested from the scoring LLM."""

    model_config = ConfigDict(frozen=True)

    evaluations: list[JudgeEvaluation] = Field(min_length=1)


class JudgeScore(BaseModel):
    """Final score attached to a provider's result after judging.

    The judge-derived dimensions are 0 when the judge returned no evaluation
    for the provider; ``overall`` then equals ``link_health``.
    """

    model_config = ConfigDict(frozen=True)

    quality: int = Field(ge=0, le=10)
    link_health: int = Field(ge=1, le=10)
    recency: int = Field(ge=0, le=10)
    significance: int = Field(ge=0, le=10)
    impact: int = Field(ge=0, le=10)
    overall: float = Field(ge=1.0, le=10.0)
    reasoning: str

    @classmethod
    def from_evaluation(
        cls, evaluation: JudgeEvaluation, link_health: int
    ) -> "JudgeScore":
        return cls(
            quality=evaluation.quality,
            link_health=link_health,
            recency=evaluation.recency,
            significance=evaluation.significance,
            impact=evaluation.impact,
            overall=weighted_overall(
                quality=evaluation.quality,
                link_health=link_health,
                recency=evaluation.recency,
                significance=evaluation.significance,
                impact=evaluation.impact,
            ),
            reasoning=evaluation.reasoning,
        )

    @classmethod
    def link_health_only(cls, link_health: int) -> "JudgeScore":
        return cls(
            quality=0,
            link_health=link_health,
            recency=0,
            significance=0,
            impact=0,
            overall=float(link_health),
            reasoning=NO_EVALUATION_REASONING,
        )


def weighted_overall(
    quality: int, link_health: int, recency: int, significance: int, impact: int
) -> float:
    total = (
        quality * SCORE_WEIGHTS["quality"]
        + link_health * SCORE_WEIGHTS["link_health"]
        + recency * SCORE_WEIGHTS["recency"]
        + significance * SCORE_WEIGHTS["significance"]
        + impact * SCORE_WEIGHTS["impact"]
    )
    # Rounded so float noise cannot push the sum outside [1, 10].
    return round(total, 4)
