"""Scorer Protocol — the structured-output LLM call behind the judge."""

from typing import Protocol

from search_compare.judge.domain.score import JudgeEvaluation


class Scorer(Protocol):
    """Turns an evaluation prompt into a non-empty list of JudgeEvaluations.

    Raises JudgeInvocationError when the LLM is unreachable or its structured
    output is malformed or empty.
    """

    async def evaluate(self, prompt: str) -> list[JudgeEvaluation]: ...
