"""Judge — validates citations, scores results with an LLM, and re-ranks them."""

from search_compare.comparison.domain.ranked import RankedResult
from search_compare.core.fanout import gather_all
from search_compare.judge.domain.matching import match_evaluation
from search_compare.judge.domain.observer import JudgeObserver
from search_compare.judge.domain.outcome import JudgeOutcome
from search_compare.judge.domain.prompt import build_judge_prompt
from search_compare.judge.domain.score import JudgeEvaluation, JudgeScore
from search_compare.judge.domain.scorer import Scorer
from search_compare.judge.infrastructure.errors import JudgeInvocationError
from search_compare.linkcheck.application.validator import LinkValidator
from search_compare.linkcheck.domain.check import (
    CitationCheck,
    count_healthy,
    link_health_score,
)


class Judge:
    """Scores a comparison's results in three phases.

    1. Every non-error result's citations are probed concurrently.
    2. One prompt covering all non-error results is sent to the scorer.
    3. Evaluations are matched back to providers, combined with link health
       into a JudgeScore, and the results re-sorted by overall score.

    A scorer failure is returned in the outcome rather than raised, so the
    caller can still show the heuristic ranking.
    """

    def __init__(
        self, validator: LinkValidator, scorer: Scorer, observer: JudgeObserver
    ) -> None:
        self._validator = validator
        self._scorer = scorer
        self._observer = observer

    async def run(self, query: str, results: list[RankedResult]) -> JudgeOutcome:
        usable = [ranked for ranked in results if ranked.result.ok]
        if not usable:
            self._observer.judge_skipped(reason="no successful results to judge")
            return JudgeOutcome(results=list(results))

        checks = await self._validate_links(usable)

        prompt = build_judge_prompt(query=query, results=results, checks=checks)
        try:
            evaluations = await self._scorer.evaluate(prompt=prompt)
        except JudgeInvocationError as exc:
            return JudgeOutcome(results=list(results), error=exc)

        scored = [
            self._score(ranked=ranked, evaluations=evaluations, checks=checks)
            for ranked in results
        ]
        scored.sort(key=lambda ranked: ranked.overall, reverse=True)
        return JudgeOutcome(results=scored)

    async def _validate_links(
        self, usable: list[RankedResult]
    ) -> dict[str, list[CitationCheck]]:
        per_provider = await gather_all(
            usable, lambda ranked: self._validator.validate(ranked.result.citations)
        )

        checks: dict[str, list[CitationCheck]] = {}
        for ranked, provider_checks in zip(usable, per_provider, strict=True):
            checks[ranked.provider.name] = provider_checks
            self._observer.judge_links_validated(
                provider=ranked.provider.name,
                healthy=count_healthy(provider_checks),
                total=len(provider_checks),
            )
        return checks

    def _score(
        self,
        ranked: RankedResult,
        evaluations: list[JudgeEvaluation],
        checks: dict[str, list[CitationCheck]],
    ) -> RankedResult:
        if not ranked.result.ok:
            return ranked

        link_health = link_health_score(checks.get(ranked.provider.name, []))
        evaluation = match_evaluation(ranked.provider, evaluations)
        if evaluation is None:
            self._observer.judge_evaluation_unmatched(provider=ranked.provider.name)
            return ranked.with_judge_score(JudgeScore.link_health_only(link_health))

        return ranked.with_judge_score(
            JudgeScore.from_evaluation(evaluation, link_health=link_health)
        )
