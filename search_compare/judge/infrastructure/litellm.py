"""LiteLLMScorer — scorer implementation using LiteLLM structured output."""

import time

import litellm

from search_compare.config.domain.judge import JudgeConfig
from search_compare.judge.domain.observer import JudgeObserver
from search_compare.judge.domain.score import JudgeEvaluation, JudgeEvaluationBatch
from search_compare.judge.infrastructure.errors import JudgeInvocationError

_SYSTEM_PROMPT = """\
You score web search answers produced by several AI models for the same query. \
Follow the rubric in the user message exactly and judge every model that is \
listed there.

## Output Format

Respond with a JSON object containing:
- evaluations: list with one entry per model, each containing
  - provider: the model name exactly as shown after 'MODEL:'
  - quality: integer score (1-10)
  - recency: integer score (1-10)
  - significance: integer score (1-10)
  - impact: integer score (1-10)
  - reasoning: one or two sentences explaining the scores
"""


class LiteLLMScorer:
    """Scorer that delegates to an LLM via LiteLLM.

    One instance serves a whole comparison run; the judge prompt already
    carries every provider's response.
    """

    def __init__(self, config: JudgeConfig, observer: JudgeObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer

        if config.temperature > 0.0:
            self._observer.judge_high_temperature_warned(
                temperature=config.temperature
            )

    async def evaluate(self, prompt: str) -> list[JudgeEvaluation]:
        """Invoke the LLM and return its per-provider evaluations.

        Raises:
            JudgeInvocationError: if the LLM call fails, or the response is
                empty or cannot be parsed into a non-empty evaluation list.
        """
        self._observer.judge_scoring_started(
            model=self._config.model,
            num_providers=prompt.count("=== MODEL:"),
        )

        start = time.monotonic()
        try:
            response = await litellm.acompletion(
                model=self._config.model,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
                response_format=JudgeEvaluationBatch,
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except Exception as exc:
            reason = str(exc)
            self._observer.judge_scoring_failed(reason=reason)
            raise JudgeInvocationError(reason=reason) from exc

        duration_ms = int((time.monotonic() - start) * 1000)

        raw_content: str | None = response.choices[0].message.content
        if not raw_content:
            reason = "Judge returned an empty response"
            self._observer.judge_scoring_failed(reason=reason)
            raise JudgeInvocationError(reason=reason)

        try:
            batch = JudgeEvaluationBatch.model_validate_json(raw_content)
        except Exception as exc:
            reason = f"Failed to parse judge response: {exc}"
            self._observer.judge_scoring_failed(reason=reason)
            raise JudgeInvocationError(reason=reason) from exc

        self._observer.judge_scoring_completed(
            duration_ms=duration_ms,
            num_evaluations=len(batch.evaluations),
        )

        return list(batch.evaluations)
