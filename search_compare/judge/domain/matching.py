"""Matching judge evaluations back to the providers they describe."""

from search_compare.judge.domain.score import JudgeEvaluation
from search_compare.provider.domain.provider import Provider


def match_evaluation(
    provider: Provider, evaluations: list[JudgeEvaluation]
) -> JudgeEvaluation | None:
    """Find the evaluation for ``provider``.

    Tried in order: exact display-name match, then a case-insensitive substring
    match (label contains the short name, or the display name contains the
    label). Returns None when neither matches. Two providers with similar
    display names can both match the same label.
    """
    by_label = {evaluation.provider: evaluation for evaluation in evaluations}

    exact = by_label.get(provider.display_name)
    if exact is not None:
        return exact

    short_name = provider.name.lower()
    display_name = provider.display_name.lower()
    for label, evaluation in by_label.items():
        lowered = label.lower()
        if short_name in lowered or lowered in display_name:
            return evaluation

    return None
