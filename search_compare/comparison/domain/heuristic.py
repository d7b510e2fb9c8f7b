"""Judge-free heuristic score used for the initial ranking."""

from search_compare.provider.domain.result import ProviderResult

CITATION_POINTS = 10
WORDS_PER_POINT = 10
MAX_WORD_POINTS = 50


def heuristic_score(result: ProviderResult) -> int:
    """Score a result from its citation and word counts; errored results score 0."""
    if not result.ok:
        return 0
    word_points = min(result.word_count // WORDS_PER_POINT, MAX_WORD_POINTS)
    return len(result.citations) * CITATION_POINTS + word_points
