"""Tests for the judge-free heuristic score."""

from search_compare.comparison.domain.heuristic import heuristic_score
from search_compare.provider.domain.citation import Citation
from search_compare.provider.domain.result import ProviderResult


def _make_result(words: int = 0, citations: int = 0) -> ProviderResult:
    return ProviderResult(
        text=" ".join(["word"] * words),
        citations=[Citation(url=f"https://c{i}.example") for i in range(citations)],
    )


class TestHeuristicScore:
    def test_errored_result_scores_zero(self) -> None:
        result = ProviderResult(
            text="plenty of words here",
            citations=[Citation(url="https://a")],
            error="boom",
        )

        assert heuristic_score(result) == 0

    def test_citations_worth_ten_each(self) -> None:
        assert heuristic_score(_make_result(citations=3)) == 30

    def test_one_point_per_ten_words(self) -> None:
        assert heuristic_score(_make_result(words=59)) == 5

    def test_word_points_are_capped_at_fifty(self) -> None:
        assert heuristic_score(_make_result(words=5000)) == 50

    def test_combined(self) -> None:
        # 2 citations * 10 + 120 words // 10
        assert heuristic_score(_make_result(words=120, citations=2)) == 32

    def test_more_citations_never_lowers_score(self) -> None:
        scores = [heuristic_score(_make_result(words=80, citations=n)) for n in range(6)]

        assert scores == sorted(scores)
        assert len(set(scores)) == len(scores)

    def test_more_words_never_lowers_score(self) -> None:
        scores = [heuristic_score(_make_result(words=n * 37)) for n in range(30)]

        assert scores == sorted(scores)
