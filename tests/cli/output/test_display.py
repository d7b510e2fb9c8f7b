"""Tests for cli/output/display.py rendering."""

import pytest

from search_compare.cli.output.display import (
    extract_key_points,
    print_coverage,
    print_judge_warning,
    print_ranking,
    print_result,
    print_skipped,
    print_unique_sources,
    strip_thinking_tags,
)
from search_compare.comparison.domain.ranked import RankedResult, SkippedProvider
from search_compare.judge.domain.score import JudgeScore
from search_compare.judge.infrastructure.errors import JudgeInvocationError
from search_compare.provider.domain.citation import Citation
from search_compare.provider.domain.result import ProviderResult
from search_compare.provider.domain.usage import TokenUsage
from tests.provider.fake_provider import FakeProvider


def _make_ranked(
    name: str = "claude",
    display_name: str = "Claude 4.5 Sonnet",
    text: str = "An answer.",
    citations: list[Citation] | None = None,
    error: str | None = None,
    judge_score: JudgeScore | None = None,
    usage: TokenUsage | None = None,
) -> RankedResult:
    return RankedResult(
        provider=FakeProvider(name=name, display_name=display_name, emoji="🟣"),
        result=ProviderResult(
            text=text,
            citations=citations or [],
            error=error,
            usage=usage or TokenUsage(),
            duration_ms=1500,
        ),
        heuristic_score=12,
        judge_score=judge_score,
    )


class TestStripThinkingTags:
    def test_removes_blocks_across_lines(self) -> None:
        text = "<thinking>step one\nstep two</thinking>\n\nFinal answer."

        assert strip_thinking_tags(text) == "Final answer."

    def test_removes_every_block(self) -> None:
        text = "A <thinking>x</thinking> B <thinking>y</thinking>C"

        assert strip_thinking_tags(text) == "A B C"

    def test_text_without_tags_is_trimmed_only(self) -> None:
        assert strip_thinking_tags("  plain  ") == "plain"


class TestPrintResult:
    def test_heuristic_block(self, capsys: pytest.CaptureFixture[str]) -> None:
        ranked = _make_ranked(citations=[Citation(url="https://a", title="Title A")])

        print_result(ranked=ranked, rank=1)

        out = capsys.readouterr().out
        assert "#1 🟣 Claude 4.5 Sonnet (1.5s)" in out
        assert "2 words | 1 citations | score: 12" in out
        assert "[1] Title A" in out
        assert "https://a" in out

    def test_judged_block_shows_dimensions(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        score = JudgeScore(
            quality=8,
            link_health=9,
            recency=7,
            significance=6,
            impact=5,
            overall=7.0,
            reasoning="Good.",
        )

        print_result(ranked=_make_ranked(judge_score=score), rank=2)

        out = capsys.readouterr().out
        assert "judge: 7.0/10" in out
        assert "Quality: 8 | Links: 9 | Recency: 7 | Significance: 6 | Impact: 5" in out
        assert '"Good."' in out

    def test_error_block(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_result(ranked=_make_ranked(error="timeout"), rank=3)

        out = capsys.readouterr().out
        assert "Error: timeout" in out
        assert "words" not in out

    def test_thinking_hidden_unless_requested(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        ranked = _make_ranked(text="<thinking>secret</thinking>Visible")

        print_result(ranked=ranked, rank=1)
        hidden = capsys.readouterr().out
        print_result(ranked=ranked, rank=1, show_thinking=True)
        shown = capsys.readouterr().out

        assert "secret" not in hidden
        assert "Visible" in hidden
        assert "secret" in shown

    def test_cost_line_when_usage_known(self, capsys: pytest.CaptureFixture[str]) -> None:
        ranked = _make_ranked(usage=TokenUsage(input_tokens=1000, output_tokens=1000))

        print_result(ranked=ranked, rank=1)

        assert "$0.0180 (1000 in / 1000 out tokens)" in capsys.readouterr().out


class TestSummaries:
    def test_ranking_names_the_winner(self, capsys: pytest.CaptureFixture[str]) -> None:
        results = [
            _make_ranked(),
            _make_ranked(name="grok", display_name="Grok 4 (xAI)", error="boom"),
        ]

        print_ranking(results=results)

        out = capsys.readouterr().out
        assert "Winner: Claude 4.5 Sonnet" in out
        assert "Grok 4 (xAI)" in out

    def test_no_winner_when_top_result_failed(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_ranking(results=[_make_ranked(error="boom")])

        assert "Winner" not in capsys.readouterr().out

    def test_unique_sources_are_capped(self, capsys: pytest.CaptureFixture[str]) -> None:
        citations = [Citation(url=f"https://s{i}.example") for i in range(12)]

        print_unique_sources(results=[_make_ranked(citations=citations)], limit=10)

        out = capsys.readouterr().out
        assert "All Sources (12 unique across all models)" in out
        assert "https://s9.example" in out
        assert "https://s10.example" not in out
        assert "... and 2 more sources" in out

    def test_source_title_falls_back_to_domain(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        citation = Citation(url="https://x.example/p", domain="x.example")

        print_unique_sources(results=[_make_ranked(citations=[citation])])

        assert "[1] x.example" in capsys.readouterr().out

    def test_skipped_and_judge_warning(self, capsys: pytest.CaptureFixture[str]) -> None:
        print_skipped([SkippedProvider(name="grok", reason="XAI_API_KEY not set")])
        print_judge_warning(JudgeInvocationError(reason="bad json"))

        out = capsys.readouterr().out
        assert "grok: XAI_API_KEY not set" in out
        assert "Failed to score responses: bad json" in out
        assert "heuristic ranking" in out


class TestKeyPoints:
    def test_bullets_are_preferred_and_capped(self) -> None:
        text = "Intro line.\n- first point\n* second point\n• third point\n- fourth point"

        assert extract_key_points(text) == ["first point", "second point", "third point"]

    def test_long_bullet_is_shortened(self) -> None:
        points = extract_key_points("- " + "x" * 150)

        assert len(points[0]) == 100
        assert points[0].endswith("...")

    def test_falls_back_to_mid_length_sentences(self) -> None:
        text = "Short. The launch window opens on Tuesday morning. Too short. " + (
            "Engineers confirmed the booster landed safely on the drone ship"
        )

        assert extract_key_points(text) == [
            "The launch window opens on Tuesday morning",
            "Engineers confirmed the booster landed safely on the drone ship",
        ]

    def test_thinking_blocks_are_ignored(self) -> None:
        text = "<thinking>\n- hidden plan\n</thinking>\n- visible point"

        assert extract_key_points(text) == ["visible point"]


class TestPrintCoverage:
    def test_lists_points_for_successful_results_only(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        print_coverage(
            [
                _make_ranked(text="- rates held steady\n- inflation cooled"),
                _make_ranked(name="grok", display_name="Grok 4 (xAI)", error="boom"),
            ]
        )

        out = capsys.readouterr().out
        assert "Coverage Analysis" in out
        assert "Claude 4.5 Sonnet found:" in out
        assert "   • rates held steady" in out
        assert "   • inflation cooled" in out
        assert "Grok 4 (xAI)" not in out
