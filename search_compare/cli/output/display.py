"""Plain-text rendering of a comparison: per-provider blocks, ranking table, sources."""

import re

import typer

from search_compare.comparison.domain.ranked import (
    RankedResult,
    SkippedProvider,
    unique_sources,
)
from search_compare.judge.infrastructure.errors import JudgeInvocationError
from search_compare.provider.domain.pricing import estimate_cost_usd

# ---------------------------------------------------------------------------
# ANSI helpers
# ---------------------------------------------------------------------------
_RESET = "\033[0m"
_BOLD = "\033[1m"
_DIM = "\033[2m"
_CYAN = "\033[36m"
_YELLOW = "\033[33m"
_GREEN = "\033[32m"
_RED = "\033[31m"
_WHITE = "\033[97m"

_MEDALS = ("🥇", "🥈", "🥉", "  ")
_MAX_REASONING_LEN = 120
_MAX_SOURCES = 10
_MAX_KEY_POINTS = 3
_MAX_POINT_LEN = 100
_BULLETS = ("- ", "* ", "• ")

_THINKING_PATTERN = re.compile(r"<thinking>.*?</thinking>\s*", re.DOTALL)


def strip_thinking_tags(text: str) -> str:
    """Remove every <thinking>...</thinking> block and trim the remainder."""
    return _THINKING_PATTERN.sub("", text).strip()


def _medal(rank: int) -> str:
    return _MEDALS[min(rank - 1, len(_MEDALS) - 1)]


def _rule(width: int = 70, color: str = _DIM) -> None:
    typer.echo(f"{color}{'─' * width}{_RESET}")


def _score_color(score: float) -> str:
    if score >= 7.0:
        return _GREEN
    if score >= 4.0:
        return _YELLOW
    return _RED


def _shorten(text: str, max_len: int) -> str:
    if len(text) <= max_len:
        return text
    return text[: max_len - 3] + "..."


def print_header(query: str) -> None:
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  search-compare  ·  AI web search, side by side{_RESET}")
    _rule(color=_CYAN)
    typer.echo(f"  {_DIM}Query{_RESET}  {_WHITE}{query}{_RESET}")
    typer.echo("")


def print_skipped(skipped: list[SkippedProvider]) -> None:
    if not skipped:
        return
    typer.echo(f"{_YELLOW}Skipping providers (missing credentials):{_RESET}")
    for entry in skipped:
        typer.echo(f"   {entry.name}: {entry.reason}")
    typer.echo("")


def print_judge_warning(error: JudgeInvocationError) -> None:
    typer.echo(f"{_YELLOW}⚠️  {error}{_RESET}")
    typer.echo(f"{_DIM}   Showing heuristic ranking instead.{_RESET}")
    typer.echo("")


def print_result(ranked: RankedResult, rank: int, show_thinking: bool = False) -> None:
    """Render one provider's block: header, stats, scores, text and sources."""
    provider = ranked.provider
    result = ranked.result

    header = f"{_medal(rank)} #{rank} {provider.emoji} {provider.display_name}"
    if result.duration_ms > 0:
        header += f" ({result.duration_ms / 1000:.1f}s)"
    typer.echo(f"┌─ {_BOLD}{header}{_RESET}")

    if not result.ok:
        typer.echo(f"│ {_RED}❌ Error: {result.error}{_RESET}")
        typer.echo("└" + "─" * 60)
        return

    score = ranked.judge_score
    if score is not None:
        color = _score_color(score.overall)
        typer.echo(
            f"│ 📊 {result.word_count} words | {len(result.citations)} citations"
            f" | judge: {color}{score.overall:.1f}/10{_RESET}"
        )
        typer.echo(
            f"│ 🏛️  Quality: {score.quality} | Links: {score.link_health}"
            f" | Recency: {score.recency} | Significance: {score.significance}"
            f" | Impact: {score.impact}"
        )
        if score.reasoning:
            reasoning = _shorten(score.reasoning, _MAX_REASONING_LEN)
            typer.echo(f'│ 💬 {_DIM}"{reasoning}"{_RESET}')
    else:
        typer.echo(
            f"│ 📊 {result.word_count} words | {len(result.citations)} citations"
            f" | score: {ranked.heuristic_score}"
        )

    usage = result.usage
    if usage.input_tokens or usage.output_tokens:
        cost = estimate_cost_usd(provider.name, usage)
        typer.echo(
            f"│ 💰 ${cost:.4f} ({usage.input_tokens} in / {usage.output_tokens} out tokens)"
        )
    typer.echo("│")

    text = result.text if show_thinking else strip_thinking_tags(result.text)
    for line in text.split("\n"):
        typer.echo(f"│ {line}")

    if result.citations:
        typer.echo("│")
        typer.echo("│ 📎 Sources:")
        for index, citation in enumerate(result.citations, start=1):
            if citation.title:
                typer.echo(f"│   [{index}] {citation.title}")
                typer.echo(f"│       {_DIM}{citation.url}{_RESET}")
            else:
                typer.echo(f"│   [{index}] {citation.url}")

    typer.echo("└" + "─" * 60)


def print_ranking(results: list[RankedResult]) -> None:
    """Render the ranking table, total estimated cost, and the winner."""
    typer.echo("")
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  Ranking & Performance{_RESET}")
    _rule(color=_CYAN)

    total_cost = 0.0
    for rank, ranked in enumerate(results, start=1):
        provider = ranked.provider
        result = ranked.result
        status = "✅" if result.ok else "❌"
        cost = estimate_cost_usd(provider.name, result.usage)
        total_cost += cost
        judge = (
            f"{ranked.judge_score.overall:4.1f}"
            if ranked.judge_score is not None
            else " n/a"
        )
        typer.echo(
            f"  {_medal(rank)} {provider.emoji} {provider.display_name:<22} {status}"
            f" │ {result.word_count:4d} words │ {len(result.citations):2d} cites"
            f" │ {judge} │ ~${cost:.4f}"
        )

    _rule()
    typer.echo(f"  💰 Total est. cost: ~${total_cost:.4f}")
    if results and results[0].result.ok:
        typer.echo(
            f"  {_GREEN}{_BOLD}🏆 Winner: {results[0].provider.display_name}{_RESET}"
        )
    typer.echo(f"  {_DIM}Costs are estimates; search and grounding fees vary by provider.{_RESET}")
    typer.echo("")


def extract_key_points(text: str, max_points: int = _MAX_KEY_POINTS) -> list[str]:
    """Pick up to ``max_points`` bullet lines, else the first mid-length sentences."""
    text = strip_thinking_tags(text)

    points: list[str] = []
    for line in text.split("\n"):
        line = line.strip()
        bullet = next((b for b in _BULLETS if line.startswith(b)), None)
        if bullet is None:
            continue
        points.append(_shorten(line[len(bullet) :], _MAX_POINT_LEN))
        if len(points) >= max_points:
            return points
    if points:
        return points

    # Only the first dozen sentences are considered.
    for sentence in text.split(". ")[:12]:
        sentence = sentence.strip()
        if 20 < len(sentence) < 150:
            points.append(sentence)
            if len(points) >= max_points:
                break
    return points


def print_coverage(results: list[RankedResult]) -> None:
    """Render the key points each successful provider found."""
    _rule(color=_CYAN)
    typer.echo(f"{_CYAN}{_BOLD}  Combined Intelligence{_RESET}")
    _rule(color=_CYAN)
    typer.echo("📊 Coverage Analysis:")
    for ranked in results:
        if not ranked.result.ok:
            continue
        typer.echo("")
        typer.echo(f"{ranked.provider.emoji} {ranked.provider.display_name} found:")
        for point in extract_key_points(ranked.result.text):
            typer.echo(f"   • {point}")
    typer.echo("")


def print_unique_sources(results: list[RankedResult], limit: int = _MAX_SOURCES) -> None:
    """Render every distinct citation across successful results, first ``limit`` shown."""
    sources = unique_sources(results)
    if not sources:
        return

    typer.echo(f"🌐 All Sources ({len(sources)} unique across all models):")
    _rule()
    for index, citation in enumerate(sources[:limit], start=1):
        title = citation.title or citation.domain or "(no title)"
        typer.echo(f"   [{index}] {title}")
        typer.echo(f"       {_DIM}{citation.url}{_RESET}")
    if len(sources) > limit:
        typer.echo(f"   ... and {len(sources) - limit} more sources")
    typer.echo("")
