"""Builds the single evaluation prompt sent to the scoring LLM."""

from search_compare.comparison.domain.ranked import RankedResult
from search_compare.linkcheck.domain.check import (
    CitationCheck,
    count_healthy,
    link_health_score,
)

MAX_RESPONSE_WORDS = 500
TRUNCATION_MARKER = "..."

_RUBRIC = """\
You are a news editor evaluating web search results from multiple AI models.

QUERY: {query}

For EACH model below, score these dimensions from 1-10:
- quality: depth, coherence, and factual accuracy of the response
- recency: how current the information and cited sources are \
(today > this week > this month > older)
- significance: is this newsworthy and substantial? Would it make major outlets?
- impact: how impactful is this to the relevant business, industry, or topic?

Citation links have already been validated; each model's link health score \
is listed with its citations.

"""

_CLOSING = (
    "Return one evaluation per model, in the same order presented above. Set "
    "each evaluation's provider field to the model name exactly as shown after "
    "'MODEL:'.\n"
)


def truncate_words(text: str, limit: int = MAX_RESPONSE_WORDS) -> str:
    """Keep the first ``limit`` whitespace-delimited words, marking any cut."""
    words = text.split()
    if len(words) <= limit:
        return text
    return " ".join(words[:limit]) + TRUNCATION_MARKER


def citation_status(check: CitationCheck | None) -> str:
    """Describe one probe outcome for the prompt: '200 OK', '404', 'error' or 'unknown'."""
    if check is None:
        return "unknown"
    if check.healthy:
        return f"{check.status_code} OK"
    if check.error:
        return "error"
    return str(check.status_code)


def build_judge_prompt(
    query: str,
    results: list[RankedResult],
    checks: dict[str, list[CitationCheck]],
) -> str:
    """Render the rubric plus one block per non-error result.

    ``checks`` maps provider name to the index-aligned probes of that
    provider's citations.
    """
    sections = [_RUBRIC.format(query=f'"{query}"')]

    for ranked in results:
        if not ranked.result.ok:
            continue
        sections.append(
            _provider_section(
                ranked=ranked, checks=checks.get(ranked.provider.name, [])
            )
        )

    sections.append(_CLOSING)
    return "".join(sections)


def _provider_section(ranked: RankedResult, checks: list[CitationCheck]) -> str:
    result = ranked.result
    lines = [
        f"=== MODEL: {ranked.provider.display_name} ===",
        f"Response ({result.word_count} words, {len(result.citations)} citations):",
        truncate_words(result.text),
        "",
        f"Citations ({count_healthy(checks)}/{len(result.citations)} links working):",
    ]
    for index, citation in enumerate(result.citations):
        check = checks[index] if index < len(checks) else None
        lines.append(f"  {index + 1}. {citation.url} - {citation_status(check)}")
    lines.append(f"Link Health Score: {link_health_score(checks)}/10")
    lines.append("===")
    return "\n".join(lines) + "\n\n"
