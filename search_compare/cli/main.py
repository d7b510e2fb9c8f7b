"""CLI entrypoint for search-compare — typer app with a `search` command."""

import asyncio
import logging
import sys
from pathlib import Path

import structlog
import typer

from search_compare.cli.output.display import (
    print_header,
    print_coverage,
    print_judge_warning,
    print_ranking,
    print_result,
    print_skipped,
    print_unique_sources,
)
from search_compare.comparison.application.orchestrator import Orchestrator
from search_compare.comparison.domain.observer import ComparisonObserver
from search_compare.comparison.domain.ranked import ComparisonOutcome, RankedResult
from search_compare.comparison.infrastructure.composite_observer import (
    CompositeComparisonObserver,
)
from search_compare.comparison.infrastructure.observer import (
    StructlogComparisonObserver,
)
from search_compare.comparison.infrastructure.progress_observer import (
    ProgressComparisonObserver,
)
from search_compare.config.domain.config import SearchConfig
from search_compare.config.infrastructure.observer import StructlogConfigObserver
from search_compare.config.infrastructure.yaml_loader import YamlConfigLoader
from search_compare.core.errors import SearchCompareError
from search_compare.judge.application.judge import Judge
from search_compare.judge.domain.outcome import JudgeOutcome
from search_compare.judge.infrastructure.litellm import LiteLLMScorer
from search_compare.judge.infrastructure.observer import StructlogJudgeObserver
from search_compare.linkcheck.application.validator import LinkValidator
from search_compare.linkcheck.infrastructure.httpx_prober import HttpxLinkProber
from search_compare.provider.infrastructure.observer import StructlogProviderObserver
from search_compare.provider.infrastructure.registry import create_provider_registry

ALL_PROVIDERS = "all"

app = typer.Typer(add_completion=False)


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog based on the requested format and verbosity."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = logging.DEBUG if verbose else logging.WARNING
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> SearchConfig:
    if config_path is None:
        return SearchConfig()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


async def _compare(
    config: SearchConfig,
    query: str,
    model: str,
    judge: bool,
    verbose: bool,
    show_progress: bool,
) -> tuple[ComparisonOutcome, JudgeOutcome | None]:
    """Run the comparison and, in all-providers mode, the judge."""
    registry = create_provider_registry(
        configs=config.providers, observer=StructlogProviderObserver()
    )

    observers: list[ComparisonObserver] = [StructlogComparisonObserver()]
    if show_progress:
        observers.append(ProgressComparisonObserver())
    orchestrator = Orchestrator(
        registry=registry,
        observer=CompositeComparisonObserver(observers=observers),
        query_timeout_seconds=config.query_timeout_seconds,
    )

    if model == ALL_PROVIDERS:
        outcome = await orchestrator.run_all(query=query, verbose=verbose)
    else:
        outcome = await orchestrator.run_one(name=model, query=query, verbose=verbose)

    if outcome.is_empty or not judge or model != ALL_PROVIDERS:
        return outcome, None

    judge_observer = StructlogJudgeObserver()
    service = Judge(
        validator=LinkValidator(
            prober=HttpxLinkProber(timeout_seconds=config.link_check.timeout_seconds)
        ),
        scorer=LiteLLMScorer(config=config.judge, observer=judge_observer),
        observer=judge_observer,
    )
    return outcome, await service.run(query=query, results=outcome.results)


def _print_outcome(
    outcome: ComparisonOutcome,
    judge_outcome: JudgeOutcome | None,
    show_thinking: bool,
) -> None:
    results: list[RankedResult] = outcome.results
    if judge_outcome is not None:
        if judge_outcome.error is not None:
            print_judge_warning(judge_outcome.error)
        results = judge_outcome.results

    for rank, ranked in enumerate(results, start=1):
        print_result(ranked=ranked, rank=rank, show_thinking=show_thinking)
        typer.echo("")

    if len(results) > 1:
        print_ranking(results=results)
        print_coverage(results=results)
        print_unique_sources(results=results)


@app.command()
def search(
    query: str = typer.Option(..., "--query", "-q", help="Question to ask"),
    model: str = typer.Option(
        ALL_PROVIDERS,
        "--model",
        "-m",
        help="Provider to run (nova, claude, gemini, grok) or 'all'",
    ),
    judge: bool = typer.Option(
        True,
        "--judge/--no-judge",
        help="Validate citations and score results with an LLM judge",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging and timing details"
    ),
    thinking: bool = typer.Option(
        False, "--thinking", help="Show the model's <thinking> traces"
    ),
    config_path: Path | None = typer.Option(
        None, "--config", "-c", help="Path to a search-compare config YAML"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Ask several web-search-capable AI providers the same question and compare them."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    try:
        config = _load_config(config_path=config_path)

        print_header(query=query)
        outcome, judge_outcome = asyncio.run(
            _compare(
                config=config,
                query=query,
                model=model,
                judge=judge,
                verbose=verbose,
                show_progress=log_format != "json",
            )
        )

        print_skipped(skipped=outcome.skipped)
        if outcome.is_empty:
            typer.echo("No providers available to run. Set at least one API key.")
            sys.exit(1)

        _print_outcome(
            outcome=outcome,
            judge_outcome=judge_outcome,
            show_thinking=thinking or verbose,
        )
        if outcome.all_failed:
            sys.exit(1)

    except KeyboardInterrupt:
        typer.echo("Search interrupted.")
        sys.exit(1)
    except SearchCompareError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


if __name__ == "__main__":
    app()
