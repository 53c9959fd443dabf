from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, TypedDict

import typer
import yaml

from . import __version__
from .config import AnalyzerConfig, load_config
from .console import StreamConsole
from .models import AnalysisReport
from .pipeline import analyze_passage
from .report import render_banner, render_footer, render_report
from .session import run_demonstration, run_session

LOGGER = logging.getLogger(__name__)

app = typer.Typer(help="Writing Helper passage analysis CLI.")


class StructurePayload(TypedDict):
    sentence_count: int
    comma_count: int
    semicolon_count: int
    average_sentence_length: float
    tier: str


class MetricsPayload(TypedDict):
    total_count: int
    total_characters: int
    min_length: int
    max_length: int
    average_length: float
    advanced_count: int
    advanced_ratio: float
    structure: StructurePayload


class RecommendationPayload(TypedDict):
    vocabulary_tier: str
    vocabulary_advice: List[str]
    structural_tier: str
    structural_advice: List[str]


class VocabularyPayload(TypedDict):
    basic_total: int
    advanced_total: int
    basic: List[str]
    advanced: List[str]


class AnalysisPayload(TypedDict):
    passage_length: int
    token_count: int
    has_content: bool
    score: float | None
    metrics: MetricsPayload | None
    recommendations: RecommendationPayload | None
    vocabulary_sample: VocabularyPayload | None


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    config: Path | None = typer.Option(
        None, "--config", "-c", exists=True, dir_okay=False, readable=True
    ),
    log_level: str | None = typer.Option(
        None, "--log-level", help="Logging level for diagnostics on stderr (e.g. INFO)."
    ),
) -> None:
    """Analyze a passage interactively when no command is given."""
    if log_level:
        logging.basicConfig(
            level=_resolve_log_level(log_level),
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
            force=True,
        )
    ctx.obj = _load_cli_config(config)
    if ctx.invoked_subcommand is None:
        raise typer.Exit(code=run_session(StreamConsole(), ctx.obj))


@app.command()
def interactive(ctx: typer.Context) -> None:
    """Show the menu and analyze a typed passage or the built-in sample."""
    raise typer.Exit(code=run_session(StreamConsole(), ctx.obj))


@app.command()
def demo(ctx: typer.Context) -> None:
    """Analyze the built-in sample passage."""
    console = StreamConsole()
    console.write_lines(render_banner(__version__))
    run_demonstration(console, ctx.obj)
    console.write_lines(render_footer())


@app.command()
def analyze(
    ctx: typer.Context,
    input_path: Path | None = typer.Option(
        None,
        exists=True,
        readable=True,
        dir_okay=False,
        help="Text file to analyze; reads stdin when omitted.",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Emit a JSON summary instead of the text report."
    ),
) -> None:
    """Analyze a passage from a file or stdin without prompting."""
    cfg: AnalyzerConfig = ctx.obj
    if input_path is not None:
        raw_text = input_path.read_text(encoding="utf-8")
    else:
        raw_text = typer.get_text_stream("stdin").read()
    passage = _join_lines(raw_text)
    LOGGER.info("Analyzing %d characters from %s.", len(passage), input_path or "stdin")
    report = analyze_passage(passage, cfg)

    if json_output:
        typer.echo(json.dumps(_build_payload(report), indent=2, ensure_ascii=False))
        return
    for line in render_report(report, cfg):
        typer.echo(line)


@app.command("print-config")
def print_config(ctx: typer.Context) -> None:
    """Print the active configuration as YAML."""
    cfg: AnalyzerConfig = ctx.obj
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


def _load_cli_config(path: Path | None) -> AnalyzerConfig:
    """Load configuration, reporting unreadable YAML as a bad parameter."""
    try:
        return load_config(path)
    except (ValueError, TypeError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc


def _resolve_log_level(name: str) -> int:
    """Translate a level name such as 'info' into its numeric logging level."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise typer.BadParameter(
            f"Unknown logging level '{name}'.", param_hint="--log-level"
        )
    return level


def _join_lines(raw_text: str) -> str:
    """Join non-blank lines with single spaces, as the interactive prompt does."""
    return " ".join(line for line in raw_text.splitlines() if line)


def _build_payload(report: AnalysisReport) -> AnalysisPayload:
    """Create a JSON-serializable summary of an analysis report."""
    metrics_payload: MetricsPayload | None = None
    if report.metrics is not None:
        metrics = report.metrics
        structure = metrics.structure
        metrics_payload = {
            "total_count": metrics.total_count,
            "total_characters": metrics.total_characters,
            "min_length": metrics.min_length,
            "max_length": metrics.max_length,
            "average_length": round(metrics.average_length, 2),
            "advanced_count": metrics.advanced_count,
            "advanced_ratio": round(metrics.advanced_ratio, 2),
            "structure": {
                "sentence_count": structure.sentence_count,
                "comma_count": structure.comma_count,
                "semicolon_count": structure.semicolon_count,
                "average_sentence_length": round(structure.average_sentence_length, 1),
                "tier": structure.tier,
            },
        }

    recommendation_payload: RecommendationPayload | None = None
    if report.recommendations is not None:
        vocabulary = report.recommendations.vocabulary
        recommendation_payload = {
            "vocabulary_tier": vocabulary.tier,
            "vocabulary_advice": [
                vocabulary.assessment,
                vocabulary.recommendation,
                vocabulary.strategy,
                vocabulary.example,
            ],
            "structural_tier": report.recommendations.structure.tier,
            "structural_advice": list(report.recommendations.structure.advice),
        }

    vocabulary_payload: VocabularyPayload | None = None
    if report.vocabulary_sample is not None:
        sample = report.vocabulary_sample
        vocabulary_payload = {
            "basic_total": sample.basic_total,
            "advanced_total": sample.advanced_total,
            "basic": list(sample.basic),
            "advanced": list(sample.advanced),
        }

    return {
        "passage_length": len(report.passage),
        "token_count": len(report.tokens),
        "has_content": report.has_content,
        "score": round(report.score, 2) if report.score is not None else None,
        "metrics": metrics_payload,
        "recommendations": recommendation_payload,
        "vocabulary_sample": vocabulary_payload,
    }


if __name__ == "__main__":
    main()
