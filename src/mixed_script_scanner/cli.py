from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, TypedDict

import typer
import yaml

from .config import ScannerConfig, load_config
from .models import DocumentReport, Highlight
from .pipeline import process_corpus
from .rendering import CollectingRenderer
from .sources import SourceReadError, load_documents

app = typer.Typer(help="Mixed Latin/Cyrillic word scanner CLI.", no_args_is_help=True)


@app.command()
def scan(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    fail_on_match: bool | None = typer.Option(
        None,
        "--fail-on-match/--no-fail-on-match",
        help="Exit with status 1 when any mixed-script word is found.",
    ),
    max_line_length: int | None = typer.Option(
        None,
        "--max-line-length",
        min=0,
        help="Skip lines longer than this many chars.",
    ),
) -> None:
    """Scan the input path and emit a JSON summary of mixed-script words."""
    cfg = _load_with_overrides(config, fail_on_match, max_line_length)
    results = _run(input_path, cfg)
    typer.echo(
        json.dumps({"documents": _build_summary(results)}, indent=2, ensure_ascii=False)
    )
    _exit_for_matches(results, cfg)


@app.command()
def check(
    input_path: Path = typer.Option(
        ..., exists=True, readable=True, dir_okay=True, file_okay=True
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    fail_on_match: bool | None = typer.Option(
        None,
        "--fail-on-match/--no-fail-on-match",
        help="Exit with status 1 when any mixed-script word is found.",
    ),
    max_line_length: int | None = typer.Option(
        None,
        "--max-line-length",
        min=0,
        help="Skip lines longer than this many chars.",
    ),
) -> None:
    """Print one location per mixed-script word, linter style."""
    cfg = _load_with_overrides(config, fail_on_match, max_line_length)
    results = _run(input_path, cfg)
    total = 0
    for doc_id in sorted(results):
        for highlight in results[doc_id].highlights:
            typer.echo(_format_location(highlight))
            total += 1
    typer.echo(f"Found {total} mixed-script word(s) in {len(results)} document(s).")
    _exit_for_matches(results, cfg)


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    cfg = ScannerConfig()
    typer.echo(yaml.safe_dump(cfg.to_dict(), sort_keys=False))


def main() -> None:
    app()


class HighlightPayload(TypedDict):
    line: int
    column: int
    start: int
    length: int
    text: str


class DocumentSummary(TypedDict):
    doc_id: str
    highlights: List[HighlightPayload]
    skipped_lines: List[int]


def _load_with_overrides(
    config_path: Path | None,
    fail_on_match: bool | None,
    max_line_length: int | None,
) -> ScannerConfig:
    """Load config from disk (or defaults) and apply CLI overrides."""
    try:
        cfg = load_config(config_path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--config") from exc
    if fail_on_match is not None:
        cfg.fail_on_match = fail_on_match
    if max_line_length is not None:
        cfg.max_line_length = max_line_length
    return cfg


def _run(input_path: Path, cfg: ScannerConfig) -> Dict[str, DocumentReport]:
    try:
        documents = load_documents(input_path, cfg.extensions, cfg.encoding)
    except SourceReadError as exc:
        raise typer.BadParameter(str(exc), param_hint="--input-path") from exc
    return process_corpus(documents, cfg, CollectingRenderer())


def _exit_for_matches(results: Dict[str, DocumentReport], cfg: ScannerConfig) -> None:
    if cfg.fail_on_match and any(report.highlights for report in results.values()):
        raise typer.Exit(code=1)


def _format_location(highlight: Highlight) -> str:
    return f"{highlight.doc_id}:{highlight.line}:{highlight.column}: {highlight.text}"


def _build_summary(results: Dict[str, DocumentReport]) -> List[DocumentSummary]:
    """Create a JSON-serializable summary for each scanned document."""
    summary: List[DocumentSummary] = []
    for doc_id, report in sorted(results.items()):
        summary.append(
            {
                "doc_id": doc_id,
                "highlights": [_highlight_dict(h) for h in report.highlights],
                "skipped_lines": list(report.skipped_lines),
            }
        )
    return summary


def _highlight_dict(highlight: Highlight) -> HighlightPayload:
    return {
        "line": highlight.line,
        "column": highlight.column,
        "start": highlight.start,
        "length": highlight.length,
        "text": highlight.text,
    }


if __name__ == "__main__":
    main()
