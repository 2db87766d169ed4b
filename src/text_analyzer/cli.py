from __future__ import annotations

import json
import logging
import re
from pathlib import Path

import typer
import yaml

from .analysis import analyze
from .config import AnalyzerConfig, load_config
from .loader import ReadError, read_text_file
from .report import build_payload, render_report

PROGRAM_NAME = "text-analyzer"
USAGE = f"Usage: {PROGRAM_NAME} <file-path> [top-n]"

# Non-negative decimal integers; anything else falls back to the default.
TOP_N_PATTERN = re.compile(r"\+?[0-9]+")
# Values past the 64-bit unsigned range are treated as malformed.
MAX_TOP_N = 2**64 - 1

LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    help="Report character, line and word statistics for a text file.",
    add_completion=False,
)


@app.command(
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True}
)
def analyze_file(
    file_path: Path | None = typer.Argument(
        None, metavar="FILE_PATH", help="Text file to analyze."
    ),
    top_n: str | None = typer.Argument(
        None, metavar="[TOP_N]", help="Number of most frequent words to list."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    json_output: Path | None = typer.Option(
        None, "--json-output", help="Also write the report as JSON to this path."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log progress to stderr."
    ),
) -> None:
    """Analyze a text file and print summary counts plus the top N words."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )
    if file_path is None:
        typer.echo(USAGE, err=True)
        raise typer.Exit(code=1)

    cfg = _load_config_or_exit(config)
    limit = parse_top_n(top_n, default=cfg.top_n)

    try:
        text = read_text_file(file_path, encoding=cfg.encoding)
    except ReadError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    stats = analyze(text)
    typer.echo(render_report(stats, limit, word_width=cfg.word_column_width))

    if json_output is not None:
        payload = build_payload(stats, limit, file_path)
        json_output.parent.mkdir(parents=True, exist_ok=True)
        json_output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        typer.echo(f"Wrote detailed JSON to {json_output}")


def main() -> None:
    app(prog_name=PROGRAM_NAME)


def parse_top_n(raw: str | None, default: int) -> int:
    """Parse the optional top-n argument, silently falling back to ``default``."""
    if raw is None:
        return default
    if not TOP_N_PATTERN.fullmatch(raw):
        LOGGER.debug("Ignoring invalid top-n value %r; using %d.", raw, default)
        return default
    value = int(raw)
    if value > MAX_TOP_N:
        LOGGER.debug("Ignoring out-of-range top-n value %r; using %d.", raw, default)
        return default
    return value


def _load_config_or_exit(path: Path | None) -> AnalyzerConfig:
    """Load the YAML config, reporting failures the same way as read errors."""
    try:
        return load_config(path)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        typer.echo(f"Could not load config '{path}': {exc}", err=True)
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    main()
