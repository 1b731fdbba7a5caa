"""Click CLI for mdiu.

Commands:
    render    — Render a document JSON file to gemtext, HTML or Markdown
    validate  — Check every block of a document JSON file
    formats   — List the available formats
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from mdiu.config import Config
from mdiu.exceptions import MdiuError
from mdiu.formats.factory import FORMATS, available_formats
from mdiu.pipeline import Pipeline


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to a YAML configuration file.",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Render block documents as gemtext, HTML or Markdown."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        config = Config.load(config_path)
    except MdiuError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)
    if verbose:
        config.verbose = True

    ctx.ensure_object(dict)
    ctx.obj["config"] = config
    ctx.obj["pipeline"] = Pipeline(config)


@main.command()
@click.argument("input_json", type=click.Path(exists=True, path_type=Path))
@click.argument("output", type=click.Path(path_type=Path), required=False)
@click.option(
    "-f",
    "--format",
    "fmt",
    default=None,
    help="Output format (gemtext, html, markdown). Defaults to the output "
    "file's extension, or gemtext when writing to stdout.",
)
@click.option("--report", is_flag=True, help="Save render report JSON alongside output.")
@click.pass_context
def render(
    ctx: click.Context,
    input_json: Path,
    output: Path | None,
    fmt: str | None,
    report: bool,
) -> None:
    """Render a document JSON file."""
    pipeline: Pipeline = ctx.obj["pipeline"]

    try:
        if output is None:
            document = pipeline.load(input_json)
            click.echo(pipeline.render(document, fmt or "gemtext"), nl=False)
            return

        result = pipeline.convert(input_json, output, fmt=fmt, save_report=report)
        click.echo(f"Rendered: {result}")

        if report and pipeline.last_report:
            rpt = pipeline.last_report
            click.echo(
                f"Report: {rpt.block_count} blocks, "
                f"{rpt.link_runs} link runs, {rpt.list_item_runs} list runs"
            )
    except MdiuError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command()
@click.argument("input_json", type=click.Path(exists=True, path_type=Path))
@click.pass_context
def validate(ctx: click.Context, input_json: Path) -> None:
    """Check that every block of a document holds valid content."""
    pipeline: Pipeline = ctx.obj["pipeline"]

    try:
        document = pipeline.load(input_json)
        document.validate()
        click.echo(f"OK: {len(document)} blocks")
    except MdiuError as exc:
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(1)


@main.command()
def formats() -> None:
    """List the available output formats."""
    for name in available_formats():
        click.echo(f"{name}\t{FORMATS[name].extension}")
