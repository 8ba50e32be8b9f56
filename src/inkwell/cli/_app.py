"""CLI application bootstrap utilities."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console

from inkwell.logging_setup import configure_logging

app = typer.Typer(
    name="inkwell",
    help="Read, check and render the blog's articles and author card.",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CliState:
    site_root: Path
    debug: bool = False


@app.callback()
def _initialize_cli(
    ctx: typer.Context,
    site_root: Annotated[
        Path,
        typer.Option(
            "--site-root",
            "-C",
            help="Directory holding .inkwell.toml and the content tree.",
            file_okay=False,
        ),
    ] = Path("."),
    debug: Annotated[bool, typer.Option("--debug", help="Show full tracebacks on errors.")] = False,
) -> None:
    """Configure logging and remember global options."""
    configure_logging()
    ctx.obj = CliState(site_root=site_root, debug=debug)


__all__ = ["CliState", "app", "console", "logger"]
