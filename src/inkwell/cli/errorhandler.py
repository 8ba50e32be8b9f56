"""CLI error handling utilities."""

from collections.abc import Generator
from contextlib import contextmanager

import typer
from rich.console import Console
from rich.markup import escape

from inkwell.author.profile import AuthorProfileError
from inkwell.config.exceptions import ConfigError
from inkwell.content.exceptions import ArticleNotFoundError, ContentError, ContentValidationError

console = Console()


@contextmanager
def handle_cli_errors(*, debug: bool = False) -> Generator[None, None, None]:
    """Context manager to handle CLI errors gracefully.

    Args:
        debug: If True, re-raise so the full traceback is shown. If False, print
            a short message and exit with status 1.

    """
    try:
        yield
    except (KeyboardInterrupt, SystemExit, typer.Exit):
        raise
    except ArticleNotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]Article not found:[/bold red] {escape(e.slug)}")
        raise typer.Exit(1) from e
    except ContentValidationError as e:
        if debug:
            raise
        console.print(f"[bold red]Content errors ({len(e.errors)}):[/bold red]")
        for error in e.errors:
            console.print(f"  - {escape(str(error))}")
        raise typer.Exit(1) from e
    except ContentError as e:
        if debug:
            raise
        console.print(f"[bold red]Content error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except AuthorProfileError as e:
        if debug:
            raise
        console.print(f"[bold red]Author profile error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except ConfigError as e:
        if debug:
            raise
        console.print(f"[bold red]Configuration error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except FileNotFoundError as e:
        if debug:
            raise
        console.print(f"[bold red]Not found:[/bold red] {escape(str(e))}")
        raise typer.Exit(1) from e
    except Exception as e:
        if debug:
            console.print_exception(show_locals=False)
            raise typer.Exit(1) from e

        console.print(f"[bold red]An unexpected error occurred:[/bold red] {escape(str(e))}")
        console.print("[dim]Run with [bold]--debug[/bold] for more details.[/dim]")
        raise typer.Exit(1) from e
