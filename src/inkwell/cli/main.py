"""Inkwell command line: check, list and render content."""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from inkwell.author.component import render_author
from inkwell.author.profile import load_author_profile
from inkwell.cli._app import CliState, app, console, logger
from inkwell.cli.errorhandler import handle_cli_errors
from inkwell.config.exceptions import ContentDirectoryError
from inkwell.config.settings import InkwellConfig
from inkwell.content.loader import ContentLoader
from inkwell.rendering.body import BodyRenderer
from inkwell.rendering.feed import build_feed


def _state(ctx: typer.Context) -> CliState:
    state = ctx.obj
    if not isinstance(state, CliState):
        state = CliState(site_root=Path("."))
        ctx.obj = state
    return state


def _load(state: CliState, content_dir: Path | None = None) -> tuple[InkwellConfig, ContentLoader]:
    config = InkwellConfig.load(state.site_root)
    directory = content_dir if content_dir is not None else config.paths.abs_content_dir
    if not directory.is_dir():
        raise ContentDirectoryError(directory)
    return config, ContentLoader.from_directory(directory)


def _write_or_echo(text: str, output: Path | None) -> None:
    if output is None:
        typer.echo(text)
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", output)
    console.print(f"Wrote [cyan]{escape(str(output))}[/cyan]")


@app.command()
def check(
    ctx: typer.Context,
    content_dir: Annotated[
        Path | None, typer.Argument(help="Content directory (defaults to the configured one).")
    ] = None,
) -> None:
    """Load every article and report authoring errors."""
    state = _state(ctx)
    with handle_cli_errors(debug=state.debug):
        _, loader = _load(state, content_dir)
        published = len(loader.list_published())
        drafts = len(loader) - published
        console.print(
            f"[green]OK[/green] {len(loader)} article(s): {published} published, {drafts} draft(s)"
        )


@app.command("list")
def list_articles(
    ctx: typer.Context,
    category: Annotated[str | None, typer.Option("--category", "-c", help="Only this category.")] = None,
    popular: Annotated[bool, typer.Option("--popular", help="Only articles flagged popular.")] = False,
) -> None:
    """Show the published listing, newest first."""
    state = _state(ctx)
    with handle_cli_errors(debug=state.debug):
        config, loader = _load(state)
        if category:
            articles = loader.list_by_category(category)
        else:
            articles = loader.list_published()
        if popular:
            articles = [a for a in articles if a.popular]

        if not articles:
            console.print("[yellow]No published articles match.[/yellow]")
            return

        table = Table(title=f"Articles ({len(articles)})", show_header=True, header_style="bold magenta")
        table.add_column("Published", style="cyan", no_wrap=True)
        table.add_column("Slug", style="green", no_wrap=True)
        table.add_column("Title")
        table.add_column("Category", style="blue")
        table.add_column("Min", justify="right", style="dim")
        for article in articles:
            title = f"{article.title} *" if article.popular else article.title
            minutes = article.minutes_to_read(config.render.words_per_minute)
            table.add_row(
                article.published_at.isoformat(),
                article.slug,
                escape(title),
                escape(article.category),
                str(minutes),
            )
        console.print(table)


@app.command()
def categories(ctx: typer.Context) -> None:
    """Show published article counts per category."""
    state = _state(ctx)
    with handle_cli_errors(debug=state.debug):
        _, loader = _load(state)
        table = Table(title="Categories", show_header=True, header_style="bold magenta")
        table.add_column("Category", style="blue")
        table.add_column("Articles", justify="right")
        for name, count in loader.categories().items():
            table.add_row(escape(name), str(count))
        console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    slug: Annotated[str, typer.Argument(help="Slug of the article to render.")],
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write HTML here instead of stdout.")
    ] = None,
) -> None:
    """Render one article body to HTML."""
    state = _state(ctx)
    with handle_cli_errors(debug=state.debug):
        config, loader = _load(state)
        article = loader.get_by_slug(slug)
        rendered = BodyRenderer.from_config(config).render(article.body_source)
        _write_or_echo(rendered.html, output)


@app.command()
def author(
    ctx: typer.Context,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write HTML here instead of stdout.")
    ] = None,
) -> None:
    """Render the author card."""
    state = _state(ctx)
    with handle_cli_errors(debug=state.debug):
        config = InkwellConfig.load(state.site_root)
        profile = load_author_profile(config.paths.abs_author_file)
        _write_or_echo(render_author(profile), output)


@app.command()
def feed(
    ctx: typer.Context,
    output: Annotated[
        Path | None, typer.Option("--output", "-o", help="Write XML here instead of stdout.")
    ] = None,
    limit: Annotated[int | None, typer.Option("--limit", min=1, help="Maximum number of entries.")] = None,
) -> None:
    """Write the Atom feed of published articles."""
    state = _state(ctx)
    with handle_cli_errors(debug=state.debug):
        config, loader = _load(state)
        profile = load_author_profile(config.paths.abs_author_file)
        xml = build_feed(
            loader,
            title=config.site.title,
            base_url=config.site.base_url,
            author_name=profile.name,
            limit=limit if limit is not None else config.site.feed_limit,
            language=config.site.language,
        )
        _write_or_echo(xml, output)


def run() -> None:
    """Entry point used by the console script."""
    app()


if __name__ == "__main__":
    run()
