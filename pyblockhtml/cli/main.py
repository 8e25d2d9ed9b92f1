#!/usr/bin/env python
"""Command line interface for pyblockhtml."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from pyblockhtml.exceptions import PyBlockHtmlException
from pyblockhtml.models.document import load_document_json
from pyblockhtml.rendering.attributes import expand
from pyblockhtml.rendering.options import APPEND, PREPEND, RenderConfig
from pyblockhtml.rendering.renderer import BlockRenderer

app = typer.Typer(help="Render parsed markdown block trees to HTML")
console = Console()
err_console = Console(stderr=True)


@app.callback()
def callback(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
):
    """Render JSON block trees to HTML and inspect attribute annotations."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _order(append_order: bool) -> str:
    return APPEND if append_order else PREPEND


@app.command("render")
def render_command(
    source: Path = typer.Argument(..., help="JSON file holding the block tree"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write HTML here instead of stdout"
    ),
    page: bool = typer.Option(
        False, "--page/--fragment", help="Wrap the fragment in a full HTML page"
    ),
    title: Optional[str] = typer.Option(None, help="Page title (defaults to file name)"),
    append_order: bool = typer.Option(
        False, "--append-order", help="Keep repeated attribute values in source order"
    ),
):
    """Render a JSON block tree to HTML."""
    try:
        blocks = load_document_json(source.read_bytes())
        renderer = BlockRenderer(
            RenderConfig(
                debug=logging.getLogger().isEnabledFor(logging.DEBUG),
                attr_order=_order(append_order),
            )
        )
        html = renderer.render(blocks)
        if page:
            html = renderer.render_full_page(title or source.stem, html)
    except (OSError, PyBlockHtmlException) as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    if output is None:
        typer.echo(html, nl=False)
        return
    output.write_text(html, encoding="utf-8")
    console.print(f"Wrote [bold]{output}[/bold]")


@app.command("attrs")
def attrs_command(
    annotation: str = typer.Argument(..., help="Attribute annotation, e.g. '.note #intro'"),
    append_order: bool = typer.Option(
        False, "--append-order", help="Keep repeated attribute values in source order"
    ),
):
    """Show how an attribute annotation is parsed."""
    try:
        attrs = expand({}, annotation, _order(append_order))
    except PyBlockHtmlException as e:
        console.print(f"[bold red]Error:[/bold red] {str(e)}")
        raise typer.Exit(1)

    if not attrs:
        console.print("No attributes found")
        return

    table = Table("Name", "Values")
    for name, values in attrs.items():
        table.add_row(name, " ".join(values))
    console.print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
