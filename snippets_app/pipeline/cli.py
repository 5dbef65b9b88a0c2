"""CLI interface for snippets-app.

Usage:
    echo "hello world" | snippets --name greeting
    snippets --name readme --download https://example.com/README.md
    snippets --read greeting
    snippets --delete greeting

The store is selected by SNIPPETS_APP_STORAGE (JSON:<path> or SQLITE:<path>).
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from snippets_app.config import load_settings
from snippets_app.errors import SnippetsError
from snippets_app.logging_config import configure_logging
from snippets_app.pipeline.dispatcher import SnippetDispatcher
from snippets_app.storage.factory import build_storage
from snippets_app.storage.models import format_timestamp

logger = logging.getLogger(__name__)

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)


@click.command()
@click.option("--name", default=None, help="Create (or replace) a snippet with this name")
@click.option("--download", default=None, metavar="URL", help="Fetch content from URL instead of stdin")
@click.option("--read", "read_name", default=None, metavar="NAME", help="Print a snippet")
@click.option("--delete", "delete_name", default=None, metavar="NAME", help="Delete a snippet")
@click.option("--config", "config_path", default=None, help="Optional YAML settings file")
@click.pass_context
def cli(
    ctx,
    name: Optional[str],
    download: Optional[str],
    read_name: Optional[str],
    delete_name: Optional[str],
    config_path: Optional[str],
):
    """Store, read and delete named text snippets."""
    chosen = [
        flag
        for flag, value in (("--name", name), ("--read", read_name), ("--delete", delete_name))
        if value is not None
    ]
    if len(chosen) > 1:
        raise click.UsageError(f"{' and '.join(chosen)} cannot be used together")
    if download is not None and name is None:
        raise click.UsageError("--download can only be used with --name")
    if not chosen:
        click.echo(ctx.get_help())
        return

    try:
        settings = load_settings(config_path)
        configure_logging(settings)
        with build_storage(settings.storage) as storage:
            dispatcher = SnippetDispatcher.open(storage)
            if name is not None:
                _create(dispatcher, name, download)
            elif read_name is not None:
                _read(dispatcher, read_name)
            else:
                _delete(dispatcher, delete_name)
    except SnippetsError as e:
        logger.error("%s: %s", type(e).__name__, e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)


def _create(dispatcher: SnippetDispatcher, name: str, download: Optional[str]) -> None:
    dispatcher.create(name, download=download)
    console.print("[green]Snippet saved.[/green]")


def _read(dispatcher: SnippetDispatcher, name: str) -> None:
    snippet = dispatcher.read(name)
    if snippet is None:
        console.print("[yellow]Snippet not found.[/yellow]")
        return
    console.print(f"Created at: {format_timestamp(snippet.created_at)}")
    # Content goes out verbatim, no markup or wrapping
    click.echo(snippet.content)


def _delete(dispatcher: SnippetDispatcher, name: str) -> None:
    if dispatcher.delete(name):
        console.print("[green]Snippet deleted.[/green]")
    else:
        console.print("[yellow]Snippet not found.[/yellow]")


def main():
    cli(prog_name="snippets")


if __name__ == "__main__":
    main()
