from __future__ import annotations

import asyncio

import typer

from lyric_finder.client import LyricClient
from lyric_finder.config import load_config
from lyric_finder.errors import LyricFinderError
from lyric_finder.logging_setup import setup_logging
from lyric_finder.types import Found


app = typer.Typer(no_args_is_help=True, add_completion=False)


@app.callback()
def _root() -> None:
    """Look up song lyrics from the command line."""


@app.command()
def lookup(
    query: str = typer.Argument(..., help='Track title or "artist - title"'),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    timeout: float | None = typer.Option(None, "--timeout", help="Request timeout (seconds)"),
):
    """
    Print the plain lyric text for QUERY.
    """
    setup_logging(debug)
    try:
        cfg = load_config()
        client = LyricClient.create(
            base_url=cfg.base_url,
            timeout=timeout if timeout is not None else cfg.timeout_s,
        )
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    with client:
        try:
            outcome = asyncio.run(client.lookup(query))
        except LyricFinderError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=2)

    if not isinstance(outcome, Found):
        typer.echo(f"No lyrics found for {query}", err=True)
        raise typer.Exit(code=1)

    typer.echo(outcome.lyric, nl=False)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
