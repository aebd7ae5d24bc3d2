"""Command line entry point."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Optional

import typer

from .config import AppSettings, say_hi
from .log import setup_logging
from .profile import build_profile
from .timecodes import decode_document, select_entries, tally

app = typer.Typer(no_args_is_help=True, help="Timecode totals and profile helpers.")


def format_number(value) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


@app.callback()
def _configure() -> None:
    setup_logging(AppSettings().resolved_log_level())


@app.command()
def total(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="HTML document."),
    match: Optional[str] = typer.Option(None, "--match", "-m", help="Label substring to keep."),
) -> None:
    """Print the total seconds of matching `data-time` elements."""

    settings = AppSettings()
    entries = select_entries(decode_document(file.read_bytes()))
    result = tally(entries, match if match is not None else settings.default_match)
    typer.echo(format_number(result.total))


@app.command()
def profile(name: str, email: str, site: str) -> None:
    """Build a profile and print the user, profile URL and avatar URL."""

    built = build_profile(name, email, site)
    typer.echo(built.user.model_dump_json())
    typer.echo(built.profile_url)
    typer.echo(built.avatar_url)


@app.command()
def greet(name: str) -> None:
    typer.echo(say_hi(name))


def run() -> None:
    app()


if __name__ == "__main__":
    run()
