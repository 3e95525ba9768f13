"""Command-line entry point for tmux-selector."""

from enum import Enum
from typing import Optional
import logging

import typer

from .app import run_selector
from .config import build_config
from .errors import SelectorError, string_error_response

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class FormatChoice(str, Enum):
    plain = "plain"
    json = "json"


app = typer.Typer(
    add_completion=False,
    help="Pick a tmux pane interactively or by recency and print its session:window.pane.",
)


@app.command()
def select(
    format: Optional[FormatChoice] = typer.Option(
        None,
        "--format",
        "-f",
        help="Output format: plain or json (default: plain)",
        case_sensitive=False,
    ),
    auto: bool = typer.Option(False, "--auto", "-a", help="Auto-select the most recently used pane"),
):
    """Select a target tmux pane and print it to stdout."""
    try:
        config = build_config(output_format=format.value if format else None, auto_select=auto)
        logging.basicConfig(level=config.log_level, format=LOG_FORMAT, datefmt="%H:%M:%S")
        output = run_selector(config)
    except SelectorError as e:
        typer.echo(string_error_response(str(e)), err=True)
        raise typer.Exit(code=1)

    typer.echo(output)


def main():
    """Run the tmux-selector command."""
    app()
