"""qhilbert: CLI Entry Point
---------------------------------------------------------
The Typer application behind the ``qhilbert`` console script. It wires the
global logging options and aggregates the inspection commands (``space``,
``config``, ``version``).

Public API
----------
``app`` : The main Typer application instance.
"""

from __future__ import annotations

import logging

import typer

from . import __version__
from .commands import config as config_cmd
from .commands.space import space_command
from .core.config_loader import load_system_config
from .core.errors import QHError, configure_logging, get_logger

app = typer.Typer(help="qhilbert CLI")


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
    log_file: str | None = typer.Option(None, help="Write logs to file path"),
    log_json: bool = typer.Option(False, help="Log in JSON format"),
):
    """Inspect Hilbert spaces and the qhilbert configuration."""
    try:
        defaults = load_system_config().logging
    except QHError as e:
        # a broken user config must not block `config set`
        configure_logging(verbose=verbose, log_file=log_file, as_json=log_json)
        get_logger().warning(str(e))
        return
    configure_logging(
        verbose=verbose,
        log_file=log_file,
        as_json=log_json or defaults.as_json,
    )
    if not verbose:
        get_logger().setLevel(getattr(logging, defaults.level))


@app.command("version")
def version_command():
    """Print the package version."""
    typer.echo(__version__)


app.command("space")(space_command)
app.add_typer(config_cmd.app, name="config", help="Show or change configuration")
