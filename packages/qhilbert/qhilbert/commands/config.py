"""qhilbert: Configuration CLI Commands
---------------------------------------------------------
Implements the ``qhilbert config`` command group for inspecting and editing
the system configuration (numerical tolerances and logging defaults).

Public API
----------
``show`` : Print the effective configuration as YAML
``set`` : Change one dotted key in the user configuration file
``reset`` : Overwrite the user configuration file with package defaults
"""

from typing import Any

import typer
import yaml
from pydantic import ValidationError

from qhilbert.core.config_loader import load_system_config, save_user_config
from qhilbert.core.errors import QHConfigError, QHError, get_logger
from qhilbert.core.system_config import SystemConfig
from qhilbert.core.utils import deep_merge_dicts

app = typer.Typer()


def _nested(path: str, value: Any) -> dict[str, Any]:
    segments = [s for s in path.split(".") if s]
    if not segments:
        raise QHConfigError(f"[506] Invalid configuration key: {path!r}")
    out: Any = value
    for segment in reversed(segments):
        out = {segment: out}
    return out


@app.command()
def show():
    """Print the effective system configuration."""
    log = get_logger()
    try:
        config = load_system_config()
    except QHError as e:
        log.error(str(e))
        raise typer.Exit(code=1) from e
    typer.echo(yaml.safe_dump(config.model_dump(), sort_keys=False).rstrip())


@app.command("set")
def set_value(
    key: str = typer.Argument(..., help="Dotted key, e.g. numerics.trace_tolerance"),
    value: str = typer.Argument(..., help="New value, parsed as YAML"),
):
    """Set one configuration value in ~/.qhilbert/config.yaml.

    Examples
    --------
        qhilbert config set numerics.trace_tolerance 1.0e-12
        qhilbert config set logging.level DEBUG

    """
    log = get_logger()
    try:
        current = load_system_config().model_dump()
        merged = deep_merge_dicts(current, _nested(key, yaml.safe_load(value)))
        try:
            config = SystemConfig(**merged)
        except ValidationError as e:
            raise QHConfigError(f"[502] Invalid value for {key}: {e}") from e
        path = save_user_config(config)
    except QHError as e:
        log.error(str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e
    log.info(f"Updated {key} in {path}")
    typer.echo(f"{key} = {value}")


@app.command()
def reset():
    """Restore the package defaults in ~/.qhilbert/config.yaml."""
    log = get_logger()
    try:
        path = save_user_config(SystemConfig())
    except QHError as e:
        log.error(str(e))
        raise typer.Exit(code=1) from e
    typer.echo(f"Configuration reset: {path}")
