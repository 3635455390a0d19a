"""Configuration loading utilities.

This module loads the system configuration from YAML through an override
chain, caches the validated result, and persists user-level overrides.
"""

from __future__ import annotations

import importlib.resources as ilr
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import QHConfigError, QHIOError, get_logger
from .system_config import NumericsConfig, SystemConfig
from .utils import deep_merge_dicts, load_yaml_file

__all__ = [
    "load_system_config",
    "get_system_param",
    "get_numerics",
    "save_user_config",
    "user_config_path",
]

logger = get_logger()

ENV_VAR = "QHILBERT_SYSTEM_CONFIG"

_SYSTEM_CONFIG_CACHE: SystemConfig | None = None


def user_config_path() -> Path:
    """Location of the per-user override file."""
    return Path.home() / ".qhilbert" / "config.yaml"


def load_system_config(
    *, force_reload: bool = False, config_path: str | Path | None = None
) -> SystemConfig:
    """Load system configuration with override chain.

    Search order (later overrides earlier):
    1. Package default (qhilbert.core/system.yaml)
    2. ~/.qhilbert/config.yaml (User-specific)
    3. QHILBERT_SYSTEM_CONFIG environment variable
    4. Explicitly provided config_path

    Parameters
    ----------
    force_reload : bool
        If True, ignore cache and reload
    config_path : str or Path, optional
        Path to specific config file to override everything else

    Returns
    -------
    SystemConfig
        Loaded system configuration

    Raises
    ------
    QHConfigError
        [501] The explicit file is missing or unreadable.
        [502] The merged configuration fails validation.

    """
    global _SYSTEM_CONFIG_CACHE

    if _SYSTEM_CONFIG_CACHE is not None and not force_reload and config_path is None:
        return _SYSTEM_CONFIG_CACHE

    # 1. Package default
    try:
        system_yaml_path = ilr.files("qhilbert.core").joinpath("system.yaml")
        config_dict = load_yaml_file(Path(str(system_yaml_path)))
    except (QHIOError, QHConfigError) as e:
        logger.warning(f"[503] Could not load default system.yaml from package: {e}")
        config_dict = {}

    # 2. User config
    user_path = user_config_path()
    if user_path.exists():
        try:
            config_dict = deep_merge_dicts(config_dict, load_yaml_file(user_path))
        except (QHIOError, QHConfigError) as e:
            logger.warning(f"[504] Failed to load user config {user_path}: {e}")

    # 3. Environment variable
    env_path = os.environ.get(ENV_VAR)
    if env_path:
        path = Path(env_path)
        if path.exists():
            try:
                config_dict = deep_merge_dicts(config_dict, load_yaml_file(path))
            except (QHIOError, QHConfigError) as e:
                logger.warning(f"[505] Failed to load env config {path}: {e}")

    # 4. Explicit path
    if config_path is not None:
        path = Path(config_path)
        try:
            config_dict = deep_merge_dicts(config_dict, load_yaml_file(path))
        except (QHIOError, QHConfigError) as e:
            raise QHConfigError(
                f"[501] Failed to load explicit config {path}: {e}"
            ) from e

    try:
        config = SystemConfig(**config_dict)
    except ValidationError as e:
        raise QHConfigError(f"[502] Invalid system configuration: {e}") from e

    if config_path is None:
        _SYSTEM_CONFIG_CACHE = config
    return config


def get_numerics() -> NumericsConfig:
    """Tolerances of the currently effective system configuration."""
    return load_system_config().numerics


def get_system_param(path: str, default: Any = None) -> Any:
    """Get a specific system parameter by dot-separated path.

    Examples
    --------
    >>> get_system_param("numerics.trace_tolerance")
    1e-15

    """
    current: Any = load_system_config().model_dump()

    for segment in path.split("."):
        if isinstance(current, dict) and segment in current:
            current = current[segment]
        else:
            return default
    return current


def save_user_config(config: SystemConfig) -> Path:
    """Save system configuration to the user home directory.

    The cache is cleared so the next ``load_system_config`` picks it up.

    Returns
    -------
    Path
        The file that was written.

    """
    path = user_config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(config.model_dump(), f, sort_keys=False)
    except OSError as e:
        raise QHIOError(f"[102] Failed to save config to {path}: {e}") from e

    global _SYSTEM_CONFIG_CACHE
    _SYSTEM_CONFIG_CACHE = None
    return path
