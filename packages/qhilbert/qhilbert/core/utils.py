"""qhilbert: Core Utilities
---------------------------------------------------------
Shared helpers for configuration management: YAML parsing with error
translation and deep dictionary merging.

Public API
----------
``load_yaml_file`` : Load a YAML mapping with error handling
``deep_merge_dicts`` : Recursive dictionary merge
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .errors import QHConfigError, QHIOError


def load_yaml_file(path: Path) -> dict[str, Any]:
    """Load YAML file with error handling.

    Parameters
    ----------
    path : Path
        Path to the YAML file

    Returns
    -------
    Dict[str, Any]
        Loaded YAML data as dictionary (empty for an empty file)

    Raises
    ------
    QHIOError
        [100] If the file doesn't exist or can't be read
    QHConfigError
        [500] If the content is not valid YAML or not a mapping

    """
    if not path.exists():
        raise QHIOError(f"[100] File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise QHIOError(f"[100] Cannot read {path}: {e}") from e
    except yaml.YAMLError as e:
        raise QHConfigError(f"[500] Failed to parse YAML file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise QHConfigError(
            f"[500] YAML file {path} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def deep_merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries, with override values taking precedence.

    Parameters
    ----------
    base : Dict[str, Any]
        Base dictionary
    override : Dict[str, Any]
        Override dictionary

    Returns
    -------
    Dict[str, Any]
        Merged dictionary

    """
    result = dict(base)
    for key, value in (override or {}).items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = deep_merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
