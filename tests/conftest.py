"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import numpy as np
import pytest
import yaml

# Add package path to sys.path
packages_dir = Path(__file__).parent.parent / "packages"
sys.path.insert(0, str(packages_dir / "qhilbert"))

from qhilbert.core import config_loader  # noqa: E402
from qhilbert.core.config_loader import ENV_VAR, load_system_config  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and environment configuration out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv(ENV_VAR, raising=False)
    config_loader._SYSTEM_CONFIG_CACHE = None
    yield home
    config_loader._SYSTEM_CONFIG_CACHE = None


@pytest.fixture
def write_config(tmp_path):
    """Write a YAML config file and return its path."""

    def _write(data, name="override.yaml"):
        path = tmp_path / name
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f)
        return path

    return _write


@pytest.fixture
def loose_numerics(write_config, monkeypatch):
    """Relax trace and eigenvalue tolerances for randomly generated matrices."""
    path = write_config(
        {
            "numerics": {
                "eigenvalue_tolerance": 1.0e-12,
                "trace_tolerance": 1.0e-12,
                "purity_tolerance": 1.0e-12,
            }
        },
        name="loose.yaml",
    )
    monkeypatch.setenv(ENV_VAR, str(path))
    return load_system_config(force_reload=True).numerics


@pytest.fixture
def rng():
    return np.random.default_rng(20131)

