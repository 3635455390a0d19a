"""qhilbert: core subpackage
---------------------------------------------------------
Error taxonomy, shared logger, and the system configuration pipeline used by
the numerical modules.
"""

from .config_loader import (
    get_numerics,
    get_system_param,
    load_system_config,
    save_user_config,
)
from .errors import (
    QHConfigError,
    QHError,
    QHInvalidArgumentError,
    QHIOError,
    QHOutOfRangeError,
    QHSolverError,
    configure_logging,
    get_logger,
)
from .system_config import LoggingConfig, NumericsConfig, SystemConfig

__all__ = [
    "QHError",
    "QHIOError",
    "QHInvalidArgumentError",
    "QHOutOfRangeError",
    "QHConfigError",
    "QHSolverError",
    "get_logger",
    "configure_logging",
    "load_system_config",
    "get_system_param",
    "get_numerics",
    "save_user_config",
    "SystemConfig",
    "NumericsConfig",
    "LoggingConfig",
]
