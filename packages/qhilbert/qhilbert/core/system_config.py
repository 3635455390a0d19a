"""qhilbert: System Configuration Models
---------------------------------------------------------
Defines the Pydantic models for system-level configuration (``system.yaml``).
The numerical tolerances used by the density-matrix and unitarity checks live
here rather than as literals in the algorithms, together with the default
logging behaviour.

Public API
----------
``SystemConfig`` : Root configuration model with numerics and logging
``NumericsConfig`` : Tolerances for validity checks and approximate equality
``LoggingConfig`` : Default logger level and format

Notes
-----
- Supports multi-level override: package defaults -> user config -> environment
  -> explicit path (see ``config_loader.load_system_config``)

"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["SystemConfig", "NumericsConfig", "LoggingConfig"]


class NumericsConfig(BaseModel):
    """Tolerances for the validity checks.

    Attributes
    ----------
    eigenvalue_tolerance : float
        Eigenvalues below ``-eigenvalue_tolerance`` reject a density matrix.
    trace_tolerance : float
        Maximum allowed ``|tr(rho) - 1|``.
    purity_tolerance : float
        Maximum ``|tr(rho^2) - 1|`` for a state to count as pure.
    approx_precision : float
        Relative Frobenius precision for approximate matrix equality. Used by
        the Hermitian and unitarity checks and by state equality.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    eigenvalue_tolerance: float = Field(
        default=1.0e-15,
        description="Eigenvalues below -tolerance make a matrix non-positive.",
    )
    trace_tolerance: float = Field(
        default=1.0e-15,
        description="Maximum deviation of the trace from one.",
    )
    purity_tolerance: float = Field(
        default=1.0e-15,
        description="Maximum deviation of tr(rho^2) from one for pure states.",
    )
    approx_precision: float = Field(
        default=1.0e-12,
        description="Relative precision for approximate matrix comparison.",
    )

    @field_validator(
        "eigenvalue_tolerance", "trace_tolerance", "purity_tolerance", "approx_precision"
    )
    @classmethod
    def validate_open_unit_interval(cls, v: float) -> float:
        """Tolerances must lie strictly between zero and one."""
        if not 0.0 < v < 1.0:
            raise ValueError(f"Tolerance must be in (0, 1), got {v}")
        return v


class LoggingConfig(BaseModel):
    """Default logger settings applied by the CLI."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    as_json: bool = False


class SystemConfig(BaseModel):
    """System-wide configuration parameters.

    Loaded from ``system.yaml`` and its overrides. Unknown keys are rejected
    so that misspelled tolerances fail loudly instead of being ignored.

    Attributes
    ----------
    numerics : NumericsConfig
        Tolerances for validity checks.
    logging : LoggingConfig
        Default logging behaviour.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    numerics: NumericsConfig = Field(default_factory=NumericsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
