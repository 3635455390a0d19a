"""Finite-Dimensional Quantum Systems
==================================

Composite Hilbert spaces, density-matrix quantum states, and unitary basis
transformations, with tensor composition, partial trace, and state evolution.

Public API
----------
HilbertSpace
    Tensor-product space with mixed-radix index algebra.
QuantumState
    Validated density matrix with cached spectral decomposition.
UnitaryTransformation
    Unitary operator acting on states by conjugation.
"""

from .core.config_loader import load_system_config
from .core.errors import (
    QHConfigError,
    QHError,
    QHInvalidArgumentError,
    QHIOError,
    QHOutOfRangeError,
    QHSolverError,
    configure_logging,
    get_logger,
)
from .linalg import kron
from .space import (
    HilbertSpace,
    index_to_vector,
    tensor_spaces,
    vector_to_index,
)
from .state import QuantumState, Spectrum, tensor_states
from .transform import UnitaryTransformation

__version__ = "0.1.0"

__all__ = [
    "HilbertSpace",
    "QuantumState",
    "UnitaryTransformation",
    "Spectrum",
    "tensor_spaces",
    "index_to_vector",
    "vector_to_index",
    "tensor_states",
    "kron",
    "QHError",
    "QHIOError",
    "QHInvalidArgumentError",
    "QHOutOfRangeError",
    "QHConfigError",
    "QHSolverError",
    "get_logger",
    "configure_logging",
    "load_system_config",
    "__version__",
]
