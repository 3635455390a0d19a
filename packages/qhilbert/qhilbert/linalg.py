"""qhilbert: Dense Complex Matrix Helpers
-------------------------------------
Thin NumPy helpers shared by the state and transformation modules: input
coercion, shape predicates, approximate comparison, and the Kronecker
product.

Notes
-----
- ``is_approx`` follows the relative Frobenius criterion
  ``||a - b|| <= precision * min(||a||, ||b||)``, so two zero matrices are
  equal and nothing else is equal to a zero matrix.
"""

from typing import Any

import numpy as np

from .core.errors import QHInvalidArgumentError

__all__ = [
    "as_matrix",
    "is_square",
    "is_column",
    "is_approx",
    "is_hermitian",
    "is_unitary",
    "kron",
    "normalize_columns",
]


def as_matrix(obj: Any) -> np.ndarray:
    """Coerce ``obj`` to a fresh 2-D ``complex128`` array.

    A 1-D input becomes a single column.

    Raises
    ------
    QHInvalidArgumentError
        - [300] Input cannot be converted to a complex array.
        - [301] Input is not one- or two-dimensional.

    """
    try:
        m = np.array(obj, dtype=np.complex128)
    except (TypeError, ValueError) as e:
        raise QHInvalidArgumentError(f"[300] Not a numeric matrix: {e}") from e
    if m.ndim == 1:
        m = m[:, None]
    if m.ndim != 2:
        raise QHInvalidArgumentError(
            f"[301] Expected a vector or matrix, got an array of rank {m.ndim}"
        )
    return m


def is_square(m: np.ndarray) -> bool:
    return m.shape[0] == m.shape[1]


def is_column(m: np.ndarray) -> bool:
    return m.shape[1] == 1


def is_approx(a: np.ndarray, b: np.ndarray, precision: float) -> bool:
    """Relative approximate equality of two matrices of the same shape."""
    if a.shape != b.shape:
        return False
    diff = np.linalg.norm(a - b)
    return bool(diff <= precision * min(np.linalg.norm(a), np.linalg.norm(b)))


def is_hermitian(m: np.ndarray, precision: float) -> bool:
    return is_square(m) and is_approx(m, m.conj().T, precision)


def is_unitary(m: np.ndarray, precision: float) -> bool:
    if not is_square(m):
        return False
    identity = np.eye(m.shape[0], dtype=np.complex128)
    return is_approx(m @ m.conj().T, identity, precision)


def kron(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Kronecker product; ``a`` indexes the slower-varying factor."""
    return np.kron(a, b)


def normalize_columns(m: np.ndarray) -> np.ndarray:
    """Return a copy of ``m`` with every column scaled to unit 2-norm.

    Raises
    ------
    QHInvalidArgumentError
        - [401] A column has zero norm.

    """
    norms = np.linalg.norm(m, axis=0)
    if np.any(norms == 0.0):
        raise QHInvalidArgumentError("[401] Basis vectors must be non-zero")
    return m / norms
