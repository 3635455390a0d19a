"""qhilbert: Density-Matrix Quantum States
--------------------------------------
``QuantumState`` couples a density matrix with the ``HilbertSpace`` it acts
on, and keeps the spectral decomposition of that matrix alongside it.

Behavior
--------
- Every candidate matrix goes through ``build_density`` before it is stored:
  column vectors become pure-state projectors, then the square shape, the
  Hermitian property, the eigen-decomposition, the density-matrix axioms
  (no eigenvalue below ``-eigenvalue_tolerance``, unit trace) and the match
  with the space's total dimension are checked in that order.
- The density matrix and its ``Spectrum`` are committed together in a single
  assignment after validation succeeds, so a failed ``set_matrix`` leaves
  the previous state untouched.
- Stored arrays are read-only; accessors hand out copies.

Notes
-----
- Tolerances come from ``load_system_config().numerics`` at validation time.
"""

from dataclasses import dataclass

import numpy as np

from .core.config_loader import get_numerics
from .core.errors import QHInvalidArgumentError, QHSolverError, get_logger
from .core.system_config import NumericsConfig
from .linalg import as_matrix, is_approx, is_column, is_hermitian, is_square, kron
from .space import HilbertSpace, tensor_spaces

__all__ = [
    "Spectrum",
    "QuantumState",
    "build_density",
    "tensor_states",
]

_logger = get_logger()


def _frozen(a: np.ndarray) -> np.ndarray:
    a.setflags(write=False)
    return a


@dataclass(frozen=True)
class Spectrum:
    """Eigen-decomposition of a Hermitian matrix.

    Attributes
    ----------
    values : np.ndarray
        Real eigenvalues in ascending order.
    vectors : np.ndarray
        Unitary matrix whose columns are the matching eigenvectors.

    """

    values: np.ndarray
    vectors: np.ndarray


def _pure_density(ket: np.ndarray) -> np.ndarray:
    norm = np.linalg.norm(ket)
    if norm == 0.0:
        raise QHInvalidArgumentError("[302] State vector cannot be zero")
    ket = ket / norm
    return ket @ ket.conj().T


def _spectrum(m: np.ndarray, numerics: NumericsConfig) -> Spectrum:
    if not is_hermitian(m, numerics.approx_precision):
        raise QHInvalidArgumentError("[304] Matrix should be self-adjoint")
    try:
        values, vectors = np.linalg.eigh(m)
    except np.linalg.LinAlgError as e:
        raise QHSolverError(f"[900] Eigen-decomposition failed: {e}") from e
    return Spectrum(values=_frozen(values), vectors=_frozen(vectors))


def _check_density_axioms(
    m: np.ndarray, spectrum: Spectrum, numerics: NumericsConfig
) -> None:
    # an empty matrix has no spectrum and fails on its zero trace below
    lowest = spectrum.values.min() if spectrum.values.size else 0.0
    if lowest < -numerics.eigenvalue_tolerance:
        raise QHInvalidArgumentError(
            f"[305] Not a density matrix: negative eigenvalue {lowest:.3e}"
        )
    trace = np.trace(m)
    if abs(trace - 1.0) > numerics.trace_tolerance:
        raise QHInvalidArgumentError(
            f"[306] Matrix should have trace equal to 1, got {trace:.17g}"
        )


def build_density(matrix, space: HilbertSpace) -> tuple[np.ndarray, Spectrum]:
    """Validate a candidate density matrix and compute its spectrum.

    Parameters
    ----------
    matrix : array-like
        Square density matrix, or a state vector (1-D or single column) that
        is normalized and turned into ``|psi><psi|``.
    space : HilbertSpace
        Space the state lives in.

    Returns
    -------
    tuple of (np.ndarray, Spectrum)
        Read-only density matrix and its eigen-decomposition.

    Raises
    ------
    QHInvalidArgumentError
        - [300]/[301] Input is not a numeric vector or matrix.
        - [302] State vector is zero.
        - [303] Matrix is not square.
        - [304] Matrix is not Hermitian.
        - [305] Matrix has a negative eigenvalue.
        - [306] Trace differs from one.
        - [307] Matrix dimension differs from ``space.total_dimension``.
    QHSolverError
        - [900] The eigensolver did not converge.

    """
    numerics = get_numerics()
    m = as_matrix(matrix)
    if is_column(m):
        m = _pure_density(m)
    elif not is_square(m):
        raise QHInvalidArgumentError(
            f"[303] Matrix should be square, got shape {m.shape}"
        )
    spectrum = _spectrum(m, numerics)
    _check_density_axioms(m, spectrum, numerics)
    if m.shape[0] != space.total_dimension:
        raise QHInvalidArgumentError(
            f"[307] Space total dimension {space.total_dimension} should be the "
            f"same as matrix dimension {m.shape[0]}"
        )
    return _frozen(m), spectrum


def tensor_states(first: "QuantumState", second: "QuantumState") -> "QuantumState":
    """Return ``first ⊗ second``; ``first`` is the slower-varying factor."""
    _logger.debug(
        f"Tensoring states over {first._space.dimensions} and "
        f"{second._space.dimensions}"
    )
    return QuantumState(
        kron(first._density, second._density),
        tensor_spaces(first._space, second._space),
    )


class QuantumState:
    """Quantum state given by a density matrix over a Hilbert space.

    Parameters
    ----------
    matrix : array-like
        Density matrix, or a state vector to be normalized.
    space : HilbertSpace
        Space of the state; a copy is kept.

    Raises
    ------
    QHInvalidArgumentError
        See ``build_density``.
    QHSolverError
        See ``build_density``.

    Examples
    --------
    >>> import numpy as np
    >>> state = QuantumState(np.array([1.0, 1.0]), HilbertSpace(2))
    >>> state.density_matrix.real.round(3)
    array([[0.5, 0.5],
           [0.5, 0.5]])
    >>> state.is_pure()
    True

    """

    def __init__(self, matrix, space: HilbertSpace) -> None:
        self._density, self._spectrum = build_density(matrix, space)
        self._space = space.copy()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def space(self) -> HilbertSpace:
        return self._space.copy()

    @property
    def density_matrix(self) -> np.ndarray:
        return self._density.copy()

    @property
    def eigenvalues(self) -> np.ndarray:
        """Real eigenvalues of the density matrix, ascending."""
        return self._spectrum.values.copy()

    @property
    def eigenvectors(self) -> np.ndarray:
        """Eigenvectors as columns, matching ``eigenvalues``."""
        return self._spectrum.vectors.copy()

    @property
    def spectrum(self) -> Spectrum:
        return self._spectrum

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def set_matrix(self, matrix) -> None:
        """Replace the density matrix after full validation.

        The space is unchanged, so the new matrix must match its total
        dimension. On failure the state keeps its previous matrix and
        spectrum.
        """
        density, spectrum = build_density(matrix, self._space)
        self._density, self._spectrum = density, spectrum

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    @staticmethod
    def tensor(first: "QuantumState", second: "QuantumState") -> "QuantumState":
        return tensor_states(first, second)

    def partial_trace(self, index: int) -> "QuantumState":
        """Trace out factor ``index``.

        Computes ``sum_k <i,k|rho|j,k>`` for every pair of multi-indices
        ``i, j`` of the reduced space, where ``k`` occupies position
        ``index`` of the full multi-index.

        Parameters
        ----------
        index : int
            Zero-based factor to remove.

        Returns
        -------
        QuantumState
            Reduced state over the remaining factors, in their original order.

        Raises
        ------
        QHInvalidArgumentError
            - [308] ``index`` is negative.
            - [309] ``index`` is not below the space rank.

        Examples
        --------
        >>> bell = QuantumState(np.array([1, 0, 0, 1]), HilbertSpace([2, 2]))
        >>> bell.partial_trace(1).density_matrix.real
        array([[0.5, 0. ],
               [0. , 0.5]])

        """
        if index < 0:
            raise QHInvalidArgumentError(
                f"[308] Cannot take partial trace over negative subsystem {index}"
            )
        if index >= self._space.rank:
            raise QHInvalidArgumentError(
                f"[309] State of rank {self._space.rank} has no subsystem {index}"
            )

        reduced = self._space.without_factor(index)
        traced_dim = self._space.dimension(index)
        n = reduced.total_dimension

        # lifts[r, k]: flat index in the full space of reduced index r with
        # coordinate k re-inserted at position ``index``
        lifts = np.empty((n, traced_dim), dtype=np.intp)
        for r in range(n):
            vec = reduced.get_vector(r)
            for k in range(traced_dim):
                lifts[r, k] = self._space.get_index(vec[:index] + [k] + vec[index:])

        result = self._density[lifts[:, None, :], lifts[None, :, :]].sum(axis=2)
        _logger.debug(
            f"Partial trace over factor {index} of {self._space.dimensions} "
            f"-> {reduced.dimensions}"
        )
        return QuantumState(result, reduced)

    def purity(self) -> float:
        """Return ``Re tr(rho^2)``."""
        return float(np.trace(self._density @ self._density).real)

    def is_pure(self) -> bool:
        """True iff ``tr(rho^2)`` equals one within ``purity_tolerance``."""
        square_trace = np.trace(self._density @ self._density)
        return bool(abs(square_trace - 1.0) < get_numerics().purity_tolerance)

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QuantumState):
            return NotImplemented
        return self._space == other._space and is_approx(
            self._density, other._density, get_numerics().approx_precision
        )

    def __repr__(self) -> str:
        return (
            f"QuantumState(space={self._space!r}, "
            f"purity={self.purity():.6g})"
        )
