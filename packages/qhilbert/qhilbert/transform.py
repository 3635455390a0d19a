"""qhilbert: Unitary Transformations
--------------------------------
Unitary operators acting on quantum states by conjugation,
``rho -> U rho U^dagger``.

Behavior
--------
- ``UnitaryTransformation(matrix, space)`` validates squareness, unitarity
  (``U U^dagger`` approximately the identity) and the match with
  ``space.total_dimension``. The space is only used for that check.
- ``UnitaryTransformation.from_bases(old, new, space)`` builds the
  change-of-basis operator ``old^-1 new`` from two bases given as matrix
  columns in a common reference frame, after normalizing every column.
- ``apply_to`` commits the conjugated matrix through
  ``QuantumState.set_matrix``, so the state is re-validated and left
  unchanged if validation fails.
"""

import numpy as np

from .core.config_loader import get_numerics
from .core.errors import QHInvalidArgumentError, get_logger
from .linalg import as_matrix, is_square, is_unitary, normalize_columns
from .space import HilbertSpace
from .state import QuantumState

__all__ = ["UnitaryTransformation"]

_logger = get_logger()


class UnitaryTransformation:
    """Unitary operator on a finite-dimensional Hilbert space.

    Parameters
    ----------
    matrix : array-like
        Square unitary matrix.
    space : HilbertSpace
        Space whose total dimension the matrix must match.

    Raises
    ------
    QHInvalidArgumentError
        - [402] Matrix is not square.
        - [403] Matrix is not unitary.
        - [404] Matrix dimension differs from ``space.total_dimension``.

    Examples
    --------
    >>> import numpy as np
    >>> hadamard = np.array([[1, 1], [1, -1]]) / np.sqrt(2)
    >>> ut = UnitaryTransformation(hadamard, HilbertSpace(2))
    >>> state = QuantumState(np.full((2, 2), 0.5), HilbertSpace(2))
    >>> ut.apply_to(state)
    >>> np.allclose(state.density_matrix, [[1, 0], [0, 0]])
    True

    """

    def __init__(self, matrix, space: HilbertSpace) -> None:
        m = as_matrix(matrix)
        if not is_square(m):
            raise QHInvalidArgumentError(
                f"[402] Transform matrix should be square, got shape {m.shape}"
            )
        if not is_unitary(m, get_numerics().approx_precision):
            raise QHInvalidArgumentError("[403] Transform matrix should be unitary")
        if m.shape[0] != space.total_dimension:
            raise QHInvalidArgumentError(
                f"[404] Space total dimension {space.total_dimension} should be "
                f"the same as matrix dimension {m.shape[0]}"
            )
        m.setflags(write=False)
        self._matrix = m

    @classmethod
    def from_bases(cls, old_basis, new_basis, space: HilbertSpace) -> "UnitaryTransformation":
        """Change-of-basis operator between two bases.

        Parameters
        ----------
        old_basis, new_basis : array-like
            Square matrices whose columns are the basis vectors, expressed in
            the same reference frame. Columns need not be normalized.
        space : HilbertSpace
            Space whose total dimension the bases must match.

        Raises
        ------
        QHInvalidArgumentError
            - [401] A basis vector is zero.
            - [405] A basis matrix is not square.
            - [406] The two bases differ in dimension.
            - [407] The old basis is not linearly independent.
            - [402]-[404] The resulting operator fails validation.

        Examples
        --------
        >>> ut = UnitaryTransformation.from_bases(
        ...     np.eye(2), np.array([[1, 1], [1, -1]]), HilbertSpace(2))
        >>> np.allclose(ut.transform_matrix * np.sqrt(2), [[1, 1], [1, -1]])
        True

        """
        old = as_matrix(old_basis)
        new = as_matrix(new_basis)
        for name, basis in (("old", old), ("new", new)):
            if not is_square(basis):
                raise QHInvalidArgumentError(
                    f"[405] The {name} basis matrix should be square, "
                    f"got shape {basis.shape}"
                )
        if old.shape != new.shape:
            raise QHInvalidArgumentError(
                f"[406] Bases should have the same dimension, got "
                f"{old.shape[0]} and {new.shape[0]}"
            )
        old = normalize_columns(old)
        new = normalize_columns(new)
        try:
            matrix = np.linalg.solve(old, new)
        except np.linalg.LinAlgError as e:
            raise QHInvalidArgumentError(
                f"[407] The old basis vectors are not linearly independent: {e}"
            ) from e
        return cls(matrix, space)

    @property
    def transform_matrix(self) -> np.ndarray:
        return self._matrix.copy()

    @property
    def dimension(self) -> int:
        return self._matrix.shape[0]

    def _conjugate(self, state: QuantumState) -> np.ndarray:
        if state.space.total_dimension != self.dimension:
            raise QHInvalidArgumentError(
                f"[408] Cannot apply a {self.dimension}-dimensional transformation "
                f"to a state of dimension {state.space.total_dimension}"
            )
        return self._matrix @ state.density_matrix @ self._matrix.conj().T

    def apply_to(self, state: QuantumState) -> None:
        """Replace the density matrix of ``state`` with ``U rho U^dagger``.

        Raises
        ------
        QHInvalidArgumentError
            - [408] Dimensions of state and transformation differ.
            - [3xx] The conjugated matrix fails state validation; ``state``
              is left unchanged.

        """
        state.set_matrix(self._conjugate(state))
        _logger.debug(f"Applied {self.dimension}-dimensional unitary in place")

    def transformed(self, state: QuantumState) -> QuantumState:
        """Return a new state ``U rho U^dagger``; ``state`` is not modified."""
        return QuantumState(self._conjugate(state), state.space)

    def __repr__(self) -> str:
        return f"UnitaryTransformation(dimension={self.dimension})"
