"""qhilbert: Composite Hilbert Spaces
---------------------------------
Tensor-product spaces described by an ordered list of factor dimensions,
with the mixed-radix mapping between flat basis indices and multi-indices.

Behavior
--------
- The first factor is the most significant digit. Index ``i`` of a space
  with dimensions ``(d0, d1, ..., dn)`` decodes to ``(k0, ..., kn)`` with
  ``i = ((k0 * d1 + k1) * d2 + k2) ... * dn + kn``, which is the ordering
  produced by ``numpy.kron`` when the first operand belongs to factor 0.
- The free functions are canonical; ``HilbertSpace`` methods delegate.

Notes
-----
- ``HilbertSpace()`` is a degenerate placeholder of rank 0 and total
  dimension 0. ``HilbertSpace([])`` is the trivial space of rank 0 and total
  dimension 1, which is what tracing out the only factor of a space yields.
"""

import operator
from collections.abc import Iterable, Sequence
from math import prod

import numpy as np

from .core.errors import QHInvalidArgumentError, QHOutOfRangeError, get_logger

__all__ = [
    "HilbertSpace",
    "tensor_spaces",
    "index_to_vector",
    "vector_to_index",
]

_logger = get_logger()


def _check_dimension(dim) -> int:
    try:
        d = operator.index(dim)
    except TypeError as e:
        raise QHInvalidArgumentError(
            f"[202] Dimension must be an integer, got {type(dim).__name__}"
        ) from e
    if d == 0:
        raise QHInvalidArgumentError("[200] Dimension cannot be zero")
    if d < 0:
        raise QHInvalidArgumentError(f"[201] Dimension cannot be negative, got {d}")
    return d


def index_to_vector(index: int, dimensions: Sequence[int]) -> list[int]:
    """Decode a flat index into a multi-index (mixed-radix unraveling).

    Parameters
    ----------
    index : int
        Flat index in ``[0, prod(dimensions))``.
    dimensions : sequence of int
        Factor dimensions, most significant first.

    Returns
    -------
    list of int
        One coordinate per factor.

    Raises
    ------
    QHInvalidArgumentError
        - [204] ``index`` lies outside the space.

    Examples
    --------
    >>> index_to_vector(5, (2, 3))
    [1, 2]

    """
    total = prod(dimensions)
    if not 0 <= index < total:
        raise QHInvalidArgumentError(
            f"[204] Index {index} is outside a space of total dimension {total}"
        )
    vector = [0] * len(dimensions)
    for i in range(len(dimensions) - 1, -1, -1):
        index, vector[i] = divmod(index, dimensions[i])
    return vector


def vector_to_index(vector: Sequence[int], dimensions: Sequence[int]) -> int:
    """Encode a multi-index into a flat index (mixed-radix composition).

    The last coordinate has weight 1; each earlier coordinate is weighted
    by the product of all later dimensions.

    Raises
    ------
    QHInvalidArgumentError
        - [203] ``len(vector)`` differs from the number of factors.
        - [205] A coordinate is outside ``[0, dimension)`` of its factor.

    Examples
    --------
    >>> vector_to_index([1, 2], (2, 3))
    5

    """
    if len(vector) != len(dimensions):
        raise QHInvalidArgumentError(
            f"[203] Vector size {len(vector)} must be equal to space rank "
            f"{len(dimensions)}"
        )
    index = 0
    multiplier = 1
    for i in range(len(dimensions) - 1, -1, -1):
        k = operator.index(vector[i])
        if not 0 <= k < dimensions[i]:
            raise QHInvalidArgumentError(
                f"[205] Coordinate {k} at position {i} is outside factor "
                f"dimension {dimensions[i]}"
            )
        index += k * multiplier
        multiplier *= dimensions[i]
    return index


def tensor_spaces(first: "HilbertSpace", second: "HilbertSpace") -> "HilbertSpace":
    """Return ``first ⊗ second`` without touching either operand."""
    space = first.copy()
    space.tensor_with(second)
    return space


class HilbertSpace:
    """Finite-dimensional tensor-product space.

    Parameters
    ----------
    dimensions : int, iterable of int, or None
        ``None`` builds the degenerate placeholder space, an ``int`` a single
        factor, an iterable one factor per entry.

    Raises
    ------
    QHInvalidArgumentError
        - [200] A factor dimension is zero.
        - [201] A factor dimension is negative.
        - [202] A factor dimension is not an integer.

    Examples
    --------
    >>> space = HilbertSpace([2, 3])
    >>> space.rank, space.total_dimension
    (2, 6)
    >>> space.get_vector(4)
    [1, 1]

    """

    def __init__(self, dimensions: int | Iterable[int] | None = None) -> None:
        if dimensions is None:
            self._dimensions: list[int] = []
            self._total = 0
            return
        if isinstance(dimensions, np.ndarray) and dimensions.ndim == 0:
            dimensions = dimensions.item()
        if isinstance(dimensions, Iterable):
            dims = [_check_dimension(d) for d in dimensions]
        else:
            dims = [_check_dimension(dimensions)]
        self._dimensions = dims
        self._total = prod(dims)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def rank(self) -> int:
        """Number of tensor factors."""
        return len(self._dimensions)

    @property
    def dimensions(self) -> tuple[int, ...]:
        return tuple(self._dimensions)

    @property
    def total_dimension(self) -> int:
        """Product of all factor dimensions (0 for the placeholder space)."""
        return self._total

    def dimension(self, index: int) -> int:
        """Dimension of factor ``index``.

        Raises
        ------
        QHOutOfRangeError
            - [600] ``index`` is negative.
            - [601] ``index`` is not below ``rank``.

        """
        if index < 0:
            raise QHOutOfRangeError(
                f"[600] Factor index cannot be negative, got {index}"
            )
        if index >= self.rank:
            raise QHOutOfRangeError(
                f"[601] Space of rank {self.rank} has no factor {index}"
            )
        return self._dimensions[index]

    # ------------------------------------------------------------------
    # Composition
    # ------------------------------------------------------------------

    @staticmethod
    def tensor(first: "HilbertSpace", second: "HilbertSpace") -> "HilbertSpace":
        """Return ``first ⊗ second`` as a new space."""
        return tensor_spaces(first, second)

    def tensor_with(self, other: "HilbertSpace") -> None:
        """Append the factors of ``other`` to this space in place."""
        self._dimensions.extend(other._dimensions)
        self._total *= other._total
        _logger.debug(f"Tensored space, dimensions now {self.dimensions}")

    def without_factor(self, index: int) -> "HilbertSpace":
        """Return the space with factor ``index`` removed, order preserved."""
        self.dimension(index)
        return HilbertSpace(self._dimensions[:index] + self._dimensions[index + 1 :])

    # ------------------------------------------------------------------
    # Index algebra
    # ------------------------------------------------------------------

    def _check_index(self, index: int) -> None:
        if not 0 <= index < self._total:
            raise QHInvalidArgumentError(
                f"[204] Index {index} is outside a space of total dimension "
                f"{self._total}"
            )

    def get_vector(self, index: int) -> list[int]:
        """Multi-index of flat basis index ``index``; see ``index_to_vector``."""
        self._check_index(index)
        return index_to_vector(index, self._dimensions)

    def get_index(self, vector: Sequence[int]) -> int:
        """Flat index of a multi-index; see ``vector_to_index``."""
        index = vector_to_index(vector, self._dimensions)
        self._check_index(index)
        return index

    def basis_vector(self, vector: Sequence[int]) -> np.ndarray:
        """Computational basis state ``|vector>`` as a 1-D complex array."""
        ket = np.zeros(self._total, dtype=np.complex128)
        ket[self.get_index(vector)] = 1.0
        return ket

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def copy(self) -> "HilbertSpace":
        space = HilbertSpace()
        space._dimensions = list(self._dimensions)
        space._total = self._total
        return space

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HilbertSpace):
            return NotImplemented
        return self._dimensions == other._dimensions

    def __repr__(self) -> str:
        if self._total == 0:
            return "HilbertSpace()"
        return f"HilbertSpace({self._dimensions!r})"
