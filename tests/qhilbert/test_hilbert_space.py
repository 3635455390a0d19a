"""Tests for HilbertSpace and the mixed-radix index helpers."""

import numpy as np
import pytest
from qhilbert.core.errors import QHInvalidArgumentError, QHOutOfRangeError
from qhilbert.space import (
    HilbertSpace,
    index_to_vector,
    tensor_spaces,
    vector_to_index,
)


class TestConstruction:
    def test_dimensions_and_total(self):
        space = HilbertSpace([2, 3, 4])
        assert space.rank == 3
        assert space.dimensions == (2, 3, 4)
        assert space.total_dimension == 24

    def test_single_factor_from_int(self):
        space = HilbertSpace(5)
        assert space.rank == 1
        assert space.dimensions == (5,)
        assert space.total_dimension == 5

    def test_degenerate_placeholder(self):
        space = HilbertSpace()
        assert space.rank == 0
        assert space.total_dimension == 0
        assert repr(space) == "HilbertSpace()"

    def test_empty_list_is_trivial_space(self):
        space = HilbertSpace([])
        assert space.rank == 0
        assert space.total_dimension == 1

    def test_zero_dimension_rejected(self):
        with pytest.raises(QHInvalidArgumentError, match=r"\[200\]"):
            HilbertSpace([2, 0])

    def test_negative_dimension_rejected(self):
        with pytest.raises(QHInvalidArgumentError, match=r"\[201\]"):
            HilbertSpace(-3)

    def test_non_integer_dimension_rejected(self):
        with pytest.raises(QHInvalidArgumentError, match=r"\[202\]"):
            HilbertSpace([2, 2.5])

    def test_numpy_integers_accepted(self):
        space = HilbertSpace(np.array([2, 3]))
        assert space.dimensions == (2, 3)

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            HilbertSpace(0)

    def test_zero_dimensional_array_is_single_factor(self):
        space = HilbertSpace(np.array(3))
        assert space.dimensions == (3,)
        assert space.total_dimension == 3

    def test_zero_dimensional_float_array_rejected(self):
        with pytest.raises(QHInvalidArgumentError, match=r"\[202\]"):
            HilbertSpace(np.array(2.5))

    def test_repr(self):
        assert repr(HilbertSpace([2, 3])) == "HilbertSpace([2, 3])"


class TestIndexAlgebra:
    def test_known_values(self):
        space = HilbertSpace([2, 3])
        assert space.get_vector(0) == [0, 0]
        assert space.get_vector(2) == [0, 2]
        assert space.get_vector(3) == [1, 0]
        assert space.get_vector(5) == [1, 2]
        assert space.get_index([1, 1]) == 4

    def test_round_trip(self):
        space = HilbertSpace([3, 1, 4, 2])
        for i in range(space.total_dimension):
            assert space.get_index(space.get_vector(i)) == i

    def test_matches_numpy_unravel(self):
        dims = (2, 3, 5)
        for i in range(30):
            expected = [int(k) for k in np.unravel_index(i, dims)]
            assert index_to_vector(i, dims) == expected
            assert vector_to_index(expected, dims) == int(
                np.ravel_multi_index(expected, dims)
            )

    def test_basis_vector_matches_kron(self):
        space = HilbertSpace([2, 3])
        e1 = np.array([0, 1])
        f2 = np.array([0, 0, 1])
        assert np.array_equal(space.basis_vector([1, 2]), np.kron(e1, f2))

    def test_rank_mismatch(self):
        space = HilbertSpace([2, 3])
        with pytest.raises(QHInvalidArgumentError, match=r"\[203\]"):
            space.get_index([1])

    def test_index_outside_space(self):
        space = HilbertSpace([2, 3])
        with pytest.raises(QHInvalidArgumentError, match=r"\[204\]"):
            space.get_vector(6)
        with pytest.raises(QHInvalidArgumentError, match=r"\[204\]"):
            space.get_vector(-1)

    def test_coordinate_outside_factor(self):
        space = HilbertSpace([2, 3])
        with pytest.raises(QHInvalidArgumentError, match=r"\[205\]"):
            space.get_index([0, 3])

    def test_placeholder_space_has_no_indices(self):
        space = HilbertSpace()
        with pytest.raises(QHInvalidArgumentError, match=r"\[204\]"):
            space.get_vector(0)
        with pytest.raises(QHInvalidArgumentError, match=r"\[204\]"):
            space.get_index([])

    def test_placeholder_stays_empty_after_tensor_with(self):
        space = HilbertSpace()
        space.tensor_with(HilbertSpace(2))
        assert space.total_dimension == 0
        with pytest.raises(QHInvalidArgumentError, match=r"\[204\]"):
            space.get_vector(1)
        with pytest.raises(QHInvalidArgumentError, match=r"\[204\]"):
            space.get_index([1])

    def test_trivial_space_has_one_index(self):
        space = HilbertSpace([])
        assert space.get_vector(0) == []
        assert space.get_index([]) == 0


class TestFactors:
    def test_dimension_accessor(self):
        space = HilbertSpace([2, 7])
        assert space.dimension(0) == 2
        assert space.dimension(1) == 7

    def test_dimension_out_of_range(self):
        space = HilbertSpace([2, 7])
        with pytest.raises(QHOutOfRangeError, match=r"\[601\]"):
            space.dimension(2)
        with pytest.raises(QHOutOfRangeError, match=r"\[600\]"):
            space.dimension(-1)

    def test_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            HilbertSpace([2]).dimension(1)

    def test_without_factor(self):
        space = HilbertSpace([2, 3, 4])
        assert space.without_factor(1).dimensions == (2, 4)
        assert space.without_factor(0).dimensions == (3, 4)
        assert space.dimensions == (2, 3, 4)

    def test_without_only_factor(self):
        reduced = HilbertSpace([3]).without_factor(0)
        assert reduced.rank == 0
        assert reduced.total_dimension == 1


class TestComposition:
    def test_tensor_concatenates(self):
        a = HilbertSpace([2, 3])
        b = HilbertSpace([4])
        c = HilbertSpace.tensor(a, b)
        assert c.dimensions == (2, 3, 4)
        assert c.total_dimension == 24

    def test_tensor_leaves_operands(self):
        a = HilbertSpace([2])
        b = HilbertSpace([3])
        tensor_spaces(a, b)
        assert a.dimensions == (2,)
        assert b.dimensions == (3,)

    def test_tensor_with_mutates(self):
        a = HilbertSpace([2])
        a.tensor_with(HilbertSpace([3, 2]))
        assert a.dimensions == (2, 3, 2)
        assert a.total_dimension == 12

    def test_tensor_with_trivial_space(self):
        a = HilbertSpace([2, 2])
        a.tensor_with(HilbertSpace([]))
        assert a.dimensions == (2, 2)
        assert a.total_dimension == 4

    def test_copy_is_independent(self):
        a = HilbertSpace([2])
        b = a.copy()
        b.tensor_with(HilbertSpace([2]))
        assert a.dimensions == (2,)
        assert b.dimensions == (2, 2)


class TestEquality:
    def test_equal_dimensions(self):
        assert HilbertSpace([2, 3]) == HilbertSpace([2, 3])

    def test_order_matters(self):
        assert HilbertSpace([2, 3]) != HilbertSpace([3, 2])

    def test_same_total_different_split(self):
        assert HilbertSpace([6]) != HilbertSpace([2, 3])

    def test_not_equal_to_other_types(self):
        assert HilbertSpace([2]) != [2]
