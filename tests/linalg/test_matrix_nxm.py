"""
Tests for MatrixNxM.

Validates:
    - Construction: dimension clamping, jagged padding, ownership
    - Accessors and index validation
    - Arithmetic and operator overloads
    - Row echelon form, is_ref and rank
    - Structural operations (swap, remove)
    - Equality and rendering
"""

import numpy as np
import pytest

from pyalgebra.core.exceptions import (
    DimensionError,
    IncompatibleDimensionError,
    IndexOutOfRangeError,
    ValidationError,
)
from pyalgebra.linalg import MatrixNxM, MatrixNxN, VectorN


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_zero_matrix(self):
        m = MatrixNxM(2, 3)
        assert m.shape == (2, 3)
        np.testing.assert_array_equal(m.to_array(), np.zeros((2, 3)))

    def test_square_shortcut(self):
        assert MatrixNxM(4).shape == (4, 4)

    @pytest.mark.parametrize("n, m, expected", [
        (0, 0, (1, 1)),
        (-3, 2, (1, 2)),
        (5, -1, (5, 1)),
    ])
    def test_dimensions_clamped(self, n, m, expected):
        assert MatrixNxM(n, m).shape == expected

    def test_from_rows(self, wide_3x5):
        assert wide_3x5.shape == (3, 5)
        assert wide_3x5.get(2, 2) == 8.0

    def test_jagged_rows_padded_to_widest(self):
        m = MatrixNxM.from_rows([
            [3, 1, 4, 1, 5, 9],
            [2, 1, 8, 2, 8],
            [1, 1, 2, 3, 5, 8, 13, 21, 34],
        ])
        assert m.shape == (3, 9)
        assert m.get(0, 5) == 9.0
        assert m.get(1, 5) == 0.0
        assert m.get(0, 8) == 0.0
        assert m.get(2, 8) == 34.0

    def test_none_row_is_zero(self):
        m = MatrixNxM.from_rows([[1, 2], None])
        np.testing.assert_array_equal(m.to_array(), [[1, 2], [0, 0]])

    @pytest.mark.parametrize("rows", [None, [], [[]]])
    def test_empty_input_is_1x1_zero(self, rows):
        m = MatrixNxM.from_rows(rows)
        assert m.shape == (1, 1)
        assert m.get(0, 0) == 0.0

    def test_from_ndarray(self, rng):
        data = rng.standard_normal((4, 2))
        m = MatrixNxM.from_rows(data)
        np.testing.assert_array_equal(m.to_array(), data)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            MatrixNxM.from_rows([["a", "b"]])

    def test_nested_row_rejected(self):
        with pytest.raises(DimensionError):
            MatrixNxM.from_rows([[[1, 2]]])

    def test_source_not_aliased(self):
        data = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = MatrixNxM.from_rows(data)
        data[0, 0] = 99.0
        assert m.get(0, 0) == 1.0

    def test_to_array_is_copy(self, wide_3x5):
        arr = wide_3x5.to_array()
        arr[0, 0] = 99.0
        assert wide_3x5.get(0, 0) == -1.0

    def test_copy_is_deep(self, wide_3x5):
        clone = wide_3x5.copy()
        clone.swap_rows(0, 1)
        assert wide_3x5.get(0, 0) == -1.0
        assert clone.get(0, 0) == -5.0
        assert type(clone) is MatrixNxM


# ═══════════════════════════════════════════════════════════════════════
# Accessors
# ═══════════════════════════════════════════════════════════════════════


class TestAccessors:

    def test_rows_cols(self, wide_3x5):
        assert wide_3x5.rows == 3
        assert wide_3x5.cols == 5
        assert not wide_3x5.is_square()

    def test_getitem(self, wide_3x5):
        assert wide_3x5[1, 0] == -5.0

    def test_get_row(self, wide_3x5):
        row = wide_3x5.get_row(2)
        assert isinstance(row, VectorN)
        np.testing.assert_array_equal(row.to_numpy(), [0, -3, 8, 3, -2])

    def test_get_col(self, wide_3x5):
        col = wide_3x5.get_col(4)
        np.testing.assert_array_equal(col.to_numpy(), [-5, -1, -2])

    @pytest.mark.parametrize("row, col", [(3, 0), (0, 5), (-1, 0), (0, -1)])
    def test_get_out_of_range(self, wide_3x5, row, col):
        with pytest.raises(IndexOutOfRangeError):
            wide_3x5.get(row, col)

    def test_index_error_is_builtin_index_error(self, wide_3x5):
        with pytest.raises(IndexError):
            wide_3x5.get_row(7)


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add_zero_identity(self, wide_3x5):
        assert wide_3x5.add(MatrixNxM(3, 5)).equals(wide_3x5)

    def test_sub_self_is_zero(self, wide_3x5):
        assert wide_3x5.sub(wide_3x5).equals(MatrixNxM(3, 5))

    def test_subtract_alias(self, wide_3x5):
        assert wide_3x5.subtract(wide_3x5).equals(MatrixNxM(3, 5))

    def test_add_values(self):
        a = MatrixNxM.from_rows([[1, 2], [3, 4]])
        b = MatrixNxM.from_rows([[10, 20], [30, 40]])
        np.testing.assert_array_equal((a + b).to_array(), [[11, 22], [33, 44]])
        np.testing.assert_array_equal((b - a).to_array(), [[9, 18], [27, 36]])

    def test_add_shape_mismatch(self, wide_3x5):
        with pytest.raises(IncompatibleDimensionError) as exc_info:
            wide_3x5.add(MatrixNxM(2, 2))
        assert str(exc_info.value) == "Matrix 1: {3x5}, Matrix 2: {2x2}"
        assert exc_info.value.left_shape == (3, 5)
        assert exc_info.value.right_shape == (2, 2)

    def test_sub_shape_mismatch(self, wide_3x5):
        with pytest.raises(IncompatibleDimensionError):
            wide_3x5 - MatrixNxM(5, 3)

    def test_operands_unchanged(self, wide_3x5):
        before = wide_3x5.to_array()
        wide_3x5 + wide_3x5
        wide_3x5 * 3.0
        wide_3x5 @ wide_3x5.transpose()
        np.testing.assert_array_equal(wide_3x5.to_array(), before)

    def test_scalar_multiply(self, wide_3x5):
        scaled = wide_3x5.multiply(2.0)
        np.testing.assert_array_equal(scaled.to_array(), 2.0 * wide_3x5.to_array())

    def test_scalar_operators(self, wide_3x5):
        expected = -0.5 * wide_3x5.to_array()
        np.testing.assert_array_equal((wide_3x5 * -0.5).to_array(), expected)
        np.testing.assert_array_equal((-0.5 * wide_3x5).to_array(), expected)

    def test_numpy_scalar_left_operand(self, wide_3x5):
        result = np.float64(2.0) * wide_3x5
        assert isinstance(result, MatrixNxM)
        np.testing.assert_array_equal(result.to_array(), 2.0 * wide_3x5.to_array())

    def test_negation(self, wide_3x5):
        assert (-wide_3x5).add(wide_3x5).equals(MatrixNxM(3, 5))

    def test_bool_scalar_rejected(self, wide_3x5):
        with pytest.raises(TypeError):
            wide_3x5.multiply(True)

    def test_unsupported_operand(self, wide_3x5):
        with pytest.raises(TypeError):
            wide_3x5 * "2"

    def test_product_with_transpose(self, wide_3x5):
        product = wide_3x5 @ wide_3x5.transpose()
        expected = MatrixNxM.from_rows([
            [55, 35, -20],
            [35, 55, -16],
            [-20, -16, 86],
        ])
        assert product.shape == (3, 3)
        assert product.equals(expected)

    def test_product_shape(self, rng):
        a = MatrixNxM.from_rows(rng.standard_normal((2, 4)))
        b = MatrixNxM.from_rows(rng.standard_normal((4, 3)))
        product = a.multiply(b)
        assert product.shape == (2, 3)
        np.testing.assert_allclose(product.to_array(), a.to_array() @ b.to_array())

    def test_product_dimension_mismatch(self, wide_3x5):
        with pytest.raises(IncompatibleDimensionError):
            wide_3x5.multiply(wide_3x5)

    def test_product_with_vector(self, wide_3x5):
        v = VectorN.from_values([1, 0, 0, 0, 1])
        product = wide_3x5 @ v
        assert product.shape == (3, 1)
        np.testing.assert_array_equal(product.to_array()[:, 0], [-6, -6, -2])

    def test_transpose(self, wide_3x5):
        t = wide_3x5.transpose()
        assert t.shape == (5, 3)
        assert t.get(4, 0) == wide_3x5.get(0, 4)

    def test_transpose_involution(self, wide_3x5):
        assert wide_3x5.transpose().transpose().equals(wide_3x5)


# ═══════════════════════════════════════════════════════════════════════
# Row echelon form and rank
# ═══════════════════════════════════════════════════════════════════════


class TestRowEchelon:

    def test_ref_with_pivoting(self):
        m = MatrixNxM.from_rows([
            [0, -3, 8, 3, -2],
            [-5, -4, -3, -2, -1],
            [-1, -2, -3, -4, -5],
        ])
        expected = MatrixNxM.from_rows([
            [-5, -4, -3, -2, -1],
            [0, -3, 8, 3, -2],
            [0, 0, -5.6, -4.8, -4],
        ])
        assert m.ref().equals(expected)

    def test_ref_fixture(self, wide_3x5):
        expected = MatrixNxM.from_rows([
            [-5, -4, -3, -2, -1],
            [0, -3, 8, 3, -2],
            [0, 0, -5.6, -4.8, -4],
        ])
        assert wide_3x5.ref().equals(expected)

    def test_ref_square(self):
        m = MatrixNxM.from_rows([[1, 2, 1], [-2, -3, 1], [3, 5, 0]])
        expected = MatrixNxM.from_rows([[3, 5, 0], [0, 1 / 3, 1], [0, 0, 0]])
        assert m.ref().equals(expected)

    def test_ref_does_not_mutate(self, wide_3x5):
        before = wide_3x5.to_array()
        wide_3x5.ref()
        np.testing.assert_array_equal(wide_3x5.to_array(), before)

    def test_ref_is_ref(self, rng):
        m = MatrixNxM.from_rows(rng.standard_normal((4, 6)))
        assert m.ref().is_ref()

    def test_ref_tall(self, rng):
        m = MatrixNxM.from_rows(rng.standard_normal((6, 3)))
        reduced = m.ref().to_array()
        np.testing.assert_array_equal(np.tril(reduced, -1), np.zeros((6, 3)))

    def test_ref_keeps_type(self):
        m = MatrixNxN.from_rows([[1, 2], [3, 4]])
        assert type(m.ref()) is MatrixNxN

    def test_zero_pivot_warns_and_propagates_nan(self):
        m = MatrixNxM.from_rows([[0, 1], [0, 1]])
        with pytest.warns(RuntimeWarning, match="Zero pivot in column 0"):
            reduced = m.ref()
        assert np.isnan(reduced.to_array()).any()

    def test_ties_keep_earlier_row(self):
        m = MatrixNxM.from_rows([[2, 1], [-2, 5]])
        reduced = m.ref()
        np.testing.assert_array_equal(reduced.get_row(0).to_numpy(), [2, 1])

    @pytest.mark.parametrize("rows, expected", [
        ([[1, 2], [0, 3]], True),
        ([[0, 1], [1, 0]], False),
        ([[1, 2, 3], [0, 0, 4], [0, 0, 0]], True),
        ([[1, 2], [0, 0], [0, 0]], False),
        ([[0, 0], [1, 0]], False),
        ([[1, 1], [0, 1], [0, 1]], False),
    ])
    def test_is_ref(self, rows, expected):
        assert MatrixNxM.from_rows(rows).is_ref() is expected

    def test_rank_full(self):
        m = MatrixNxM.from_rows([
            [-5, -4, -3, -2, -1],
            [0, -3, 8, 3, -2],
            [0, 0, 0, -4.8, -4],
        ])
        assert m.rank() == 3

    def test_rank_deficient(self):
        m = MatrixNxM.from_rows([
            [-5, -4, -3, -2, -1],
            [0, -3, 8, 3, -2],
            [0, -6, 16, 6, -4],
        ])
        assert m.rank() == 2

    def test_rank_matches_numpy(self, rng):
        data = rng.standard_normal((4, 7))
        assert MatrixNxM.from_rows(data).rank() == np.linalg.matrix_rank(data)


# ═══════════════════════════════════════════════════════════════════════
# Structure
# ═══════════════════════════════════════════════════════════════════════


class TestStructure:

    def test_swap_rows_in_place(self, wide_3x5):
        wide_3x5.swap_rows(0, 2)
        np.testing.assert_array_equal(wide_3x5.get_row(0).to_numpy(), [0, -3, 8, 3, -2])
        np.testing.assert_array_equal(wide_3x5.get_row(2).to_numpy(), [-1, -2, -3, -4, -5])

    def test_swap_same_row_noop(self, wide_3x5):
        before = wide_3x5.to_array()
        wide_3x5.swap_rows(1, 1)
        np.testing.assert_array_equal(wide_3x5.to_array(), before)

    def test_swap_cols_in_place(self, wide_3x5):
        wide_3x5.swap_cols(0, 4)
        np.testing.assert_array_equal(wide_3x5.get_col(0).to_numpy(), [-5, -1, -2])
        np.testing.assert_array_equal(wide_3x5.get_col(4).to_numpy(), [-1, -5, 0])

    def test_swap_out_of_range(self, wide_3x5):
        with pytest.raises(IndexOutOfRangeError):
            wide_3x5.swap_rows(0, 3)
        with pytest.raises(IndexOutOfRangeError):
            wide_3x5.swap_cols(5, 0)

    def test_remove_row(self, wide_3x5):
        smaller = wide_3x5.remove_row(1)
        assert smaller.shape == (2, 5)
        np.testing.assert_array_equal(smaller.get_row(1).to_numpy(), [0, -3, 8, 3, -2])

    def test_remove_col(self, wide_3x5):
        smaller = wide_3x5.remove_col(0)
        assert smaller.shape == (3, 4)
        assert smaller.get(0, 0) == -2.0

    def test_remove_both(self, wide_3x5):
        minor = wide_3x5.remove(0, 0)
        assert minor.shape == (2, 4)
        np.testing.assert_array_equal(minor.get_row(0).to_numpy(), [-4, -3, -2, -1])

    def test_remove_last_row_is_none(self):
        assert MatrixNxM(1, 4).remove_row(0) is None
        assert MatrixNxM(1, 4).remove(0, 2) is None

    def test_remove_last_col_is_none(self):
        assert MatrixNxM(4, 1).remove_col(0) is None

    def test_remove_out_of_range(self, wide_3x5):
        with pytest.raises(IndexOutOfRangeError):
            wide_3x5.remove_row(3)
        with pytest.raises(IndexOutOfRangeError):
            wide_3x5.remove(0, 5)


# ═══════════════════════════════════════════════════════════════════════
# Predicates, equality and rendering
# ═══════════════════════════════════════════════════════════════════════


class TestPredicates:

    def test_diagonal(self, diag_123):
        assert diag_123.is_diagonal()

    def test_off_diagonal_entry(self):
        m = MatrixNxM.from_rows([[1, 0, 0], [0, 5, 0], [0, 1e-300, 7]])
        assert not m.is_diagonal()

    def test_non_square_not_diagonal(self):
        assert not MatrixNxM(2, 3).is_diagonal()


class TestEquality:

    def test_within_epsilon(self):
        a = MatrixNxM.from_rows([[1, 2], [3, -5]])
        b = MatrixNxM.from_rows([[1, 2], [3, -5.001]])
        assert not a.equals(b)
        assert a.equals(b, epsilon=0.01)

    def test_eq_operator(self):
        a = MatrixNxM.from_rows([[1, 2], [3, 4]])
        assert a == MatrixNxM.from_rows([[1, 2], [3, 4 + 1e-12]])
        assert a != MatrixNxM.from_rows([[1, 2], [3, 5]])

    def test_dimension_mismatch_unequal(self):
        assert not MatrixNxM(2, 3).equals(MatrixNxM(3, 2))

    def test_compare_with_other_type(self):
        assert MatrixNxM(1, 1) != 0.0

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(MatrixNxM(2, 2))


class TestRendering:

    def test_str(self):
        m = MatrixNxM.from_rows([[1, 0], [0, 2]])
        assert str(m) == "{2x2}[[1.0,0.0],[0.0,2.0]]"

    def test_str_rectangular(self):
        m = MatrixNxM.from_rows([[1.5, -2, 0.25]])
        assert str(m) == "{1x3}[[1.5,-2.0,0.25]]"

    def test_repr(self):
        assert repr(MatrixNxM(2, 3)) == "MatrixNxM(rows=2, cols=3)"
