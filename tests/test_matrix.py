import numpy as np
import pytest

from neuralnet.errors import ShapeMismatchError
from neuralnet.matrix import (
    to_matrix, create_matrix, random_matrix, rows, columns,
    dot_product, transpose, matrix_sum, difference, multiplication,
    apply_function, apply_rate, sigmoid, subtract_from_one, multiply_by_two,
)


def test_create_matrix_is_zero_filled():
    m = create_matrix(3, 2)
    assert m.shape == (3, 2)
    assert not m.any()


@pytest.mark.parametrize("shape", [(0, 2), (2, 0)])
def test_create_matrix_rejects_empty(shape):
    with pytest.raises(ShapeMismatchError):
        create_matrix(*shape)


def test_random_matrix_range_and_seed():
    np.random.seed(3)
    a = random_matrix(4, 5)
    np.random.seed(3)
    b = random_matrix(4, 5)
    assert a.shape == (4, 5)
    assert np.all(a >= -1) and np.all(a < 1)
    np.testing.assert_array_equal(a, b)


def test_rows_and_columns():
    m = create_matrix(2, 7)
    assert rows(m) == 2
    assert columns(m) == 7


def test_to_matrix_promotes_vector_to_single_row():
    m = to_matrix([1, 2, 3])
    assert m.shape == (1, 3)
    assert m.dtype == float


def test_to_matrix_rejects_ragged_rows():
    with pytest.raises(ShapeMismatchError):
        to_matrix([[1, 2], [3]])


def test_dot_product():
    a = to_matrix([[1, 2], [3, 4], [5, 6]])
    b = to_matrix([[1, 0, 2], [0, 1, 3]])
    result = dot_product(a, b)
    assert result.shape == (3, 3)
    np.testing.assert_array_equal(result, [[1, 2, 8], [3, 4, 18], [5, 6, 28]])


def test_dot_product_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        dot_product(create_matrix(2, 3), create_matrix(2, 3))


def test_transpose_returns_new_matrix():
    a = to_matrix([[1, 2, 3]])
    t = transpose(a)
    assert t.shape == (3, 1)
    t[0, 0] = 99
    assert a[0, 0] == 1


def test_elementwise_operations():
    a = to_matrix([[1, 2], [3, 4]])
    b = to_matrix([[4, 3], [2, 1]])
    np.testing.assert_array_equal(matrix_sum(a, b), [[5, 5], [5, 5]])
    np.testing.assert_array_equal(difference(a, b), [[-3, -1], [1, 3]])
    np.testing.assert_array_equal(multiplication(a, b), [[4, 6], [6, 4]])


@pytest.mark.parametrize("operation", [matrix_sum, difference, multiplication])
def test_elementwise_shape_mismatch(operation):
    with pytest.raises(ShapeMismatchError):
        operation(create_matrix(2, 2), create_matrix(2, 3))


def test_operations_do_not_mutate_operands():
    a = to_matrix([[1, 2]])
    b = to_matrix([[3, 4]])
    matrix_sum(a, b)
    apply_rate(a, 10)
    np.testing.assert_array_equal(a, [[1, 2]])
    np.testing.assert_array_equal(b, [[3, 4]])


def test_apply_function_and_pointwise_helpers():
    m = to_matrix([[0.0, 0.25], [1.0, -2.0]])
    np.testing.assert_allclose(apply_function(m, subtract_from_one), [[1.0, 0.75], [0.0, 3.0]])
    np.testing.assert_allclose(apply_function(m, multiply_by_two), [[0.0, 0.5], [2.0, -4.0]])
    np.testing.assert_allclose(apply_function(create_matrix(2, 2), sigmoid), np.full((2, 2), 0.5))


def test_apply_function_rejects_shape_change():
    with pytest.raises(ShapeMismatchError):
        apply_function(create_matrix(2, 2), lambda m: m.sum(axis=0))


def test_sigmoid_values():
    assert sigmoid(0) == 0.5
    assert sigmoid(10) > 0.99
    assert sigmoid(-10) < 0.01


def test_apply_rate():
    np.testing.assert_allclose(apply_rate(to_matrix([[1, -2]]), 0.5), [[0.5, -1.0]])
