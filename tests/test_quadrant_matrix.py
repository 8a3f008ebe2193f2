import numpy as np
import pytest

from divide_rule.quadrant_matrix import (
    Matrix,
    QuadrantView,
    multiply,
    multiply_into,
    partition_into_quadrants,
)


def random_matrix(rng, n, low=-10, high=10):
    return Matrix.from_rows(rng.integers(low, high, size=(n, n)))


def naive_product(a, b):
    n = len(a)
    return [[sum(a[i][k] * b[k][j] for k in range(n)) for j in range(n)] for i in range(n)]


def test_new_matrix_is_zeroed():
    m = Matrix(4)
    assert m.tolist() == [[0] * 4 for _ in range(4)]
    m[1, 2] = 7
    assert m[1, 2] == 7
    assert m.to_array()[1, 2] == 7


@pytest.mark.parametrize("n", [1, 2, 4, 8])
def test_identity_property(n):
    rng = np.random.default_rng(n)
    A = random_matrix(rng, n)
    C = Matrix(n)
    multiply_into(A, Matrix.identity(n), C)
    assert C == A


def test_matches_naive_product():
    rng = np.random.default_rng(42)
    for _ in range(10):
        A = random_matrix(rng, 4)
        B = random_matrix(rng, 4)
        C = multiply(A, B)
        assert C.tolist() == naive_product(A.tolist(), B.tolist())
        assert np.array_equal(C.to_array(), A.to_array() @ B.to_array())


def test_textbook_example():
    A = Matrix.from_rows([[1, 3, 2, 4], [8, 5, 7, 5], [6, 9, 1, 2], [4, 8, 2, 9]])
    B = Matrix.from_rows([[6, 8, 6, 8], [9, 6, 4, 2], [3, 7, 8, 4], [1, 2, 9, 8]])
    assert multiply(A, B).tolist() == naive_product(A.tolist(), B.tolist())


def test_accumulates_into_destination():
    rng = np.random.default_rng(3)
    A = random_matrix(rng, 4)
    B = random_matrix(rng, 4)
    C = Matrix(4)
    assert multiply_into(A, B, C) is C
    multiply_into(A, B, C)
    assert np.array_equal(C.to_array(), 2 * (A.to_array() @ B.to_array()))


def test_partition_offsets():
    m = Matrix(4)
    m11, m12, m21, m22 = partition_into_quadrants(m)
    assert [(q.row_offset, q.col_offset, q.size) for q in (m11, m12, m21, m22)] == [
        (0, 0, 2), (0, 2, 2), (2, 0, 2), (2, 2, 2)]
    assert all(isinstance(q, QuadrantView) for q in (m11, m12, m21, m22))


def test_nested_views_compose_offsets_and_share_storage():
    m = Matrix(4)
    _, _, _, m22 = partition_into_quadrants(m)
    _, inner12, _, _ = partition_into_quadrants(m22)
    assert (inner12.row_offset, inner12.col_offset, inner12.size) == (2, 3, 1)
    inner12[0, 0] = 9
    assert m[2, 3] == 9
    assert m22[0, 1] == 9
    assert inner12.shares_storage(m)


def test_multiply_on_views_touches_only_destination_quadrant():
    big = Matrix(4)
    a_rows = [[1, 2], [3, 4]]
    b_rows = [[5, 6], [7, 8]]
    for i in range(2):
        for j in range(2):
            big[i, j] = a_rows[i][j]
            big[i, j + 2] = b_rows[i][j]
    big[3, 3] = 100
    m11, m12, m21, m22 = partition_into_quadrants(big)
    multiply_into(m11, m12, m21)
    assert m21.tolist() == [[19, 22], [43, 50]]
    assert m11.tolist() == a_rows
    assert m12.tolist() == b_rows
    assert m22.tolist() == [[0, 0], [0, 100]]


def test_accumulate_in_place():
    m = Matrix.from_rows([[1, 2], [3, 4]])
    other = Matrix.from_rows([[10, 20], [30, 40]])
    assert QuadrantView(m, 0, 0, 2).accumulate(other) is None
    assert m.tolist() == [[11, 22], [33, 44]]


def test_add_at():
    m = Matrix(2)
    m.add_at(1, 0, 5)
    m.add_at(1, 0, 5)
    assert m[1, 0] == 10


def test_single_cell_views_accumulate_into_parent():
    big = Matrix.from_rows([[3, 0], [4, 2]])
    m11, _, m21, m22 = partition_into_quadrants(big)
    multiply_into(m21, m11, m22)
    multiply_into(m21, m11, m22)
    assert big.tolist() == [[3, 0], [4, 26]]


def test_rejects_non_power_of_two():
    with pytest.raises(ValueError, match="power of two"):
        multiply(Matrix(3), Matrix(3))


def test_rejects_size_mismatch():
    with pytest.raises(ValueError):
        multiply_into(Matrix(2), Matrix(4), Matrix(2))
    with pytest.raises(ValueError):
        multiply_into(Matrix(2), Matrix(2), Matrix(4))


def test_rejects_overlapping_destination():
    m = Matrix.identity(2)
    with pytest.raises(ValueError, match="overlap"):
        multiply_into(m, Matrix.identity(2), QuadrantView(m, 0, 0, 2))


def test_rejects_plain_lists():
    with pytest.raises(TypeError):
        multiply_into([[1]], [[1]], Matrix(1))


@pytest.mark.parametrize("rows", [[], [[1, 2], [3]], [[1, 2, 3], [4, 5, 6]], [[1.5, 2], [3, 4]]])
def test_from_rows_rejects_bad_input(rows):
    with pytest.raises(ValueError):
        Matrix.from_rows(rows)


def test_bad_dimension_and_index():
    with pytest.raises(ValueError):
        Matrix(0)
    with pytest.raises(IndexError):
        Matrix(2)[2, 0]
    with pytest.raises(ValueError):
        partition_into_quadrants(Matrix(1))
