"""Square integer matrices and recursive quadrant multiplication.

A ``Matrix`` owns one flat row-major int64 buffer. A ``QuadrantView`` is a
non-owning window into that buffer described by (row_offset, col_offset,
size); writes through a view land in the parent's cells. The multiplier
splits every operand into four views per call and never copies data.
"""
import logging

import numpy as np

from .utils import validate_matrices, validate_square_rows

logger = logging.getLogger(__name__)


class _Grid:
    """Cell access shared by owning matrices and views."""

    __slots__ = ("_data", "_stride", "row_offset", "col_offset", "size")

    def _index(self, row: int, col: int) -> int:
        return (row + self.row_offset) * self._stride + col + self.col_offset

    def _check(self, key):
        row, col = key
        if not (0 <= row < self.size and 0 <= col < self.size):
            raise IndexError(f"cell ({row}, {col}) outside {self.size}x{self.size} grid")
        return self._index(row, col)

    def __getitem__(self, key) -> int:
        return int(self._data[self._check(key)])

    def __setitem__(self, key, value: int):
        self._data[self._check(key)] = value

    def add_at(self, row: int, col: int, value: int):
        self._data[self._check((row, col))] += value

    def accumulate(self, other):
        """Add ``other`` cell by cell into this grid, in place."""
        if other.size != self.size:
            raise ValueError(f"cannot add a {other.size}x{other.size} grid into a {self.size}x{self.size} grid")
        for r in range(self.size):
            for c in range(self.size):
                self._data[self._index(r, c)] += other._data[other._index(r, c)]

    def shares_storage(self, other) -> bool:
        return self._data is other._data

    def to_array(self) -> np.ndarray:
        full = self._data.reshape(-1, self._stride)
        r0, c0, n = self.row_offset, self.col_offset, self.size
        return full[r0:r0 + n, c0:c0 + n].copy()

    def tolist(self):
        return self.to_array().tolist()

    def __eq__(self, other):
        if not isinstance(other, _Grid):
            return NotImplemented
        return self.size == other.size and np.array_equal(self.to_array(), other.to_array())

    __hash__ = None


class Matrix(_Grid):
    __slots__ = ()

    def __init__(self, n: int):
        if not isinstance(n, (int, np.integer)) or n <= 0:
            raise ValueError(f"Matrix dimension must be a positive integer; got {n!r}")
        n = int(n)
        self._data = np.zeros(n * n, dtype=np.int64)
        self._stride = n
        self.row_offset = self.col_offset = 0
        self.size = n

    @classmethod
    def from_rows(cls, rows) -> "Matrix":
        arr = validate_square_rows(rows)
        m = cls(arr.shape[0])
        m._data[:] = arr.ravel()
        return m

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        m = cls(n)
        for i in range(n):
            m[i, i] = 1
        return m

    def __repr__(self):
        return f"Matrix({self.tolist()!r})"


class QuadrantView(_Grid):
    __slots__ = ()

    def __init__(self, parent: _Grid, row_offset: int, col_offset: int, size: int):
        if row_offset < 0 or col_offset < 0 or size <= 0 \
                or row_offset + size > parent.size or col_offset + size > parent.size:
            raise ValueError(
                f"view ({row_offset}, {col_offset}, {size}) does not fit a {parent.size}x{parent.size} grid"
            )
        self._data = parent._data
        self._stride = parent._stride
        # offsets are stored relative to the owning buffer
        self.row_offset = parent.row_offset + row_offset
        self.col_offset = parent.col_offset + col_offset
        self.size = size

    def __repr__(self):
        return f"QuadrantView(row_offset={self.row_offset}, col_offset={self.col_offset}, size={self.size})"


def partition_into_quadrants(matrix: _Grid):
    """Return views (m11, m12, m21, m22), each of half the input's size."""
    if matrix.size < 2 or matrix.size % 2:
        raise ValueError(f"cannot partition a {matrix.size}x{matrix.size} grid into quadrants")
    h = matrix.size // 2
    return (
        QuadrantView(matrix, 0, 0, h),
        QuadrantView(matrix, 0, h, h),
        QuadrantView(matrix, h, 0, h),
        QuadrantView(matrix, h, h, h),
    )


def _overlaps(x: _Grid, y: _Grid) -> bool:
    if not x.shares_storage(y):
        return False
    return (x.row_offset < y.row_offset + y.size and y.row_offset < x.row_offset + x.size
            and x.col_offset < y.col_offset + y.size and y.col_offset < x.col_offset + x.size)


def multiply_into(a: _Grid, b: _Grid, c: _Grid) -> _Grid:
    """Add the product ``a x b`` into ``c`` and return ``c``.

    ``c`` is accumulated into, not overwritten: pass a zeroed destination for a
    plain product. All three must share one power-of-two dimension and ``c``
    must not overlap ``a`` or ``b``.
    """
    for name, m in (("A", a), ("B", b), ("C", c)):
        if not isinstance(m, _Grid):
            raise TypeError(f"{name} must be a Matrix or QuadrantView; got {type(m).__name__}")
    validate_matrices(a, b)
    validate_matrices(a, c)
    if _overlaps(c, a) or _overlaps(c, b):
        raise ValueError("destination C must not overlap operand A or B")

    logger.info("multiply_into n=%d", a.size)
    _multiply(a, b, c, 0)
    return c


def multiply(a: _Grid, b: _Grid) -> Matrix:
    c = Matrix(a.size)
    multiply_into(a, b, c)
    return c


def _multiply(a, b, c, depth):
    n = a.size
    if n == 1:
        c.add_at(0, 0, a[0, 0] * b[0, 0])
        return

    logger.debug("[depth=%d] split n=%d -> %d", depth, n, n // 2)
    A11, A12, A21, A22 = partition_into_quadrants(a)
    B11, B12, B21, B22 = partition_into_quadrants(b)
    C11, C12, C21, C22 = partition_into_quadrants(c)

    _multiply(A11, B11, C11, depth + 1); _multiply(A12, B21, C11, depth + 1)
    _multiply(A11, B12, C12, depth + 1); _multiply(A12, B22, C12, depth + 1)
    _multiply(A21, B11, C21, depth + 1); _multiply(A22, B21, C21, depth + 1)
    _multiply(A21, B12, C22, depth + 1); _multiply(A22, B22, C22, depth + 1)
