from .max_subarray import (
    HALF_INT_MIN,
    SubarrayResult,
    find_max_crossing_subarray,
    find_max_subarray,
    max_subarray_of,
)
from .quadrant_matrix import (
    Matrix,
    QuadrantView,
    multiply,
    multiply_into,
    partition_into_quadrants,
)

__all__ = [
    "HALF_INT_MIN",
    "SubarrayResult",
    "find_max_crossing_subarray",
    "find_max_subarray",
    "max_subarray_of",
    "Matrix",
    "QuadrantView",
    "multiply",
    "multiply_into",
    "partition_into_quadrants",
]
