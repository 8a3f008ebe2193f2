import logging
from typing import NamedTuple

import numpy as np

from .utils import validate_sequence, validate_bounds

logger = logging.getLogger(__name__)

# "no sum seen yet" baseline; half the int64 minimum so adding two of them stays in range
HALF_INT_MIN = int(np.iinfo(np.int64).min) // 2


class SubarrayResult(NamedTuple):
    start: int
    end: int
    total: int


def find_max_crossing_subarray(sequence, low: int, mid: int, high: int) -> SubarrayResult:
    """Best contiguous run that contains both sequence[mid] and sequence[mid+1].

    Both scans are inclusive: left covers mid..low, right covers mid+1..high.
    """
    values = validate_sequence(sequence)
    validate_bounds(len(values), low, high)
    if not low <= mid < high:
        raise ValueError(f"mid ({mid}) must satisfy low ({low}) <= mid < high ({high}).")
    return _crossing(values, low, mid, high)


def find_max_subarray(sequence, low: int, high: int) -> SubarrayResult:
    """Maximum-sum contiguous run within sequence[low..high] (inclusive).

    Divide and conquer, O(n log n). On equal sums the left half wins over the
    right half, which wins over the run crossing the midpoint.
    """
    values = validate_sequence(sequence)
    validate_bounds(len(values), low, high)
    result = _find_max_subarray(values, low, high)
    logger.info("max subarray [%d, %d] -> start=%d end=%d sum=%d",
                low, high, result.start, result.end, result.total)
    return result


def max_subarray_of(sequence) -> SubarrayResult:
    return find_max_subarray(sequence, 0, len(sequence) - 1)


def _crossing(values, low, mid, high):
    left_sum, running, max_left = HALF_INT_MIN, 0, mid
    for i in range(mid, low - 1, -1):
        running += values[i]
        if running > left_sum:
            left_sum, max_left = running, i

    right_sum, running, max_right = HALF_INT_MIN, 0, mid + 1
    for i in range(mid + 1, high + 1):
        running += values[i]
        if running > right_sum:
            right_sum, max_right = running, i

    return SubarrayResult(max_left, max_right, left_sum + right_sum)


def _find_max_subarray(values, low, high, depth=0):
    if low == high:
        return SubarrayResult(low, high, values[low])

    mid = (low + high) // 2
    logger.debug("[depth=%d] split [%d, %d] at %d", depth, low, high, mid)
    left = _find_max_subarray(values, low, mid, depth + 1)
    right = _find_max_subarray(values, mid + 1, high, depth + 1)
    cross = _crossing(values, low, mid, high)

    if left.total >= right.total and left.total >= cross.total:
        return left
    if right.total >= left.total and right.total >= cross.total:
        return right
    return cross
