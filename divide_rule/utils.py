import os
import logging

import numpy as np

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def get_logger(name: str) -> logging.Logger:
    lg = logging.getLogger(name)
    if not lg.handlers:
        h = logging.StreamHandler()
        h.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(message)s"))
        lg.addHandler(h)
        level = logging.getLevelName(LOG_LEVEL)
        lg.setLevel(level if isinstance(level, int) else logging.INFO)
    return lg


def is_pow2(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def validate_sequence(sequence) -> list:
    """Return the sequence as a list of Python ints, or raise ValueError."""
    arr = np.asarray(sequence)
    if arr.ndim != 1:
        raise ValueError(f"sequence must be one-dimensional; got ndim={arr.ndim}")
    if arr.size == 0:
        raise ValueError("sequence cannot be empty.")
    if arr.dtype.kind not in "iu":
        raise ValueError(f"sequence must contain integers; got dtype {arr.dtype}")
    return arr.tolist()


def validate_bounds(length: int, low: int, high: int):
    if low > high:
        raise ValueError(f"low ({low}) must not exceed high ({high}).")
    if low < 0 or high >= length:
        raise ValueError(f"range [{low}, {high}] outside sequence of length {length}.")


def validate_square_rows(rows) -> np.ndarray:
    """Coerce nested rows to an int64 NxN array."""
    if not isinstance(rows, (list, tuple, np.ndarray)):
        raise ValueError("Input matrices must be a list of rows")
    if len(rows) == 0:
        raise ValueError("Input matrices cannot be empty.")
    arr = np.asarray(rows)
    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError(f"Expected square NxN matrix; got shape {arr.shape}")
    if arr.dtype.kind not in "iu":
        raise ValueError(f"Matrix cells must be integers; got dtype {arr.dtype}")
    return arr.astype(np.int64, copy=False)


def validate_matrices(matrix_a, matrix_b):
    if matrix_a.size != matrix_b.size:
        raise ValueError(
            f"Matrix A and Matrix B must have the same dimension; got {matrix_a.size} and {matrix_b.size}"
        )
    if not is_pow2(matrix_a.size):
        raise ValueError(f"Matrix dimension must be a positive power of two; got {matrix_a.size}")
