import logging
import math
import numbers

import numpy as np

logging.basicConfig(format="%(levelname)s: %(message)s")
my_logger = logging.getLogger(__name__)


def to_f32(value) -> np.float32:
    if isinstance(value, numbers.Integral):
        # ints past the float range would otherwise raise instead of becoming inf
        try:
            value = float(value)
        except OverflowError:
            value = math.inf if value > 0 else -math.inf
    with np.errstate(over="ignore"):
        return np.float32(value)


def format_f32(value: np.float32) -> str:
    # shortest string that round-trips the float32, so 2.0 -> "2" and 0.1 -> "0.1"
    if not np.isfinite(value):
        return str(float(value))
    return np.format_float_positional(value, unique=True, trim="-")


def as_complex64_array(values) -> np.ndarray:
    array = np.asarray(values)
    if array.ndim != 1:
        raise ValueError(f"values must be a 1-D array, got shape {array.shape}")
    if array.dtype != np.complex64:
        array = array.astype(np.complex64)
    return array
