# Shared lifting constants, length checks and band helpers
from __future__ import annotations
import logging
import math
from typing import Tuple, Union
import numpy as np

logger = logging.getLogger(__name__)

# CDF 5/3 lifting coefficients
P1 = -0.5          # predict
IP1 = -P1

U1 = 0.25          # update
IU1 = -U1

SCALE = math.sqrt(2.0)
ISCALE = 1 / SCALE


class InvalidLengthError(ValueError):
    """Signal length is not a positive power of two."""

    def __init__(self, n: int, msg: str | None = None):
        self.n = n
        if msg is None:
            msg = f"signal length must be a positive power of two, got {n}"
        super().__init__(msg)


def validate_length(xn: Union[int, "np.ndarray", list]) -> int:
    """
    Return n = len(xn) (or xn itself when given an int) if n is a positive
    power of two. Raises InvalidLengthError otherwise; never touches xn.
    """
    if isinstance(xn, (bool, np.bool_)):
        raise TypeError(f"expected a buffer or an integer length, got {xn!r}")
    n = xn if isinstance(xn, (int, np.integer)) else len(xn)
    n = int(n)
    if n <= 0 or (n & (n - 1)) != 0:
        logger.debug("rejecting signal length %d", n)
        raise InvalidLengthError(n)
    return n


def split_bands(coeffs: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """(approximation, detail) views of a packed [s | d] buffer."""
    coeffs = np.asarray(coeffs)
    n = validate_length(coeffs)
    h = n // 2
    return coeffs[:h], coeffs[h:]


def merge_bands(s: np.ndarray, d: np.ndarray) -> np.ndarray:
    """Pack approximation and detail bands into one float64 [s | d] buffer."""
    s = np.asarray(s, dtype=np.float64)
    d = np.asarray(d, dtype=np.float64)
    if s.shape != d.shape or s.ndim != 1:
        logger.debug("band shape mismatch: s=%s d=%s", s.shape, d.shape)
        raise InvalidLengthError(s.size + d.size,
                                 f"bands must be 1-D and of equal length, got {s.shape} and {d.shape}")
    out = np.concatenate([s, d], axis=0)
    validate_length(out)
    return out
