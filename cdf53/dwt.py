#5/3 Lifting DWT (forward)

from __future__ import annotations
import logging
from typing import Tuple
import numpy as np

from .shared import P1, U1, SCALE, InvalidLengthError, validate_length

logger = logging.getLogger(__name__)


def _as_signal(xn) -> Tuple[np.ndarray, bool]:
    """
    Return (x, shared): a 1-D float view of xn when it exposes a writable
    buffer (ndarray, array.array, memoryview), else a float64 copy that has
    to be written back with _write_back. All checks run before any write.
    """
    if isinstance(xn, np.ndarray):
        x, shared = xn, True
    else:
        try:
            memoryview(xn)
        except TypeError:
            x, shared = np.array(xn, dtype=np.float64), False
        else:
            x, shared = np.asarray(xn), True
    if x.ndim != 1:
        raise TypeError(f"expected a 1-D signal, got shape {x.shape}")
    if shared:
        if not np.issubdtype(x.dtype, np.floating):
            raise TypeError(f"in-place transform needs a floating dtype, got {x.dtype}")
        if not x.flags.writeable:
            raise TypeError("in-place transform needs a writable buffer")
    n = validate_length(x)
    if n < 2:
        # boundary lifting steps read x[n-2]
        logger.debug("rejecting signal of length %d: need at least one even/odd pair", n)
        raise InvalidLengthError(n, f"signal length must be at least 2, got {n}")
    return x, shared


def _write_back(xn, x: np.ndarray) -> None:
    for i, v in enumerate(x.tolist()):
        xn[i] = v


def _lift_forward(x: np.ndarray) -> None:
    n = x.shape[0]

    # predict (odd): interior i = 1, 3, ..., n-3, mirrored right edge
    x[1:n - 1:2] += P1 * (x[0:n - 2:2] + x[2:n:2])
    x[n - 1] += 2 * P1 * x[n - 2]

    # update (even): interior i = 2, 4, ..., n-2, mirrored left edge
    x[2:n:2] += U1 * (x[1:n - 1:2] + x[3:n:2])
    x[0] += 2 * U1 * x[1]

    # scale
    x[1::2] *= SCALE
    x[0::2] /= SCALE

    # pack: evens -> low half, odds -> high half
    tb = np.empty_like(x)
    tb[:n // 2] = x[0::2]
    tb[n // 2:] = x[1::2]
    x[:] = tb


def fwt53(xn) -> None:
    """
    Forward biorthogonal CDF 5/3 DWT (lifting), in place.

    len(xn) must be a power of two (>= 2). On return the first half of xn
    holds the approximation coefficients and the second half the detail
    coefficients. xn may be a float ndarray, a float buffer (array.array('d'),
    memoryview) or a mutable sequence such as a list.
    On InvalidLengthError/TypeError xn is left unchanged.
    """
    x, shared = _as_signal(xn)
    _lift_forward(x)
    if not shared:
        _write_back(xn, x)


def dwt53_forward_1d(x: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """
    Forward 1-D CDF 5/3 DWT on a copy of x.
    Returns (s, d) = (approximation, detail) as float64 arrays of length n/2.
    """
    buf = np.array(x, dtype=np.float64)
    fwt53(buf)
    h = buf.shape[0] // 2
    return buf[:h].copy(), buf[h:].copy()
