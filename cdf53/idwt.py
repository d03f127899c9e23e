#Inverse 5/3 Lifting DWT

from __future__ import annotations
import numpy as np

from .dwt import _as_signal, _write_back
from .shared import IP1, IU1, ISCALE, merge_bands


def _lift_inverse(x: np.ndarray) -> None:
    n = x.shape[0]

    # unpack: low half -> evens, high half -> odds
    tb = np.empty_like(x)
    tb[0::2] = x[:n // 2]
    tb[1::2] = x[n // 2:]
    x[:] = tb

    # undo scale
    x[1::2] *= ISCALE
    x[0::2] /= ISCALE

    # undo update
    x[2:n:2] += IU1 * (x[1:n - 1:2] + x[3:n:2])
    x[0] += 2 * IU1 * x[1]

    # undo predict
    x[1:n - 1:2] += IP1 * (x[0:n - 2:2] + x[2:n:2])
    x[n - 1] += 2 * IP1 * x[n - 2]


def iwt53(xn) -> None:
    """
    Inverse of fwt53, in place: iwt53(fwt53(x)) == x up to rounding.
    xn must hold the packed [approximation | detail] layout.
    """
    x, shared = _as_signal(xn)
    _lift_inverse(x)
    if not shared:
        _write_back(xn, x)


def dwt53_inverse_1d(s: np.ndarray, d: np.ndarray, out_dtype=None) -> np.ndarray:
    """
    Inverse 1-D CDF 5/3 DWT from separate bands.
    s and d must have the same length, 2*len(s) a power of two.
    """
    out = merge_bands(s, d)
    iwt53(out)
    if out_dtype is None:
        out_dtype = np.result_type(np.asarray(s).dtype, np.float64)
    return out.astype(out_dtype, copy=False)
