from .shared import (
    P1, IP1, U1, IU1, SCALE, ISCALE,
    InvalidLengthError, validate_length, split_bands, merge_bands,
)
from .dwt import fwt53, dwt53_forward_1d
from .idwt import iwt53, dwt53_inverse_1d

__all__ = [
    "P1", "IP1", "U1", "IU1", "SCALE", "ISCALE",
    "InvalidLengthError", "validate_length", "split_bands", "merge_bands",
    "fwt53", "dwt53_forward_1d", "iwt53", "dwt53_inverse_1d",
]
