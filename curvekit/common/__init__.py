"""
Common building blocks for curvekit.

This module provides:
    - Numeric backends (Python int, numpy.uint64)
    - Prime field descriptors and field elements
    - Error types and logging helpers
"""

from .errors import (
    CurveKitError,
    FieldMismatchError,
    GroupLawError,
    NotInvertibleError,
    PointNotOnCurveError,
)
from .field import BatchInverter, FieldElement, PrimeField, modpow
from .numeric import BIGINT, UINT64, NumericBackend, SupportsFieldArithmetic

__all__ = [
    "PrimeField",
    "FieldElement",
    "BatchInverter",
    "modpow",
    "NumericBackend",
    "SupportsFieldArithmetic",
    "BIGINT",
    "UINT64",
    "CurveKitError",
    "NotInvertibleError",
    "PointNotOnCurveError",
    "GroupLawError",
    "FieldMismatchError",
]
