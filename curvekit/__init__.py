"""
curvekit
========

Prime-field arithmetic, elliptic-curve group law and polynomial arithmetic
over an arbitrary prime field. The same code runs on small test fields
stored in machine words and on 256-bit fields stored in Python ints.

Modules:
    - common: numeric backends, field descriptors and elements, errors
    - curve: affine points, the group law, registered curves
    - poly: fixed-length polynomials

Quick Start:
    >>> from curvekit import F101
    >>> a = F101.element(10)
    >>> print(a - 12)
    99
    >>> F101.point(1, 1) + F101.point(6, 10)
    Point(73, 31, F101)
"""

__version__ = "0.1.0"

from . import common
from . import curve
from . import poly

from .common import (
    BIGINT,
    UINT64,
    BatchInverter,
    CurveKitError,
    FieldElement,
    FieldMismatchError,
    GroupLawError,
    NotInvertibleError,
    NumericBackend,
    PointNotOnCurveError,
    PrimeField,
)
from .curve import BN254, BN254_G1, BN254_ORDER, F101, Point, get_field, register_field
from .poly import Polynomial
