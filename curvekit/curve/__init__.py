"""
Elliptic curve points over curvekit prime fields.

Usage:
    >>> from curvekit.curve import F101
    >>> F101.point(1, 1) * 3
    Point(80, 81, F101)
"""

from .point import Point
from .curves import (
    BN254,
    BN254_G1,
    BN254_ORDER,
    F101,
    get_field,
    register_field,
    registered_fields,
)

__all__ = [
    "Point",
    "F101",
    "BN254",
    "BN254_G1",
    "BN254_ORDER",
    "register_field",
    "get_field",
    "registered_fields",
]
