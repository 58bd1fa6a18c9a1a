"""
Numeric Backends for Field Arithmetic.

Field, point and polynomial code never assumes a particular integer type.
Instead a PrimeField carries a NumericBackend, which names the number type
holding residues and supplies the few operations that Python operators do not
provide uniformly across integer types (identities, coercion, wraparound
multiply).

Two backends ship with the toolkit:
    - BIGINT: Python int, arbitrary width. Used for 256-bit fields such as
      BN254.
    - UINT64: numpy.uint64, a native machine word. Only usable when every
      product of two reduced residues fits in 64 bits, i.e. (p-1)^2 < 2^64.

Why the machine-word backend matters:
    Unsigned types cannot represent a - b when b > a. The field engine
    therefore always computes (a + p) - b, which stays non-negative. Running
    the small test field on UINT64 exercises that ordering for real.

Example:
    >>> int(UINT64.wrapping_mul(UINT64.coerce(2**63), UINT64.coerce(2)))
    0
"""

from __future__ import annotations
from dataclasses import dataclass
import operator
from typing import Any, Optional, Protocol, TypeVar

import numpy as np


N = TypeVar("N", bound="SupportsFieldArithmetic")


class SupportsFieldArithmetic(Protocol):
    """
    The capability a number type needs for residues to live in it.

    Python int and the numpy unsigned scalars satisfy this structurally.
    Wraparound multiply and the zero/one identities come from the backend.
    """

    def __lt__(self: N, other: N) -> bool: ...
    def __le__(self: N, other: N) -> bool: ...
    def __add__(self: N, other: N) -> N: ...
    def __sub__(self: N, other: N) -> N: ...
    def __mul__(self: N, other: N) -> N: ...
    def __floordiv__(self: N, other: N) -> N: ...
    def __mod__(self: N, other: N) -> N: ...
    def __and__(self: N, other: N) -> N: ...
    def __rshift__(self: N, other: N) -> N: ...


@dataclass(frozen=True)
class NumericBackend:
    """
    Binds a concrete number type to the field engine.

    Attributes:
        name: Short identifier shown in reprs
        kind: The number type residues are stored in
        bits: Width of the type, or None for arbitrary precision
    """
    name: str
    kind: type
    bits: Optional[int] = None

    @property
    def is_fixed_width(self) -> bool:
        return self.bits is not None

    def zero(self) -> Any:
        """Additive identity in this number type."""
        return self.kind(0)

    def one(self) -> Any:
        """Multiplicative identity in this number type."""
        return self.kind(1)

    def coerce(self, raw: Any) -> Any:
        """
        Convert an integer-like value into this number type.

        Fixed-width types have no signed semantics, so negative values and
        values that do not fit are rejected rather than wrapped.

        Raises:
            ValueError: If raw is out of range for a fixed-width type
            TypeError: If raw is not integer-like
        """
        if type(raw) is self.kind:
            return raw
        value = operator.index(raw)
        if self.bits is not None and not 0 <= value < (1 << self.bits):
            raise ValueError(
                f"{value} does not fit in {self.name} (unsigned {self.bits}-bit)"
            )
        return self.kind(value)

    def wrapping_mul(self, a: Any, b: Any) -> Any:
        """
        Multiply, wrapping modulo 2^bits on fixed-width types.

        Callers reduce the product modulo p afterwards. The result is only
        meaningful when the true product fits (see fits_products_of).
        """
        if self.bits is None:
            return a * b
        with np.errstate(over="ignore"):
            return a * b

    def fits_products_of(self, modulus: int) -> bool:
        """Whether (modulus - 1)^2 is representable without wrapping."""
        if self.bits is None:
            return True
        return (int(modulus) - 1) ** 2 < (1 << self.bits)

    def __repr__(self) -> str:
        return f"NumericBackend({self.name})"


BIGINT = NumericBackend("bigint", int)
UINT64 = NumericBackend("uint64", np.uint64, bits=64)
