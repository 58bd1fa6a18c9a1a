"""
Finite Field Arithmetic over an Arbitrary Prime.

This module implements modular arithmetic over prime fields, the foundation
for the curve and polynomial engines. A PrimeField describes one field (and
the short Weierstrass curve y^2 = x^3 + A*x + B defined over it); a
FieldElement is one residue of that field.

Key Concepts:
    - All arithmetic is done modulo a prime p
    - Addition: (a + b) mod p
    - Subtraction: ((a + p) - b) mod p (never a bare difference, so unsigned
      number types cannot underflow)
    - Multiplication: wrapping (a * b) mod p
    - Division: a * b^(-1) mod p
    - Inversion: b^(p-2) mod p (Fermat's little theorem)

Residues are stored in the number type of the field's NumericBackend, so the
same code runs on Python ints (256-bit fields) and numpy.uint64 (small test
fields).

Example:
    >>> field = PrimeField(101, a=98, b=3, name="F101")
    >>> a = field.element(10)
    >>> b = field.element(12)
    >>> print(a - b)  # 10 - 12 = -2 -> 99
    99
"""

from __future__ import annotations
from dataclasses import dataclass
from itertools import accumulate
import operator
from typing import List, Optional, Sequence, Union, TYPE_CHECKING

import numpy as np

from .errors import FieldMismatchError, NotInvertibleError
from .helpers import get_logger
from .numeric import BIGINT, NumericBackend, SupportsFieldArithmetic

if TYPE_CHECKING:
    from ..curve.point import Point
    from ..poly.polynomial import Polynomial

log = get_logger("field")

IntLike = Union[int, np.integer]


def modpow(
    base: SupportsFieldArithmetic,
    exp: Union[SupportsFieldArithmetic, int],
    field: PrimeField,
) -> SupportsFieldArithmetic:
    """
    Modular exponentiation by square-and-multiply.

    The exponent is consumed least-significant bit first. Every product is
    reduced immediately, which bounds intermediates below p^2.

    Args:
        base: Residue in the field's number type
        exp: Non-negative exponent (field number type or Python int)
        field: Field supplying the modulus and the backend

    Returns:
        base^exp mod p in the field's number type
    """
    backend = field.backend
    p = field.prime
    acc = backend.one() % p
    base = base % p
    exp_zero, exp_one = type(exp)(0), type(exp)(1)
    while exp > exp_zero:
        if (exp & exp_one) == exp_one:
            acc = backend.wrapping_mul(acc, base) % p
        base = backend.wrapping_mul(base, base) % p
        exp >>= exp_one
    return acc


@dataclass(frozen=True)
class PrimeField:
    """
    Descriptor of a prime field and the curve y^2 = x^3 + A*x + B over it.

    Descriptors are immutable. Elements, points and polynomials remember the
    descriptor they were built from, and operations refuse to mix
    descriptors.

    Attributes:
        prime: The prime modulus p (primality is not verified)
        a: Curve coefficient A, reduced mod p
        b: Curve coefficient B, reduced mod p
        name: Display name
        backend: Number type residues are stored in

    Example:
        >>> field = PrimeField(101, a=98, b=3, name="F101")
        >>> field.point(1, 1) * 3
        Point(80, 81, F101)
    """
    prime: SupportsFieldArithmetic
    a: SupportsFieldArithmetic = 0
    b: SupportsFieldArithmetic = 0
    name: str = ""
    backend: NumericBackend = BIGINT

    def __post_init__(self):
        """Validate the descriptor and store constants in the backend type."""
        prime = operator.index(self.prime)
        if prime < 2:
            raise ValueError("Prime must be at least 2")
        if not self.backend.fits_products_of(prime):
            raise ValueError(
                f"{self.backend.name} cannot hold products of residues mod {prime}"
            )
        object.__setattr__(self, "prime", self.backend.coerce(prime))
        object.__setattr__(self, "a", self.backend.coerce(operator.index(self.a) % prime))
        object.__setattr__(self, "b", self.backend.coerce(operator.index(self.b) % prime))
        if not self.name:
            object.__setattr__(self, "name", f"F{prime}")
        log.debug("field %s: %d-bit prime on %s", self.name, prime.bit_length(), self.backend.name)

    def __repr__(self) -> str:
        return f"PrimeField({self.name})"

    @property
    def modulus(self) -> int:
        """The prime as a Python int."""
        return int(self.prime)

    @property
    def bits(self) -> int:
        return self.modulus.bit_length()

    def reduce(self, raw: IntLike) -> SupportsFieldArithmetic:
        """
        Reduce an integer into [0, p) in the backend number type.

        Values already in the backend type are reduced there. Anything else
        (Python ints of any size, numpy integers of any signedness) is
        reduced with Python arithmetic first, so -1 becomes p - 1 on every
        backend and big integers convert into machine-word fields.
        """
        if type(raw) is self.backend.kind:
            return raw % self.prime
        return self.backend.coerce(operator.index(raw) % self.modulus)

    def element(self, value: IntLike) -> FieldElement:
        """Create a field element from an integer."""
        return FieldElement(value, self)

    def zero(self) -> FieldElement:
        """Return the additive identity (0)."""
        return FieldElement(self.backend.zero(), self)

    def one(self) -> FieldElement:
        """Return the multiplicative identity (1)."""
        return FieldElement(self.backend.one(), self)

    @property
    def curve_a(self) -> FieldElement:
        return FieldElement(self.a, self)

    @property
    def curve_b(self) -> FieldElement:
        return FieldElement(self.b, self)

    def point(self, x: Union[FieldElement, IntLike], y: Union[FieldElement, IntLike]) -> Point:
        """Create an affine point on this field's curve (validated)."""
        from ..curve.point import Point
        return Point(self, x, y)

    def infinity(self) -> Point:
        """Return the point at infinity (group identity)."""
        from ..curve.point import Point
        return Point(self)

    def polynomial(self, coefficients: Sequence[Union[FieldElement, IntLike]]) -> Polynomial:
        """Create a polynomial, lowest-degree coefficient first."""
        from ..poly.polynomial import Polynomial
        return Polynomial(self, coefficients)


@dataclass(frozen=True, eq=False)
class FieldElement:
    """
    An element of a prime field Z_p.

    All operations reduce their result modulo p, so value is always in
    [0, p-1]. Plain integers may be used as the other operand and are
    converted into the same field. Comparing with an integer compares
    residues, and an element hashes like its residue, so element(5) and 5
    are interchangeable as dict keys (106 is equal to element(5) in F101
    but is not the same key).

    Attributes:
        value: The residue, in the field backend's number type
        field: The PrimeField this element belongs to

    Example:
        >>> field = PrimeField(101)
        >>> print(field.element(100) + field.element(2))
        1
    """
    value: SupportsFieldArithmetic
    field: PrimeField

    def __post_init__(self):
        """Ensure value is reduced modulo p."""
        object.__setattr__(self, "value", self.field.reduce(self.value))

    def __repr__(self) -> str:
        return f"FieldElement({self.value}, {self.field.name})"

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return int(self.value)

    def _operand(self, other: object) -> Optional[SupportsFieldArithmetic]:
        """Residue of other in this field, or None if other is not usable."""
        if isinstance(other, FieldElement):
            if other.field is not self.field and other.field != self.field:
                raise FieldMismatchError(
                    f"cannot combine elements of {self.field.name} and {other.field.name}"
                )
            return other.value
        if isinstance(other, (int, np.integer)):
            return self.field.reduce(other)
        return None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FieldElement):
            return self.field == other.field and bool(self.value == other.value)
        if isinstance(other, (int, np.integer)):
            return bool(self.value == self.field.reduce(other))
        return False

    def __hash__(self) -> int:
        # Equal to hash(int) of the residue, matching __eq__ against reduced ints.
        return hash(int(self.value))

    # Arithmetic Operations

    def __add__(self, other: Union[FieldElement, IntLike]) -> FieldElement:
        """Addition in the field: (a + b) mod p"""
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return FieldElement(self.value + v, self.field)

    def __radd__(self, other: IntLike) -> FieldElement:
        return self.__add__(other)

    def __sub__(self, other: Union[FieldElement, IntLike]) -> FieldElement:
        """Subtraction in the field: ((a + p) - b) mod p"""
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return FieldElement((self.value + self.field.prime) - v, self.field)

    def __rsub__(self, other: IntLike) -> FieldElement:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return FieldElement((v + self.field.prime) - self.value, self.field)

    def __mul__(self, other: Union[FieldElement, IntLike]) -> FieldElement:
        """Multiplication in the field: (a * b) mod p"""
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return FieldElement(self.field.backend.wrapping_mul(self.value, v), self.field)

    def __rmul__(self, other: IntLike) -> FieldElement:
        return self.__mul__(other)

    def __truediv__(self, other: Union[FieldElement, IntLike]) -> FieldElement:
        """
        Division in the field: a * b^(-1) mod p

        Raises:
            NotInvertibleError: If other is zero
        """
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return self * FieldElement(v, self.field).inverse()

    def __rtruediv__(self, other: IntLike) -> FieldElement:
        v = self._operand(other)
        if v is None:
            return NotImplemented
        return FieldElement(v, self.field) * self.inverse()

    def __neg__(self) -> FieldElement:
        """Negation: -a = p - a"""
        return FieldElement(self.field.prime - self.value, self.field)

    def __pow__(self, exp: Union[FieldElement, IntLike]) -> FieldElement:
        """
        Exponentiation using square-and-multiply.

        The exponent may be a field element of the same field (its residue
        is used, so a^e means a^(e mod p)) or a plain integer. Negative
        integers invert first: a^(-n) = (a^(-1))^n.
        """
        if isinstance(exp, FieldElement):
            e = self._operand(exp)
        else:
            e = operator.index(exp)
            if e < 0:
                return self.inverse() ** (-e)
        return FieldElement(modpow(self.value, e, self.field), self.field)

    def inv(self) -> Optional[FieldElement]:
        """
        Modular inverse via Fermat's little theorem: a^(p-2) mod p.

        Returns:
            The inverse, or None if self is zero (no inverse exists)
        """
        if self.is_zero():
            return None
        backend = self.field.backend
        two = backend.one() + backend.one()
        return FieldElement(modpow(self.value, self.field.prime - two, self.field), self.field)

    def inverse(self) -> FieldElement:
        """
        Find b such that a * b = 1 (mod p).

        Raises:
            NotInvertibleError: If self is zero
        """
        result = self.inv()
        if result is None:
            raise NotInvertibleError(f"Cannot invert zero in {self.field.name}")
        return result

    def is_zero(self) -> bool:
        """Check if this element is zero."""
        return bool(self.value == self.field.backend.zero())

    def is_one(self) -> bool:
        """Check if this element is one."""
        return bool(self.value == self.field.backend.one())


class BatchInverter:
    """
    Inverts many elements of one field for the price of a single inversion.

    Montgomery's trick: with prefix products P[i] = e[0] * ... * e[i], one
    inversion of P[n-1] yields every individual inverse, since
    e[i]^(-1) = P[i]^(-1) * P[i-1] and P[i-1]^(-1) = P[i]^(-1) * e[i].
    Cost is one exponentiation plus about 3n multiplications.

    Example:
        >>> field = PrimeField(101)
        >>> values = [field.element(v) for v in (2, 3, 50)]
        >>> [str(v) for v in BatchInverter(field).invert_batch(values)]
        ['51', '34', '99']
    """

    def __init__(self, field: PrimeField):
        self.field = field

    def invert_batch(self, elements: Sequence[FieldElement]) -> List[FieldElement]:
        """
        Return the inverses of elements, in order.

        Raises:
            NotInvertibleError: If any element is zero; the message names
                its position
            FieldMismatchError: If an element belongs to another field
        """
        for pos, element in enumerate(elements):
            if element.field != self.field:
                raise FieldMismatchError(
                    f"element {pos} belongs to {element.field.name}, not {self.field.name}"
                )
            if element.is_zero():
                raise NotInvertibleError(f"Cannot invert zero (element {pos})")
        if not elements:
            return []

        prefix = list(accumulate(elements, operator.mul))
        running = prefix[-1].inverse()

        inverses: List[FieldElement] = []
        for pos in reversed(range(1, len(elements))):
            inverses.append(running * prefix[pos - 1])
            running = running * elements[pos]
        inverses.append(running)
        inverses.reverse()
        return inverses
