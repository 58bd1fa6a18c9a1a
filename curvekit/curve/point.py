"""
Elliptic Curve Points and the Group Law.

Points live on the short Weierstrass curve y^2 = x^3 + A*x + B described by
a PrimeField. A point is either affine (x, y) or the point at infinity, the
identity of the group. There is no other state.

Group Law (P + Q), cases in order:
    1. P = inf -> Q;  Q = inf -> P
    2. x1 == x2, y1 != y2 -> inf (P and Q are inverses)
    3. x1 == x2, y1 == y2 -> doubling, gradient = (3*x1^2 + A) / (2*y1)
    4. otherwise        -> gradient = (y2 - y1) / (x2 - x1)
    x3 = gradient^2 - x1 - x2
    y3 = gradient * (x1 - x3) - y1

The result goes through the same validating constructor as user input, so an
internal mistake can never produce an off-curve point silently.

Doubling a point with y = 0 (a point of order 2) divides by zero in case 3.
That is reported as GroupLawError rather than returned as infinity.

Example:
    >>> from curvekit.curve.curves import F101
    >>> p = F101.point(1, 1)
    >>> p + F101.point(6, 10)
    Point(73, 31, F101)
"""

from __future__ import annotations
from dataclasses import dataclass
import operator
from typing import Optional, Union

from ..common.errors import (
    FieldMismatchError,
    GroupLawError,
    NotInvertibleError,
    PointNotOnCurveError,
)
from ..common.field import FieldElement, IntLike, PrimeField
from ..common.helpers import get_logger

log = get_logger("point")

Coordinate = Union[FieldElement, IntLike]


@dataclass(frozen=True, eq=False)
class Point:
    """
    A point on the curve of a PrimeField, or the point at infinity.

    Construct affine points with Point(field, x, y) or field.point(x, y);
    the coordinates are checked against the curve equation. Point(field)
    and Point.infinity(field) give the identity.

    Attributes:
        field: The field (and curve) this point belongs to
        x: x-coordinate, None for the point at infinity
        y: y-coordinate, None for the point at infinity

    Raises:
        PointNotOnCurveError: If (x, y) does not satisfy the curve equation
        FieldMismatchError: If a coordinate belongs to another field
    """
    field: PrimeField
    x: Optional[FieldElement] = None
    y: Optional[FieldElement] = None

    def __post_init__(self):
        if self.x is None and self.y is None:
            return
        if self.x is None or self.y is None:
            raise ValueError("An affine point needs both coordinates")
        x = self._coordinate(self.x)
        y = self._coordinate(self.y)
        if y ** 2 != x ** 3 + self.field.curve_a * x + self.field.curve_b:
            raise PointNotOnCurveError(
                f"({x}, {y}) is not on the curve of {self.field.name}"
            )
        object.__setattr__(self, "x", x)
        object.__setattr__(self, "y", y)

    def _coordinate(self, value: Coordinate) -> FieldElement:
        if isinstance(value, FieldElement):
            if value.field != self.field:
                raise FieldMismatchError(
                    f"coordinate from {value.field.name} used on {self.field.name}"
                )
            return value
        return self.field.element(value)

    @classmethod
    def infinity(cls, field: PrimeField) -> Point:
        """The identity of the group."""
        return cls(field)

    @property
    def is_infinity(self) -> bool:
        return self.x is None

    def __repr__(self) -> str:
        if self.is_infinity:
            return f"Point(inf, {self.field.name})"
        return f"Point({self.x}, {self.y}, {self.field.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return False
        return self.field == other.field and self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        if self.is_infinity:
            return hash((None, self.field.modulus))
        return hash((int(self.x), int(self.y), self.field.modulus))

    def _check_same_curve(self, other: Point):
        if other.field is not self.field and other.field != self.field:
            raise FieldMismatchError(
                f"cannot combine points of {self.field.name} and {other.field.name}"
            )

    def __neg__(self) -> Point:
        """-P = (x, -y); the identity is its own inverse."""
        if self.is_infinity:
            return self
        return Point(self.field, self.x, -self.y)

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        self._check_same_curve(other)

        if self.is_infinity:
            return other
        if other.is_infinity:
            return self

        x1, y1 = self.x, self.y
        x2, y2 = other.x, other.y

        if x1 == x2:
            if y1 != y2:
                # P + (-P) = inf
                return Point(self.field)
            # Doubling, P + P = 2P
            try:
                gradient = (3 * x1 ** 2 + self.field.curve_a) / (2 * y1)
            except NotInvertibleError as err:
                raise GroupLawError(
                    f"cannot double {self}: tangent is vertical (y = 0)"
                ) from err
        else:
            gradient = (y2 - y1) / (x2 - x1)

        x3 = gradient ** 2 - x1 - x2
        y3 = gradient * (x1 - x3) - y1

        return Point(self.field, x3, y3)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: IntLike) -> Point:
        """
        Scalar multiplication by left-to-right double-and-add.

        Starting from infinity, for each bit of the scalar from the most
        significant down: double the accumulator, then add P if the bit is
        set. O(log k) group operations.

        Raises:
            ValueError: If the scalar is negative
        """
        try:
            k = operator.index(scalar)
        except TypeError:
            return NotImplemented
        if k < 0:
            raise ValueError("Scalar must be non-negative")
        if k == 0 or self.is_infinity:
            return Point(self.field)

        log.debug("scalar multiplication on %s with a %d-bit scalar", self.field.name, k.bit_length())

        result = Point(self.field)
        for i in reversed(range(k.bit_length())):
            result = result + result
            if (k >> i) & 1:
                result = result + self

        return result

    def __rmul__(self, scalar: IntLike) -> Point:
        return self.__mul__(scalar)
