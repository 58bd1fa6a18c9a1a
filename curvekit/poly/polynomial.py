"""
Dense Univariate Polynomials over a Prime Field.

A polynomial is a fixed-length sequence of coefficients, lowest degree
first: coefficients[i] multiplies x^i.

    p(x) = 2x^2 + 3x + 4  ->  Polynomial(field, [4, 3, 2])

Lengths are tracked explicitly; operations derive the result length from
the operand lengths rather than trimming zeros:
    - Addition: max(N, M) (shorter operand treated as zero-padded)
    - Multiplication: N + M - 1 (full convolution)
    - Degree: N - 1, saturating at 0

Evaluation uses Horner's method, folding from the highest coefficient:
    acc = 0; acc = acc * x + c_i for i = N-1 .. 0
which needs N multiplications instead of computing every power of x.

Example:
    >>> from curvekit.curve.curves import F101
    >>> p = Polynomial.from_ints(F101, [4, 3, 2])
    >>> print(p.evaluate(2))
    18
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple, Union

import numpy as np

from ..common.errors import FieldMismatchError
from ..common.field import FieldElement, IntLike, PrimeField


@dataclass(frozen=True, eq=False)
class Polynomial:
    """
    A polynomial with a fixed number of coefficients in a PrimeField.

    Attributes:
        field: The field the coefficients live in
        coefficients: Coefficients, index i is the coefficient of x^i

    Raises:
        FieldMismatchError: If a coefficient belongs to another field
    """
    field: PrimeField
    coefficients: Tuple[FieldElement, ...]

    def __post_init__(self):
        coefficients = []
        for c in self.coefficients:
            if isinstance(c, FieldElement):
                if c.field != self.field:
                    raise FieldMismatchError(
                        f"coefficient from {c.field.name} in a polynomial over {self.field.name}"
                    )
                coefficients.append(c)
            else:
                coefficients.append(self.field.element(c))
        object.__setattr__(self, "coefficients", tuple(coefficients))

    @classmethod
    def from_ints(cls, field: PrimeField, values: Sequence[IntLike]) -> Polynomial:
        """Build a polynomial from plain integers, lowest degree first."""
        return cls(field, tuple(field.element(v) for v in values))

    @classmethod
    def zero(cls, field: PrimeField, length: int = 1) -> Polynomial:
        """The zero polynomial with the given number of coefficients."""
        return cls(field, (field.zero(),) * length)

    @property
    def degree(self) -> int:
        """Number of coefficients minus one, never below 0."""
        return max(len(self.coefficients) - 1, 0)

    def __len__(self) -> int:
        return len(self.coefficients)

    def __getitem__(self, index: int) -> FieldElement:
        return self.coefficients[index]

    def __iter__(self) -> Iterator[FieldElement]:
        return iter(self.coefficients)

    def __repr__(self) -> str:
        return f"Polynomial({[str(c) for c in self.coefficients]}, {self.field.name})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return False
        return self.field == other.field and self.coefficients == other.coefficients

    def __hash__(self) -> int:
        return hash((self.field.modulus, self.coefficients))

    def _check_same_field(self, other: Polynomial):
        if other.field is not self.field and other.field != self.field:
            raise FieldMismatchError(
                f"cannot combine polynomials over {self.field.name} and {other.field.name}"
            )

    def evaluate(self, x: Union[FieldElement, IntLike]) -> FieldElement:
        """Evaluate at x using Horner's method."""
        if not isinstance(x, FieldElement):
            x = self.field.element(x)
        elif x.field != self.field:
            raise FieldMismatchError(
                f"cannot evaluate a polynomial over {self.field.name} at an element of {x.field.name}"
            )
        acc = self.field.zero()
        for c in reversed(self.coefficients):
            acc = acc * x + c
        return acc

    def __call__(self, x: Union[FieldElement, IntLike]) -> FieldElement:
        return self.evaluate(x)

    def evaluate_many(self, xs: Sequence[Union[FieldElement, IntLike]]) -> List[FieldElement]:
        """
        Evaluate at many points at once.

        Runs Horner's method over a numpy object array of Python ints, so
        every point advances in lockstep and any field width is supported.
        Results match evaluate() point for point.
        """
        points = np.array(
            [int(x) if isinstance(x, FieldElement) else int(self.field.element(x)) for x in xs],
            dtype=object,
        )
        prime = self.field.modulus
        acc = np.zeros(len(points), dtype=object)
        for c in reversed(self.coefficients):
            acc = (acc * points + int(c)) % prime
        return [self.field.element(int(v)) for v in acc]

    def __add__(self, other: Polynomial) -> Polynomial:
        """
        Coefficient-wise sum. The result has max(N, M) coefficients: the
        overlapping prefix is summed and the longer tail copied unchanged.
        """
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_same_field(other)

        n, m = len(self), len(other)
        min_len = min(n, m)
        result = [self.coefficients[i] + other.coefficients[i] for i in range(min_len)]
        if n > m:
            result.extend(self.coefficients[m:])
        else:
            result.extend(other.coefficients[n:])
        return Polynomial(self.field, tuple(result))

    def __mul__(self, other: Polynomial) -> Polynomial:
        """
        Full convolution: result[i + j] += a[i] * b[j]. The result has
        N + M - 1 coefficients.
        """
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._check_same_field(other)

        n, m = len(self), len(other)
        result = [self.field.zero()] * max(n + m - 1, 0)
        for i in range(n):
            for j in range(m):
                result[i + j] = result[i + j] + self.coefficients[i] * other.coefficients[j]
        return Polynomial(self.field, tuple(result))
