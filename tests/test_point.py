import numpy as np
import pytest

from curvekit.common.errors import (
    FieldMismatchError,
    GroupLawError,
    PointNotOnCurveError,
)
from curvekit.common.field import PrimeField
from curvekit.curve.curves import BN254, BN254_G1, BN254_ORDER
from curvekit.curve.point import Point


def _coords(point):
    return int(point.x), int(point.y)


class TestConstruction:
    def test_on_curve(self, small_field):
        p = small_field.point(1, 1)
        assert not p.is_infinity
        assert _coords(p) == (1, 1)

    def test_from_field_elements(self, small_field):
        p = Point(small_field, small_field.element(6), small_field.element(10))
        assert _coords(p) == (6, 10)

    def test_off_curve(self, small_field):
        with pytest.raises(PointNotOnCurveError):
            small_field.point(1, 2)

    def test_missing_coordinate(self, f101):
        with pytest.raises(ValueError):
            Point(f101, f101.element(1))

    def test_infinity(self, f101):
        inf = f101.infinity()
        assert inf.is_infinity
        assert inf.x is None and inf.y is None
        assert inf == Point.infinity(f101)

    def test_coordinate_from_other_field(self, f101):
        other = PrimeField(101, a=98, b=3, name="other")
        with pytest.raises(FieldMismatchError):
            Point(f101, other.element(1), other.element(1))

    def test_immutable(self, f101):
        p = f101.point(1, 1)
        with pytest.raises(AttributeError):
            p.x = f101.element(6)

    def test_repr(self, f101):
        assert repr(f101.point(1, 1)) == "Point(1, 1, F101)"
        assert repr(f101.infinity()) == "Point(inf, F101)"


class TestGroupLaw:
    def test_addition(self, small_field):
        p3 = small_field.point(1, 1) + small_field.point(6, 10)
        assert _coords(p3) == (73, 31)

    def test_doubling(self, small_field):
        p = small_field.point(1, 1)
        assert _coords(p + p) == (99, 100)

    def test_addition_commutes(self, small_field):
        p = small_field.point(1, 1)
        q = small_field.point(6, 10)
        assert p + q == q + p

    def test_identity(self, small_field):
        p = small_field.point(1, 1)
        inf = small_field.infinity()
        assert p + inf == p
        assert inf + p == p
        assert inf + inf == inf

    def test_inverse_cancels(self, small_field):
        p = small_field.point(1, 1)
        q = small_field.point(1, 100)
        assert (p + q).is_infinity
        assert -p == q
        assert (p - p).is_infinity

    def test_doubling_order_two_point(self, torsion_field):
        p = torsion_field.point(0, 0)
        with pytest.raises(GroupLawError):
            p + p
        with pytest.raises(GroupLawError):
            p * 2

    def test_small_curve_two_torsion(self, f101):
        p = f101.point(15, 0)
        assert -p == p
        with pytest.raises(GroupLawError):
            p + p

    def test_cross_curve_rejected(self, f101):
        other = PrimeField(101, a=98, b=3, name="other")
        with pytest.raises(FieldMismatchError):
            f101.point(1, 1) + other.point(1, 1)


class TestScalarMultiplication:
    def test_triple(self, small_field):
        assert _coords(small_field.point(1, 1) * 3) == (80, 81)

    def test_zero_and_infinity(self, small_field):
        p = small_field.point(1, 1)
        assert (p * 0).is_infinity
        assert (small_field.infinity() * 5).is_infinity
        assert p * 1 == p

    @pytest.mark.parametrize("k", range(1, 20))
    def test_matches_repeated_addition(self, small_field, k):
        p = small_field.point(1, 1)
        expected = small_field.infinity()
        for _ in range(k):
            expected = expected + p
        assert p * k == expected
        assert k * p == expected

    def test_known_multiples(self, f101):
        p = f101.point(1, 1)
        assert p * 10 == f101.point(6, 10)
        assert p * 56 == f101.point(1, 100)

    def test_group_order(self, small_field):
        # (1, 1) generates a subgroup of order 57.
        p = small_field.point(1, 1)
        assert (p * 57).is_infinity
        assert p * 58 == p
        assert p * (57 * 1000 + 3) == p * 3

    def test_numpy_scalar(self, f101):
        p = f101.point(1, 1)
        assert p * np.uint64(3) == p * 3

    def test_negative_scalar(self, f101):
        with pytest.raises(ValueError):
            f101.point(1, 1) * -1

    def test_unsupported_scalar(self, f101):
        with pytest.raises(TypeError):
            f101.point(1, 1) * 1.5


class TestBN254:
    def test_generator(self):
        g = BN254.point(*BN254_G1)
        assert _coords(g) == (1, 2)
        with pytest.raises(PointNotOnCurveError):
            BN254.point(1, 3)

    def test_double_is_on_curve(self):
        g = BN254.point(*BN254_G1)
        doubled = g + g
        assert doubled == g * 2
        assert doubled.y ** 2 == doubled.x ** 3 + 3

    def test_small_multiples(self):
        g = BN254.point(*BN254_G1)
        assert g * 5 == g + g + g + g + g
        assert g * 7 - g * 3 == g * 4

    def test_generator_order(self):
        g = BN254.point(*BN254_G1)
        assert (g * BN254_ORDER).is_infinity
        assert g * (BN254_ORDER - 1) == -g
        assert g * (BN254_ORDER + 2) == g * 2
