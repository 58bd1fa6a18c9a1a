import pytest

from curvekit.common.field import PrimeField
from curvekit.common.numeric import BIGINT
from curvekit.curve.curves import F101


@pytest.fixture
def f101():
    return F101


@pytest.fixture(params=["uint64", "bigint"])
def small_field(request):
    """F101 on both backends; results must not depend on the number type."""
    if request.param == "uint64":
        return F101
    return PrimeField(101, a=98, b=3, name="F101-bigint", backend=BIGINT)


@pytest.fixture
def torsion_field():
    """y^2 = x^3 + x over F101; (0, 0) is a point of order 2."""
    return PrimeField(101, a=1, b=0, name="F101-torsion")
