import numpy as np
import pytest

from curvekit.common.numeric import BIGINT, UINT64


def test_identities():
    assert UINT64.zero() == 0
    assert UINT64.one() == 1
    assert type(UINT64.one()) is np.uint64
    assert type(BIGINT.zero()) is int


def test_coerce_fixed_width():
    assert type(UINT64.coerce(5)) is np.uint64
    assert UINT64.coerce(np.int32(7)) == 7
    v = np.uint64(9)
    assert UINT64.coerce(v) is v
    with pytest.raises(ValueError):
        UINT64.coerce(-1)
    with pytest.raises(ValueError):
        UINT64.coerce(1 << 64)
    with pytest.raises(TypeError):
        UINT64.coerce(1.5)


def test_coerce_bigint():
    big = 1 << 300
    assert BIGINT.coerce(big) == big
    assert BIGINT.coerce(np.uint64(12)) == 12
    assert type(BIGINT.coerce(np.uint64(12))) is int


def test_wrapping_mul():
    a = UINT64.coerce(1 << 63)
    assert UINT64.wrapping_mul(a, UINT64.coerce(2)) == 0
    assert UINT64.wrapping_mul(UINT64.coerce(6), UINT64.coerce(7)) == 42
    assert BIGINT.wrapping_mul(1 << 63, 2) == 1 << 64


def test_fits_products_of():
    assert UINT64.fits_products_of(101)
    assert UINT64.fits_products_of((1 << 32) - 5)
    assert not UINT64.fits_products_of((1 << 61) - 1)
    assert BIGINT.fits_products_of((1 << 255) - 19)
