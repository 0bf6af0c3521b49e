import pytest

from unknown_order import BigNumber, NotInvertibleError, ZeroModulusError
from unknown_order.backends import Backend
from unknown_order import modular

from vectors import (
    INVERSE_OF_SEVEN,
    MODPOW_BASE,
    MODPOW_EXPONENT,
    MODPOW_MODULUS,
    MODPOW_RESULT,
    TEST_PRIMES,
)


def b10(text, backend=None):
    return BigNumber.from_multibase(text, backend=backend)


def modulus(backend=None):
    return b10(TEST_PRIMES[0], backend) * b10(TEST_PRIMES[1], backend)


@pytest.mark.parametrize(
    "n, expected",
    [(1, 0), (-1, 0), (2, 0), (-2, 0), (5, 1), (-5, 1), (0, 0)],
)
def test_reduction_uses_modulus_magnitude(backend, n, expected):
    base = BigNumber(6, backend=backend)
    assert base % BigNumber(n, backend=backend) == expected


def test_canonical_residue_bounds():
    for a in range(-30, 31):
        for n in (3, 7, 10):
            r = BigNumber(a) % n
            assert 0 <= r < n
            assert r == BigNumber(a) % -n
            assert int(r) == a % n


def test_modpow_signed_cases(backend):
    base = BigNumber(6, backend=backend)
    exp = BigNumber(-5, backend=backend)

    assert base.modpow(exp, BigNumber(13, backend=backend)) == 7
    assert base.modpow(exp, BigNumber(1, backend=backend)) == BigNumber.zero(backend)
    assert base.modpow(exp, BigNumber(-1, backend=backend)) == BigNumber(backend=backend)
    assert base.modpow(exp, BigNumber(-5, backend=backend)) == 1


def test_modpow_known_vector(backend):
    base = b10(MODPOW_BASE, backend)
    exp = b10(MODPOW_EXPONENT, backend)
    mod = b10(MODPOW_MODULUS, backend)

    assert base.modpow(exp, mod) == b10(MODPOW_RESULT, backend)


def test_modpow_result_is_canonical():
    assert BigNumber(-2).modpow(3, 7) == 6
    assert BigNumber(-2).modpow(3, -7) == 6
    assert BigNumber(5).modpow(0, 7) == 1


@pytest.mark.parametrize("base, exp", [(7, 3), (0, 0), (-4, 9), (3, -1)])
def test_modpow_zero_modulus_is_fatal(base, exp):
    with pytest.raises(ZeroModulusError):
        BigNumber(base).modpow(exp, 0)


def test_modpow_negative_exponent_requires_inverse():
    with pytest.raises(NotInvertibleError):
        BigNumber(6).modpow(-1, 9)


def test_square_and_multiply_matches_native_kernel(backend):
    # Backend.powmod is the generic path kernels fall back on
    mod = modulus(backend)
    base = BigNumber(123456789, backend=backend)
    exp = BigNumber(2**127 - 1, backend=backend)

    generic = Backend.powmod(backend, base._mag, exp._mag, mod._mag)
    assert backend.to_int(generic) == int(base.modpow(exp, mod))


def test_invert(backend):
    n = modulus(backend)
    seven = BigNumber(7, backend=backend)

    inverse = seven.invert(n)
    assert inverse is not None
    assert inverse == b10(INVERSE_OF_SEVEN, backend)

    a = BigNumber.random(n)
    inverse = a.invert(n)
    assert inverse is not None
    assert a.mod_mul(inverse, n) == 1


def test_invert_absent_and_degenerate():
    assert BigNumber(6).invert(9) is None
    assert BigNumber(0).invert(7) is None
    assert BigNumber(3).invert(0) is None
    assert BigNumber(3).invert(1) == 0
    assert BigNumber(-3).invert(7) == 2
    assert BigNumber(3).invert(-7) == 5


def test_extended_gcd_identity():
    result = BigNumber(13).extended_gcd(BigNumber(17))
    assert result.gcd == BigNumber.one()

    for a in (0, 1, -1, 12, -12, 240, -46, 2**64 + 1):
        for b in (0, 7, -7, 18, -46, 3**40):
            g, x, y = modular.extended_gcd(a, b)
            assert g >= 0
            assert BigNumber(a) * x + BigNumber(b) * y == g
            assert int(g) == _gcd(abs(a), abs(b))


def _gcd(a, b):
    while b:
        a, b = b, a % b
    return a


def test_gcd_and_lcm():
    assert BigNumber(12).gcd(-18) == 6
    assert BigNumber(-4).lcm(6) == 12
    assert BigNumber(0).lcm(6) == 0


def test_modular_helpers():
    n = BigNumber(-11)

    assert BigNumber(7).mod_add(9, n) == 5
    assert BigNumber(3).mod_sub(9, n) == 5
    assert BigNumber(-7).mod_mul(9, n) == 3
    assert BigNumber(4).mod_neg(n) == 7
    assert BigNumber(-5).mod_sqr(n) == 3
    assert BigNumber(7).mod_add(9, 1) == 0


def test_div_rem_euclid_function():
    q, r = modular.div_rem_euclid(-17, 5)
    assert (int(q), int(r)) == (-4, 3)
    assert modular.reduce(-17, -5) == 3
