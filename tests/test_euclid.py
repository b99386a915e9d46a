import math

import pytest

from cpmath.euclid import extended_gcd, gcd, main, modinv

PAIRS = [(30, 50), (50, 30), (17, 5), (0, 9), (9, 0), (1071, 462), (1, 1), (144, 89)]


@pytest.mark.parametrize("a,b", PAIRS)
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)


@pytest.mark.parametrize("a,b", PAIRS)
def test_extended_gcd_bezout(a, b):
    g, x, y = extended_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


@pytest.mark.parametrize("a", range(1, 23))
def test_modinv_prime_modulus(a):
    assert a * modinv(a, 23) % 23 == 1
    assert 0 <= modinv(a, 23) < 23


def test_modinv_composite_modulus():
    for a in range(1, 30):
        if math.gcd(a, 30) == 1:
            assert a * modinv(a, 30) % 30 == 1


@pytest.mark.parametrize("a,m", [(2, 4), (6, 9), (0, 7)])
def test_modinv_missing(a, m):
    with pytest.raises(ValueError):
        modinv(a, m)


def test_modinv_bad_modulus():
    with pytest.raises(ValueError):
        modinv(3, 0)


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].split() == [str(math.gcd(30, 50))] * 2
    assert 19 * int(lines[2]) % 23 == 1