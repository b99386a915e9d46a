import io
import math

import pytest

from cpmath.adhoc_problems import (
    all_about_that_base,
    curvy_blocks,
    dead_fraction,
    factstone,
    main,
    map_tiles,
)
from cpmath.poly import evaluate

BASE_CASES = [
    ("6ef", "+", "d1", "7c0"),
    ("3", "/", "2", "1"),
    ("444", "/", "2", "222"),
    ("10111", "*", "11", "1000101"),
    ("10111", "*", "11", "111221"),
    ("5k", "-", "1z", "46"),
    ("1111111111", "-", "1111111", "111"),
    ("2048", "-", "512", "1536"),
]

_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"


def _holds(op, x, y, z):
    if op == "+":
        return x + y == z
    if op == "-":
        return x - y == z
    if op == "*":
        return x * y == z
    return y != 0 and x % y == 0 and x // y == z


def _parse(s, base):
    try:
        return int(s, base)
    except ValueError:
        return None


def test_base_hex_example():
    assert all_about_that_base("6ef", "+", "d1", "7c0") == "g"


def test_base_no_solution_is_invalid():
    assert all_about_that_base("3", "/", "2", "1") == "invalid"


@pytest.mark.parametrize("a,op,b,c", BASE_CASES)
def test_base_results_are_exactly_the_valid_bases(a, op, b, c):
    result = all_about_that_base(a, op, b, c)
    listed = set() if result == "invalid" else set(result)
    for base in range(2, 37):
        ch = _alphabet_char = _ALPHABET[base % 36]
        values = [_parse(s, base) for s in (a, b, c)]
        if None in values:
            assert ch not in listed or base % 36 == 1
            continue
        if all(abs(v) < 2**31 for v in values):
            assert (ch in listed) == _holds(op, *values), (base, _alphabet_char)


def test_base_unary():
    assert "1" in all_about_that_base("111", "+", "11", "11111")


def test_base_unknown_operator():
    with pytest.raises(ValueError):
        all_about_that_base("1", "%", "1", "0")


def test_curvy_identical_profiles_give_zero():
    profile = [1.0, -2.0, 3.0, 0.5]
    assert curvy_blocks(profile, profile) == 0.0


def test_curvy_matches_dense_sampling():
    bottom = [1.000000, -12.904762, 40.476190, -28.571429]
    top = [3.000000, 11.607143, -34.424603, 22.817460]
    gap = [t - b for b, t in zip(bottom, top)]
    samples = [evaluate(gap, i / 20000) for i in range(20001)]
    sampled = max(samples) - min(samples)
    result = curvy_blocks(bottom, top)
    assert sampled - 1e-9 <= result <= sampled + 1e-3


def test_curvy_linear_gap():
    assert curvy_blocks([0, 0, 0, 0], [0, 1, 0, 0]) == pytest.approx(1.0)


def test_curvy_shift_invariant():
    bottom = [2.0, -10.845238, 16.964286, -10.119048]
    top = [3.0, 4.190476, -3.571429, 2.380952]
    shifted_bottom = [bottom[0] + 5, *bottom[1:]]
    shifted_top = [top[0] + 5, *top[1:]]
    assert curvy_blocks(shifted_bottom, shifted_top) == pytest.approx(curvy_blocks(bottom, top))


def test_curvy_wrong_length():
    with pytest.raises(ValueError):
        curvy_blocks([1, 2, 3], [1, 2, 3, 4])


def test_dead_fraction_single_digit():
    assert dead_fraction("0.2...") == (2, 9)


def _leading_digits(numerator, denominator, count):
    digits = []
    remainder = numerator
    for _ in range(count):
        remainder *= 10
        digits.append(str(remainder // denominator))
        remainder %= denominator
    return "".join(digits)


@pytest.mark.parametrize("text", ["0.2", "1.2...", "0...."])
def test_dead_fraction_rejects_bad_input(text):
    with pytest.raises(ValueError):
        dead_fraction(text)


@pytest.mark.parametrize("year", [1960, 1981, 2000, 2040])
def test_factstone_is_largest_fitting_factorial(year):
    bits = 1 << ((year - 1940) // 10)
    n = factstone(year)
    assert math.factorial(n).bit_length() <= bits
    assert math.factorial(n + 1).bit_length() > bits


def test_factstone_is_monotone():
    values = [factstone(year) for year in range(1960, 2100, 10)]
    assert values == sorted(values)


@pytest.mark.parametrize("year", [1950, 2170])
def test_factstone_out_of_range(year):
    with pytest.raises(ValueError):
        factstone(year)


def test_map_tiles_example():
    assert map_tiles("130") == (3, 6, 2)


def _quadkey(x, y, zoom):
    key = []
    for level in range(zoom, 0, -1):
        mask = 1 << (level - 1)
        key.append(str((1 if x & mask else 0) + (2 if y & mask else 0)))
    return "".join(key)


@pytest.mark.parametrize("zoom", [1, 3, 5])
def test_map_tiles_round_trip(zoom):
    for x in range(1 << zoom):
        for y in range(1 << zoom):
            assert map_tiles(_quadkey(x, y, zoom)) == (zoom, x, y)


def test_map_tiles_empty():
    assert map_tiles("") == (0, 0, 0)


def test_map_tiles_invalid_digit():
    with pytest.raises(ValueError):
        map_tiles("14")


def test_main_all_about_that_base(monkeypatch, capsys):
    text = "8\n" + "\n".join(f"{a} {op} {b} = {c}" for a, op, b, c in BASE_CASES) + "\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(["allaboutthatbase"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [all_about_that_base(*case) for case in BASE_CASES]


def test_main_factstone(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1960\n1981\n0\n"))
    main(["factstone"])
    assert capsys.readouterr().out.splitlines() == [str(factstone(1960)), str(factstone(1981))]


def test_main_dead_fraction(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0.2...\n0.20...\n0\n"))
    main(["deadfraction"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "2/9"
    assert len(lines) == 2


def test_main_curvy_blocks(monkeypatch, capsys):
    bottom = [1.0, -12.904762, 40.476190, -28.571429]
    top = [3.0, 11.607143, -34.424603, 22.817460]
    monkeypatch.setattr("sys.stdin", io.StringIO(" ".join(map(str, bottom + top))))
    main(["curvyblocks"])
    assert capsys.readouterr().out.strip() == f"{curvy_blocks(bottom, top):.8f}"


def test_main_map_tiles(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("130\n"))
    main(["maptiles2"])
    assert capsys.readouterr().out.strip() == "3 6 2"