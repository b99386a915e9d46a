"""Solutions to a handful of ad hoc mathematical contest problems."""

from __future__ import annotations

import argparse
import functools
import math
import sys
from collections.abc import Callable, Iterator, Sequence

from cpmath.conversions import DIGITS, parse_int
from cpmath.poly import derivative, evaluate

_OPERATORS = ("+", "-", "*", "/")
_FACTSTONE_FIRST_YEAR = 1940
_FACTSTONE_MAX_INDEX = 22


def _equation_holds(op: str, x: int, y: int, z: int) -> bool:
    if op == "+":
        return x + y == z
    if op == "-":
        return x - y == z
    if op == "*":
        return x * y == z
    return y != 0 and x % y == 0 and x // y == z


def all_about_that_base(a: str, op: str, b: str, c: str) -> str:
    """Bases 1 to 36 in which ``a op b = c`` holds, as digit characters.

    Base 1 (unary, only the digit ``1``) is written ``1``, bases 2 to 35 by their
    digit and base 36 as ``0``. Returns ``"invalid"`` if no base works.
    """
    if op not in _OPERATORS:
        raise ValueError(f"unknown operator {op!r}")
    found = []
    if all(set(s) == {"1"} for s in (a, b, c)):
        la, lb, lc = len(a), len(b), len(c)
        if _equation_holds(op, la, lb, lc):
            found.append("1")
    for base in range(2, 37):
        try:
            x, y, z = (parse_int(s, base) for s in (a, b, c))
        except ValueError:
            continue
        if _equation_holds(op, x, y, z):
            found.append(DIGITS[base % 36])
    return "".join(found) or "invalid"


def curvy_blocks(bottom: Sequence[float], top: Sequence[float]) -> float:
    """Height range of the gap between two cubic block profiles on [0, 1].

    Each profile is given by its four coefficients, constant term first.
    """
    if len(bottom) != 4 or len(top) != 4:
        raise ValueError("each profile needs exactly four coefficients")
    gap = [t - b for b, t in zip(bottom, top)]
    d0, d1, d2 = derivative(gap)
    ends = (gap[0], sum(gap))
    high, low = max(ends), min(ends)
    disc = d1 * d1 - 4 * d2 * d0
    if d2 != 0 and disc >= 0:
        root = math.sqrt(disc)
        for t in ((-d1 - root) / (2 * d2), (-d1 + root) / (2 * d2)):
            if 0 < t < 1:
                value = evaluate(gap, t)
                high = max(high, value)
                low = min(low, value)
    return high - low


def dead_fraction(text: str) -> tuple[int, int]:
    """Fraction with the smallest denominator whose expansion repeats a suffix of the digits.

    ``text`` has the form ``0.ddd...``; returns ``(numerator, denominator)`` in lowest terms.
    """
    if not (text.startswith("0.") and text.endswith("...")):
        raise ValueError(f"expected a number of the form 0.ddd..., got {text!r}")
    digits = text[2:-3]
    if not digits.isdigit():
        raise ValueError(f"no digits in {text!r}")
    whole = int(digits)
    whole_scale = 10 ** len(digits)
    best: tuple[int, int] | None = None
    for split in range(len(digits)):
        prefix = int(digits[:split]) if split else 0
        denominator = whole_scale - 10**split
        numerator = whole - prefix
        g = math.gcd(denominator, numerator)
        if best is None or denominator // g < best[1]:
            best = (numerator // g, denominator // g)
    assert best is not None
    return best


@functools.cache
def _factstone_table() -> dict[int, int]:
    table: dict[int, int] = {}
    log_total = 0.0
    index, n = 2, 1
    while index <= _FACTSTONE_MAX_INDEX:
        log_total += math.log2(n)
        if log_total >= 1 << index:
            index += 1
        if index <= _FACTSTONE_MAX_INDEX:
            table[index] = n
        n += 1
    return table


def factstone(year: int) -> int:
    """Largest ``n`` with ``n!`` fitting in an unsigned word of that year's width.

    The word has 4 bits in 1960 and doubles every ten years.
    """
    index = (year - _FACTSTONE_FIRST_YEAR) // 10
    table = _factstone_table()
    if index not in table:
        raise ValueError(f"year {year} is outside the supported range")
    return table[index]


def map_tiles(quadkey: str) -> tuple[int, int, int]:
    """Zoom level and tile coordinates ``(zoom, x, y)`` of a quadkey."""
    zoom = len(quadkey)
    x = y = 0
    for level, ch in enumerate(quadkey, start=1):
        if ch not in "0123":
            raise ValueError(f"invalid quadkey digit {ch!r}")
        half = 1 << (zoom - level)
        digit = int(ch)
        if digit & 1:
            x += half
        if digit & 2:
            y += half
    return zoom, x, y


def _solve_base(tokens: list[str]) -> Iterator[str]:
    count = int(tokens[0])
    for case in range(count):
        a, op, b, _, c = tokens[1 + 5 * case : 6 + 5 * case]
        yield all_about_that_base(a, op, b, c)


def _solve_curvy(tokens: list[str]) -> Iterator[str]:
    values = [float(t) for t in tokens]
    for start in range(0, len(values) - 7, 8):
        chunk = values[start : start + 8]
        yield f"{curvy_blocks(chunk[:4], chunk[4:]):.8f}"


def _solve_dead(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        if len(token) <= 1:
            return
        numerator, denominator = dead_fraction(token)
        yield f"{numerator}/{denominator}"


def _solve_factstone(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        year = int(token)
        if year == 0:
            return
        yield str(factstone(year))


def _solve_tiles(tokens: list[str]) -> Iterator[str]:
    zoom, x, y = map_tiles(tokens[0] if tokens else "")
    yield f"{zoom} {x} {y}"


_SOLVERS: dict[str, Callable[[list[str]], Iterator[str]]] = {
    "allaboutthatbase": _solve_base,
    "curvyblocks": _solve_curvy,
    "deadfraction": _solve_dead,
    "factstone": _solve_factstone,
    "maptiles2": _solve_tiles,
}


def main(argv: list[str] | None = None) -> int:
    """Solve the chosen problem for input read from standard input."""
    parser = argparse.ArgumentParser(description="Solve an ad hoc math problem from stdin.")
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    for line in _SOLVERS[args.problem](tokens):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())