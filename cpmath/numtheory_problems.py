"""Solutions to number theory contest problems."""

from __future__ import annotations

import argparse
import functools
import itertools
import math
import sys
from collections import Counter
from collections.abc import Callable, Iterator, Sequence

from cpmath.euclid import extended_gcd
from cpmath.primes import Sieve, sieve_euler

_HASH_SIEVE_LIMIT = 32999
_REDUCTION_SIEVE_LIMIT = 65536
_THREE_DIGITS_MOD = 10**12


@functools.lru_cache(maxsize=8)
def _sieve(limit: int) -> Sieve:
    return sieve_euler(limit)


def binomial_divisor_count(n: int, k: int) -> int:
    """Number of divisors of the binomial coefficient ``C(n, k)``."""
    if not 0 <= k <= n:
        raise ValueError("need 0 <= k <= n")
    sieve = _sieve(max(n, 2))
    exponents: Counter[int] = Counter()
    for i in range(max(k, n - k) + 1, n + 1):
        exponents.update(sieve.factorize(i))
    for i in range(2, min(k, n - k) + 1):
        exponents.subtract(sieve.factorize(i))
    return math.prod(e + 1 for e in exponents.values())


def enlarge_hash_table(n: int) -> tuple[int, bool]:
    """Smallest prime above ``2 * n`` and whether ``n`` itself is prime."""
    if n < 1:
        raise ValueError("table size must be positive")
    sieve = _sieve(_HASH_SIEVE_LIMIT)
    new_size = next(i for i in itertools.count(2 * n + 1) if sieve.is_prime(i))
    return new_size, sieve.is_prime(n)


def _farey_lengths(limit: int) -> list[int]:
    phi = list(range(limit + 1))
    for i in range(2, limit + 1):
        if phi[i] == i:
            for j in range(i, limit + 1, i):
                phi[j] -= phi[j] // i
    lengths = [0] * (limit + 1)
    running = 1
    for i in range(1, limit + 1):
        running += phi[i]
        lengths[i] = running
    return lengths


def farey_length(n: int) -> int:
    """Number of terms in the Farey sequence of order ``n``."""
    if n < 1:
        raise ValueError("order must be positive")
    return _farey_lengths(n)[n]


def nonprime_divisor_counts(limit: int) -> list[int]:
    """``counts[n]`` is the number of non-prime divisors of ``n`` for ``1 <= n <= limit``.

    ``counts[0]`` is 0.
    """
    if limit < 1:
        raise ValueError("limit must be positive")
    composite = bytearray(limit + 1)
    counts = [1] * (limit + 1)
    counts[0] = 0
    for i in range(2, limit + 1):
        if composite[i]:
            for j in range(i, limit + 1, i):
                counts[j] += 1
        else:
            marks = len(range(i * i, limit + 1, i))
            composite[i * i :: i] = b"\x01" * marks
    return counts


def ones(n: int) -> int:
    """Number of digits of the smallest repunit divisible by ``n``."""
    if n < 1 or n % 2 == 0 or n % 5 == 0:
        raise ValueError("n must be positive and coprime to 10")
    remainder, digits = 1 % n, 1
    while remainder:
        remainder = (10 * remainder + 1) % n
        digits += 1
    return digits


def prime_reduction(x: int) -> tuple[int, int]:
    """Replace ``x`` by the sum of its prime factors until it stops changing.

    Returns the final value and the number of values visited.
    """
    if x < 2:
        raise ValueError("x must be at least 2")
    sieve = _sieve(_REDUCTION_SIEVE_LIMIT)
    steps = 1
    while True:
        total = sum(p * e for p, e in sieve.factorize(x).items())
        if total == x:
            return x, steps
        x = total
        steps += 1


def ring_ratios(radii: Sequence[int]) -> list[tuple[int, int]]:
    """Turns of every later ring per turn of the first, as reduced fractions."""
    if not radii:
        raise ValueError("at least one ring is needed")
    first = radii[0]
    ratios = []
    for radius in radii[1:]:
        g = math.gcd(first, radius)
        ratios.append((first // g, radius // g))
    return ratios


def food_combinations(total: int, price_a: int, price_b: int) -> list[tuple[int, int]]:
    """All non-negative ``(x, y)`` with ``price_a*x + price_b*y == total``, by increasing ``x``."""
    if price_a <= 0 or price_b <= 0 or total < 0:
        raise ValueError("prices must be positive and the total non-negative")
    g, x, y = extended_gcd(price_a, price_b)
    if total % g:
        return []
    x *= total // g
    y *= total // g
    step_x, step_y = price_b // g, price_a // g
    shift = x // step_x
    x -= shift * step_x
    y += shift * step_y
    combinations = []
    while y >= 0:
        combinations.append((x, y))
        x += step_x
        y -= step_y
    return combinations


def three_digits(n: int) -> str:
    """Last three digits of ``n!`` before its trailing zeros (fewer if it is small)."""
    if n < 0:
        raise ValueError("n must be non-negative")
    acc = 1
    for i in range(2, n + 1):
        factor = i
        while factor % 10 == 0:
            factor //= 10
        acc *= factor
        while acc % 10 == 0:
            acc //= 10
        acc %= _THREE_DIGITS_MOD
    if acc < 100:
        return str(acc)
    return f"{acc % 1000:03d}"


def _cents(token: str) -> int:
    return int("".join(ch for ch in token if ch.isdigit()) or "0")


def _solve_divisors(tokens: list[str]) -> Iterator[str]:
    values = list(map(int, tokens))
    for n, k in zip(values[::2], values[1::2]):
        yield str(binomial_divisor_count(n, k))


def _solve_hash(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        n = int(token)
        if n == 0:
            return
        new_size, n_is_prime = enlarge_hash_table(n)
        yield str(new_size) if n_is_prime else f"{new_size} ({n} is not prime)"


def _solve_farey(tokens: list[str]) -> Iterator[str]:
    count = int(tokens[0])
    cases = [(tokens[1 + 2 * i], int(tokens[2 + 2 * i])) for i in range(count)]
    if not cases:
        return
    lengths = _farey_lengths(max(max(n for _, n in cases), 1))
    for label, n in cases:
        yield f"{label} {lengths[n]}"


def _solve_nonprime(tokens: list[str]) -> Iterator[str]:
    count = int(tokens[0])
    queries = [int(t) for t in tokens[1 : 1 + count]]
    if not queries:
        return
    counts = nonprime_divisor_counts(max(queries))
    for q in queries:
        yield str(counts[q])


def _solve_ones(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        yield str(ones(int(token)))


def _solve_reduction(tokens: list[str]) -> Iterator[str]:
    for token in tokens:
        x = int(token)
        if x == 4:
            continue
        value, steps = prime_reduction(x)
        yield f"{value} {steps}"


def _solve_rings(tokens: list[str]) -> Iterator[str]:
    count = int(tokens[0])
    radii = [int(t) for t in tokens[1 : 1 + count]]
    for numerator, denominator in ring_ratios(radii):
        yield f"{numerator}/{denominator}"


def _solve_food(tokens: list[str]) -> Iterator[str]:
    total, price_a, price_b = (_cents(t) for t in tokens[:3])
    combinations = food_combinations(total, price_a, price_b)
    if not combinations:
        yield "none"
    for x, y in combinations:
        yield f"{x} {y}"


def _solve_three_digits(tokens: list[str]) -> Iterator[str]:
    yield three_digits(int(tokens[0]))


_SOLVERS: dict[str, Callable[[list[str]], Iterator[str]]] = {
    "divisors": _solve_divisors,
    "enlarginghashtables": _solve_hash,
    "farey": _solve_farey,
    "nonprimefactors": _solve_nonprime,
    "ones": _solve_ones,
    "primereduction": _solve_reduction,
    "prsteni": _solve_rings,
    "soyoulikeyourfoodhot": _solve_food,
    "threedigits": _solve_three_digits,
}


def main(argv: list[str] | None = None) -> int:
    """Solve the chosen problem for input read from standard input."""
    parser = argparse.ArgumentParser(description="Solve a number theory problem from stdin.")
    parser.add_argument("problem", choices=sorted(_SOLVERS))
    args = parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    for line in _SOLVERS[args.problem](tokens):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())