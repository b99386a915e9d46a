# cpmath

A small toolbox of the mathematics that comes up again and again in
competitive programming, together with solutions to a set of classic
number-theory and ad hoc problems built on top of it. It has no
dependencies beyond the standard library.

## What is inside

- `cpmath.bitmask` – sets of small integers stored as the bits of an int:
  `contains`, `insert`, `erase`, `flip`, `union`, `intersect`,
  `complement` (within a universe of 30 elements by default),
  `symmetric_difference`, `subtract`, `remove_first_element`,
  `get_first_element`, plus `popcount`, `ctz` and `to_binary`. Iterators:
  `iter_elements` (elements in increasing order), `iter_all_sets`,
  `iter_subsets` (every non-empty subset, in decreasing order) and
  `iter_sets_by_size` (all sets of `n` elements whose size lies in a range).
- `cpmath.conversions` – `to_decimal` and `from_decimal` between base 10 and
  bases 2–36, and `parse_int`, a strict parser for signed 32-bit integers that
  raises `ValueError` unless the whole string is a valid number.
- `cpmath.poly` – polynomials as coefficient lists (`p[0] + p[1]*x + ...`):
  `evaluate`, `add`, `mul`, `derivative`, and `roots`, which returns the two
  real roots of a quadratic or `None` when the discriminant is below `1e-9`.
- `cpmath.euclid` – `gcd`, `extended_gcd` returning `(g, x, y)`, and `modinv`
  for any positive modulus (raises `ValueError` when no inverse exists).
- `cpmath.modular` – `mod_add`, `mod_sub`, `mod_mul`, `mod_pow`, `mod_inv` and
  `mod_div`; the modulus defaults to 23 and must be prime for inverses and
  division.
- `cpmath.primes` – `sieve_eratosthenes` and `sieve_euler`, both returning a
  `Sieve` with `primes`, a `factor` table, `is_prime` and `factorize`
  (exact up to the square of the largest sieved prime).
- `cpmath.adhoc_problems` – `all_about_that_base`, `curvy_blocks`,
  `dead_fraction`, `factstone` and `map_tiles`.
- `cpmath.numtheory_problems` – `binomial_divisor_count`,
  `enlarge_hash_table`, `farey_length`, `nonprime_divisor_counts`, `ones`,
  `prime_reduction`, `ring_ratios`, `food_combinations` and `three_digits`.

## Installation

```
pip install .
```

## Using the library

```python
from cpmath.conversions import to_decimal, from_decimal
from cpmath.modular import mod_pow
from cpmath.poly import evaluate
from cpmath.primes import sieve_euler

to_decimal("EF", 16)          # 239
from_decimal(239, 16)         # "ef"
evaluate([1.0, 2.0, 1.0], 4)  # 25.0
mod_pow(15, 19, 23)           # 19

sieve = sieve_euler(100)
sieve.is_prime(9973)          # True
sieve.factorize(9997)         # {13: 1, 769: 1}
```

The bitmask helpers work on plain integers:

```python
from cpmath.bitmask import insert, contains, iter_subsets

mask = insert(0b1000111000, 7)
contains(mask, 7)             # True
list(iter_subsets(0b101))     # [5, 4, 1]
```

## Commands

The first six commands take no arguments and print a demonstration of their
module on fixed sample values:

```
cpmath-bitmask
cpmath-conversions
cpmath-poly
cpmath-euclid
cpmath-modular
cpmath-primes
```

The other two solve a named problem, reading its input from standard input
and printing one answer per line:

```
cpmath-adhoc {allaboutthatbase,curvyblocks,deadfraction,factstone,maptiles2}
cpmath-numtheory {divisors,enlarginghashtables,farey,nonprimefactors,ones,primereduction,prsteni,soyoulikeyourfoodhot,threedigits}
```

For example:

```
printf '3\n7\n9901\n' | cpmath-numtheory ones
```

## Running the tests

```
pip install .[test]
pytest
```