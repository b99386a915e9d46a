"""Sets over a small universe stored as integer bit masks."""

from __future__ import annotations

import argparse
from collections.abc import Iterator

UNIVERSE_SIZE = 30
_RULE = "-" * 46


def to_binary(x: int, width: int = UNIVERSE_SIZE) -> str:
    """Return the lowest ``width`` bits of ``x``, most significant bit first."""
    return format(x & ((1 << width) - 1), f"0{width}b")


def popcount(x: int) -> int:
    """Number of set bits in a non-negative integer."""
    if x < 0:
        raise ValueError("popcount is defined for non-negative integers only")
    return x.bit_count()


def ctz(x: int) -> int:
    """Number of zero bits below the lowest set bit (its index)."""
    if x == 0:
        raise ValueError("ctz is undefined for zero")
    return (x & -x).bit_length() - 1


def contains(mask: int, idx: int) -> bool:
    """Whether element ``idx`` is in the set."""
    return bool(mask & (1 << idx))


def insert(mask: int, idx: int) -> int:
    """The set with element ``idx`` added."""
    return mask | (1 << idx)


def erase(mask: int, idx: int) -> int:
    """The set with element ``idx`` removed."""
    return mask & ~(1 << idx)


def flip(mask: int, idx: int) -> int:
    """Remove ``idx`` if present, add it otherwise."""
    return mask ^ (1 << idx)


def union(s1: int, s2: int) -> int:
    return s1 | s2


def intersect(s1: int, s2: int) -> int:
    return s1 & s2


def complement(mask: int, size: int = UNIVERSE_SIZE) -> int:
    """Complement within a universe of ``size`` elements."""
    return ((1 << size) - 1) ^ mask


def symmetric_difference(s1: int, s2: int) -> int:
    """Elements in exactly one of the two sets."""
    return s1 ^ s2


def subtract(s1: int, s2: int) -> int:
    """Set difference ``s1 - s2``."""
    return s1 & (s1 ^ s2)


def remove_first_element(mask: int) -> int:
    """The set without its lowest element."""
    return mask & (mask - 1)


def get_first_element(mask: int) -> int:
    """Index of the lowest element of a non-empty set."""
    return ctz(mask & -mask)


def iter_elements(mask: int) -> Iterator[int]:
    """Yield the elements in increasing order, in time proportional to their count."""
    while mask:
        yield ctz(mask)
        mask &= mask - 1


def iter_all_sets(size: int = UNIVERSE_SIZE) -> Iterator[int]:
    """Yield every subset of the universe; each set comes after all of its subsets."""
    yield from range(1 << size)


def iter_subsets(mask: int) -> Iterator[int]:
    """Yield every non-empty subset of ``mask`` in decreasing order."""
    sub = mask
    while sub:
        yield sub
        sub = mask & (sub - 1)


def iter_sets_by_size(n: int, min_size: int, max_size: int) -> Iterator[int]:
    """Yield, in increasing order, the subsets of ``n`` elements whose size lies in the bounds."""
    if max_size == 0:
        yield 0
        return
    limit = 1 << n
    s = 0
    while True:
        if popcount(s) > max_size:
            s &= s - 1
            s += s & -s
        count = popcount(s)
        while count < min_size:
            s |= ~s & (s + 1)
            count += 1
        if s >= limit:
            return
        yield s
        s += 1


def _explain(title: str, rows: list[tuple[str, int]], outcome: str) -> None:
    print(f"{title}:")
    for label, value in rows:
        print(f"{label}:\t{to_binary(value)}")
    print(_RULE)
    print(outcome)
    print()


def main(argv: list[str] | None = None) -> int:
    """Show the bit mask operations on a sample set."""
    argparse.ArgumentParser(description="Demonstrate bit mask set operations.").parse_args(argv)
    sample = 0b1000111000

    print(f"bit functions({sample}):")
    print(f"set bits in {sample} ~ {to_binary(sample)}: {popcount(sample)}")
    print(f"zero bits below the lowest set bit in {sample} ~ {to_binary(sample)}: {ctz(sample)}")
    print()

    _explain(
        f"contains({sample}, 3)",
        [("S", sample), ("idx", 1 << 3)],
        f"Member: {'yes' if contains(sample, 3) else 'no'}",
    )
    _explain(
        f"insert({sample}, 7)",
        [("S", sample), ("idx", 1 << 7)],
        f"New S:\t{to_binary(insert(sample, 7))}",
    )
    _explain(
        f"erase({sample}, 4)",
        [("S", sample), ("idx", 1 << 4), ("clearing mask", ~(1 << 4))],
        f"New S:\t{to_binary(erase(sample, 4))}",
    )
    _explain(
        f"flip({sample}, 0)",
        [("S", sample), ("idx", 1 << 0)],
        f"New S:\t{to_binary(flip(sample, 0))}",
    )
    _explain(
        f"remove_first_element({sample})",
        [("S", sample), ("S-1", sample - 1)],
        f"New S:\t{to_binary(remove_first_element(sample))}",
    )
    _explain(
        f"get_first_element({sample})",
        [("S", sample), ("S&-S", sample & -sample)],
        f"First element:\t{to_binary(sample & -sample)}\n"
        f"Its index:\t{get_first_element(sample)}",
    )

    print(f"iter_subsets({sample}):")
    print(f"S:\t{to_binary(sample)}")
    print(_RULE)
    for sub in iter_subsets(sample):
        print(f"\t{to_binary(sub)}")
    print()

    print("iter_sets_by_size(5, 2, 3):")
    for s in iter_sets_by_size(5, 2, 3):
        print(to_binary(s))
    print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())