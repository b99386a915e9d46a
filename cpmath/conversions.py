"""Conversions between number bases."""

from __future__ import annotations

import argparse

DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_WHITESPACE = " \t\n\r\f\v"


def _check_base(base: int) -> None:
    if not 2 <= base <= len(DIGITS):
        raise ValueError(f"base must be between 2 and {len(DIGITS)}, got {base}")


def to_decimal(num: str, base: int) -> int:
    """Value of the digit string ``num`` in ``base`` (case-insensitive)."""
    value = 0
    for ch in num:
        digit = DIGITS.find(ch.lower())
        if digit < 0:
            raise ValueError(f"invalid digit {ch!r}")
        value = base * value + digit
    return value


def parse_int(num: str, base: int = 10) -> int:
    """Strictly parse a signed 32-bit integer; the whole string must be consumed.

    Leading whitespace, a sign and, in base 16, a ``0x`` prefix are accepted.
    """
    _check_base(base)
    text = num.lstrip(_WHITESPACE)
    sign = 1
    if text[:1] in ("+", "-"):
        sign = -1 if text[0] == "-" else 1
        text = text[1:]
    if base == 16 and text[:2].lower() == "0x":
        text = text[2:]
    if not text:
        raise ValueError(f"no digits in {num!r}")
    value = 0
    for ch in text:
        digit = DIGITS.find(ch.lower())
        if not 0 <= digit < base:
            raise ValueError(f"invalid digit {ch!r} in {num!r} for base {base}")
        value = value * base + digit
    value *= sign
    if not _INT_MIN <= value <= _INT_MAX:
        raise ValueError(f"{num!r} is out of range")
    return value


def from_decimal(num: int, base: int) -> str:
    """Digits of non-negative ``num`` in ``base``; zero gives the empty string."""
    _check_base(base)
    if num < 0:
        raise ValueError("negative numbers are not supported")
    digits = []
    while num:
        num, digit = divmod(num, base)
        digits.append(DIGITS[digit])
    return "".join(reversed(digits))


def main(argv: list[str] | None = None) -> int:
    """Show conversions of a sample hexadecimal number."""
    argparse.ArgumentParser(description="Demonstrate base conversions.").parse_args(argv)
    print(to_decimal("EF", 16))
    print(parse_int("EF", 16))
    print(from_decimal(to_decimal("EF", 16), 16))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())