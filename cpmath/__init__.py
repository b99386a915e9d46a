"""Number theory, bitmask sets, polynomials, base conversions and contest problem solutions."""

__version__ = "0.1.0"