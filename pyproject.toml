[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cpmath"
version = "0.1.0"
description = "Number theory, bitmask sets, polynomials and base conversions for competitive programming, with worked problem solutions"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "competitive-programming",
    "number-theory",
    "primes",
    "sieve",
    "modular-arithmetic",
    "bitmask",
    "polynomials",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
cpmath-bitmask = "cpmath.bitmask:main"
cpmath-conversions = "cpmath.conversions:main"
cpmath-poly = "cpmath.poly:main"
cpmath-euclid = "cpmath.euclid:main"
cpmath-modular = "cpmath.modular:main"
cpmath-primes = "cpmath.primes:main"
cpmath-adhoc = "cpmath.adhoc_problems:main"
cpmath-numtheory = "cpmath.numtheory_problems:main"

[tool.hatch.build.targets.wheel]
packages = ["cpmath"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
