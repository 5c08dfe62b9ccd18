[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "eulerkit"
version = "0.1.0"
description = "Big integers, number-theory helpers and solvers for classic digit, prime and counting puzzles"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "big integer",
    "number theory",
    "primes",
    "pandigital",
    "palindromes",
    "puzzles",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
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
eulerkit = "eulerkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["eulerkit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
