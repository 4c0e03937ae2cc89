[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "k2prng"
version = "0.1.0"
description = "64-bit Mersenne Twister generator and small runtime utilities for a chess engine"
requires-python = ">=3.10"
dependencies = []
keywords = ["mersenne-twister", "mt19937-64", "prng", "random", "chess"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["k2prng"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
