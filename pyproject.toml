[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gmengine"
version = "0.1.0"
description = "Core building blocks for a small game engine: vector and matrix math, transforms and collision tests, binary serialization, paths and files, timing and randomness."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "engine", "math", "vector", "matrix", "collision", "serialization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gmengine"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
