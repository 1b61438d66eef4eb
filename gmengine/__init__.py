"""Game engine building blocks: vectors, matrices, bounds and collision, serialization, paths and files, strings, randomness, timing and base objects."""

__version__ = "0.1.0"