"""Fixed-size hash map with per-bucket chaining, self-verification, dumps and a word-frequency tool."""

__version__ = "0.1.0"
__all__ = ["__version__"]