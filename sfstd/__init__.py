"""Small standard utilities: a string-keyed map, a vector, a byte buffer, numerics and file helpers."""

__version__ = "0.1.0"
__all__ = ["dynamic", "errors", "fs", "numerics", "strings"]