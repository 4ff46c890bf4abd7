"""Buffered line-by-line reading from one or many file descriptors."""

__version__ = "0.1.0"
__all__ = ["reader", "multi"]