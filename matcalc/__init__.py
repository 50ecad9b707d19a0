"""Bounded integer square matrices, composable operations on them, and a line reader."""

__version__ = "0.1.0"
__all__ = ["errors", "matrix", "operations", "reader"]