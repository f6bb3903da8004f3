"""Helpers for type checks, algorithms, error handling, randomness, timing and strings."""

__version__ = "1.0.0"
__all__ = ["algorithms", "concepts", "errors", "randomgen", "strings", "timing"]