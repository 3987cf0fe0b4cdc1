"""Small, self-contained algorithm solutions grouped by theme."""

__version__ = "0.1.0"

__all__ = ["text", "arrays", "arithmetic", "heaps", "alternation", "graphs", "counting"]