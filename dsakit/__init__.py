"""Classic algorithm routines: arrays, dynamic programming, graphs, strings and sliding windows."""

__version__ = "0.1.0"
__all__ = ["arrays", "dp", "graph", "strings", "two_pointer"]