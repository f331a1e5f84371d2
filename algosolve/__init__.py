"""Solutions to classic algorithmic problems: sliding windows, binary search, graphs, strings."""

__version__ = "0.1.0"
__all__ = ["sliding_window", "binary_search", "graphs", "strings", "nodes"]