"""Solutions to classic algorithm puzzles: trees, tries, segment trees and strings."""

__version__ = "0.1.0"

__all__ = ["arrays", "expressions", "range_freq", "strings", "trees", "tries"]