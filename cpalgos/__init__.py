"""Classic algorithms and small competitive-programming solvers: trees, graphs, bit tricks, greedy, arithmetic and string puzzles."""

__version__ = "0.1.0"
__all__ = ["arithmetic", "bitmasking", "graph", "greedy", "strings", "trees"]