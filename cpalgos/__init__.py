"""Competitive-programming algorithms: KMP matching, MEX queries, tree path extremes and sorting."""

__version__ = "0.1.0"
__all__ = ["kmp", "lca", "mex", "sorting"]