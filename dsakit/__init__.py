"""Classic data structures and algorithms: sorting, searching, graphs, trees,
hash tables, linked lists and backtracking, in plain Python."""

__version__ = "0.1.0"