"""Binary search tree construction, editing, queries and iteration."""

__version__ = "0.1.0"
__all__ = ["iterators", "queries", "tree"]