"""Binary search trees, AVL trees, a bank account and a person hierarchy."""

__version__ = "0.1.0"
__all__ = ["bst", "avl", "accounts", "people"]