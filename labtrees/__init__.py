"""Tree exercises: an aging-priority scheduler with AVL task history, a serializable binary search tree, and subtree sizes."""

__version__ = "0.1.0"
__all__ = ["bst", "scheduler", "subtree"]