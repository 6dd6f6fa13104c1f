"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "hashing",
    "linked_lists",
    "menu",
    "numbers",
    "queues",
    "stacks",
    "strings",
    "tree",
]