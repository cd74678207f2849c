"""Sort integers with two stacks and a limited set of stack operations."""

__version__ = "1.0.0"

__all__ = [
    "chars",
    "cli",
    "linkedlist",
    "memory",
    "output",
    "parsing",
    "printf",
    "sorter",
    "stacks",
    "textutils",
]