"""Small algorithm drills on arrays, text patterns, strings, linked lists, stacks, queues and sorting."""

__version__ = "0.1.0"
__all__ = ["arrays", "patterns", "strings", "linked", "listmath", "stacks", "queues", "sorting"]