"""Classic interview-style algorithms and data structures: linked lists,
graphs, tries, trees, stacks, strings, numbers, arrays and matrices."""

__version__ = "0.1.0"
__all__ = [
    "linked_lists",
    "graphs",
    "tries",
    "trees",
    "stacks",
    "text",
    "arithmetic",
    "arrays",
    "matrices",
]