"""Classic data structures and algorithms: bits, strings, lists, queues, stacks, trees, matrices."""

__version__ = "0.1.0"

__all__ = [
    "bayer",
    "binary_tree",
    "bits",
    "linked_list",
    "linked_variants",
    "matrix",
    "problems",
    "queues",
    "stacks",
    "strings",
]