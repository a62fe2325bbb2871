"""Classic data-structure and algorithm exercises: graphs, sorting, strings, Huffman
coding, search puzzles, trees, linked lists and sparse matrices."""

__version__ = "0.1.0"

__all__ = [
    "huffman",
    "lift",
    "linked",
    "mst",
    "search",
    "shortest",
    "sorting",
    "sparse",
    "strings",
    "trees",
]