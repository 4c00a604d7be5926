"""Hash dictionary, linked list, dynamic array and an LRU cache built on them, with supporting helpers."""

__version__ = "0.1.0"