"""Step-by-step visualisation of sorting algorithms on linked lists."""

__version__ = "0.1.0"