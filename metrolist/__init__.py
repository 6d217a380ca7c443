"""Directory of cities and their residents built on doubly linked lists, with an interactive menu."""

__version__ = "0.1.0"
__all__ = ["linked", "metro", "cli"]