"""Classic algorithms on arrays, strings, numbers, matrices, linked lists and trees."""

__version__ = "0.1.0"