"""Classic algorithms on lists, strings, integers, linked lists and binary trees."""

__version__ = "0.1.0"

__all__ = ["arrays", "dynamic", "integers", "linkedlist", "searching", "strings", "trees"]