"""A singly linked list of unsigned 32-bit integers with cursor-style iterators."""

__version__ = "0.1.0"
__all__ = ["linkedlist"]