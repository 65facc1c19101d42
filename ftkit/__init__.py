"""Character, memory, string, linked-list, output and printf-style formatting utilities."""

__version__ = "0.1.0"

__all__ = ["chars", "memory", "strings", "lists", "output", "printf"]