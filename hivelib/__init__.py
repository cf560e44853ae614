"""Character, memory and string helpers, a linked list, printf, line reading, signal messaging and the dining philosophers."""

__version__ = "0.1.0"