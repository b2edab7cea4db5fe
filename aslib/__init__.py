"""Small building blocks: a bubble sort, a managed heap, a tail-tracking array and block memory I/O."""

__version__ = "0.1.0"
__all__ = ["sort", "memory", "array", "memory_io"]