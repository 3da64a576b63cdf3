"""Small C library routines: scanf-style input parsing, string and memory helpers, time records and limits."""

__version__ = "0.1.0"
__all__ = ["constants", "scanf", "strings", "systime"]