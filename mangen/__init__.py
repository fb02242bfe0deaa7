"""Directory manifest generator: relative file paths with Adler-32 checksums."""

__version__ = "0.1.0"
__all__ = ["cli", "flags", "linkedlist", "manifest"]