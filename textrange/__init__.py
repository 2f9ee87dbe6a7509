"""
textrange: adaptive encoding detection and range decoding for text files.

A library and CLI tool for reading local text files (books) window by window.
Detects the file encoding from its opening bytes and decodes arbitrary byte
ranges, falling back to other encodings when a decode looks like mojibake.

Usage:
    from textrange.core.encoding import detect_encoding, read_range
    label = detect_encoding("book.txt")
    result = read_range("book.txt", 0, 4096, label)
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
