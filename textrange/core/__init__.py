"""
textrange core library.

This package contains the core functionality:
- encoding: encoding detection, quality scoring and range decoding
- paging: byte window planning for incremental reading
"""

__all__: list[str] = []
