"""Mola Language Server package.

This package provides:
- A pygls-based Language Server for Mola source files.
- An indexer that runs documents through the Mola reader without evaluating them.
"""

__all__ = [
    "server",
    "indexer",
]
