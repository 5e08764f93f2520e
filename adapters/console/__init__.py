"""
Console adapters package.

This package provides the line-oriented input/output used by the
interactive shell.
"""

from .line_io import ConsoleIO, LineIO

__all__ = [
    "ConsoleIO",
    "LineIO",
]
