"""
Line-oriented input/output for the interactive shell and planner.

This module defines the abstract interface the core talks to and the
console implementation used by the command line entry point.
"""

from abc import ABC, abstractmethod
from typing import Optional


class LineIO(ABC):
    """Abstract source of user lines and sink for text output."""

    @abstractmethod
    def read_line(self, prompt: Optional[str] = None) -> str:
        """Print an optional prompt and return the next line of input.

        Raises:
            EOFError: when the input is exhausted
        """
        pass

    @abstractmethod
    def write(self, text: str = "") -> None:
        """Write one line of output."""
        pass


class ConsoleIO(LineIO):
    """LineIO bound to standard input and output."""

    def read_line(self, prompt: Optional[str] = None) -> str:
        if prompt is not None:
            print(prompt)
        return input()

    def write(self, text: str = "") -> None:
        print(text)
