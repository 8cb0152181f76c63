"""Console adapter for the interactive prompt protocol."""

import sys
from dataclasses import dataclass, field
from typing import Protocol, TextIO


class Console(Protocol):
    """Interface for the line-oriented user channel."""

    def ask(self, prompt: str) -> str:
        """Show a prompt and return the next line without its newline."""

    def write(self, text: str) -> None:
        """Write a line of normal output."""

    def error(self, text: str) -> None:
        """Write a line of error output."""

    def close(self) -> None:
        """Release the channel."""


@dataclass
class StdioConsole:
    """Console implemented over the process standard streams."""

    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    closed: bool = False

    def ask(self, prompt: str) -> str:
        """Write the prompt and block for one line of input."""
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("Input stream closed")
        return line.rstrip("\r\n")

    def write(self, text: str) -> None:
        """Print a line to stdout."""
        print(text, file=self.stdout)

    def error(self, text: str) -> None:
        """Print a line to stderr."""
        print(text, file=self.stderr)

    def close(self) -> None:
        """Flush output once; later calls are no-ops."""
        if self.closed:
            return
        self.stdout.flush()
        self.stderr.flush()
        self.closed = True
