"""
Tab-indented line writer used by the MOSDL generator.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

INDENT_UNIT = "\t"
NEWLINE = "\n"


class IndentWriter:
    """
    Writes text to a stream, prefixing lines with the current indent.

    The writer never starts lines on its own: ``write`` appends raw text,
    ``write_indent`` emits the indent prefix and ``write_line`` does both and
    terminates the line.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.level = 0

    def indent(self) -> None:
        self.level += 1

    def outdent(self) -> None:
        self.level = max(self.level - 1, 0)

    @contextmanager
    def indented(self) -> Iterator[None]:
        """Indent everything written inside the block by one level."""
        self.indent()
        try:
            yield
        finally:
            self.outdent()

    def write(self, *parts: object) -> None:
        for part in parts:
            if part is not None:
                self.stream.write(str(part))

    def write_indent(self) -> None:
        self.stream.write(INDENT_UNIT * self.level)

    def write_line(self, *parts: object) -> None:
        """Write an indented line. Without parts, only terminate the current line."""
        if parts:
            self.write_indent()
            self.write(*parts)
        self.stream.write(NEWLINE)
