"""Character reader that tracks line and column positions."""

from __future__ import annotations

import os


class CharReader:
    """Reads characters one at a time, tracking the current line and column.

    ``current_char`` is ``None`` once the end of the input is reached.
    """

    def __init__(self, text: str) -> None:
        self._chars = iter(text)
        self.current_char: str | None = None
        self.line_no = 1
        self.col_no = 0
        self.read_char()

    @classmethod
    def from_file(cls, path: str | os.PathLike[str]) -> CharReader:
        """Create a reader over the contents of a file; OSError if unreadable."""
        with open(path, encoding="latin-1", newline="") as handle:
            return cls(handle.read())

    def read_char(self) -> str | None:
        """Advance to the next character and return it (``None`` at end)."""
        self.current_char = next(self._chars, None)
        self.col_no += 1
        if self.current_char == "\n":
            self.line_no += 1
            self.col_no = 0
        return self.current_char