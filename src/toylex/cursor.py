"""
Character Cursor
================

The cursor owns the source text and the scanning position: byte offset,
line and column. The scanner drives it one character at a time and uses
fixed-offset lookahead to tell two-character operators apart from their
single-character prefixes.

Position Rules
--------------
- Lines and columns are 1-indexed.
- Consuming a newline moves to the next line and resets the column to 1,
  wherever the newline is consumed (whitespace, inside a string, ...).
- Once the offset reaches the end of the source, the current character is
  END_OF_INPUT forever; advancing further is a no-op.

Input
-----
Source text is treated as single-byte characters. ``bytes`` are decoded as
Latin-1, which maps every byte to exactly one character, so the column
counts bytes. Character classes are the ASCII ones of the C locale.
"""

import string
from dataclasses import dataclass
from typing import Union

# Returned by the cursor once the source is exhausted
END_OF_INPUT = ""

WHITESPACE = " \t\n\v\f\r"
DIGITS = string.digits
LETTERS = string.ascii_letters

# Characters that can start an identifier
IDENT_START = LETTERS + "_"

# Characters that can continue an identifier
IDENT_CHARS = LETTERS + DIGITS + "_"


def decode_source(source: Union[bytes, bytearray, str]) -> str:
    """Return source as text with one character per input byte."""
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("latin-1")
    return source


def is_whitespace(char: str) -> bool:
    return char != END_OF_INPUT and char in WHITESPACE


def is_digit(char: str) -> bool:
    return char != END_OF_INPUT and char in DIGITS


def is_ident_start(char: str) -> bool:
    return char != END_OF_INPUT and char in IDENT_START


def is_ident_char(char: str) -> bool:
    return char != END_OF_INPUT and char in IDENT_CHARS


@dataclass(frozen=True)
class CursorState:
    """Snapshot of a cursor's scanning state (see Cursor.save)."""
    position: int
    line: int
    column: int
    line_start: int


class Cursor:
    """
    Scanning position over one source buffer.

    Usage:
        cursor = Cursor(b"int x;")
        while not cursor.at_end():
            print(cursor.current_char, cursor.line, cursor.column)
            cursor.advance()

    Attributes:
        source: The source text (read-only for the cursor's lifetime)
        line: Current line number (1-indexed)
        column: Current column number (1-indexed)
    """

    def __init__(self, source: Union[bytes, bytearray, str]):
        self.source = decode_source(source)
        self.line = 1
        self.column = 1

        self._pos = 0
        self._length = len(self.source)

        # Offset of the first character of the current line
        self._line_start = 0

    @property
    def position(self) -> int:
        """Current byte offset into the source."""
        return self._pos

    @property
    def current_char(self) -> str:
        """The character under the cursor, or END_OF_INPUT."""
        if self._pos >= self._length:
            return END_OF_INPUT
        return self.source[self._pos]

    def at_end(self) -> bool:
        """Check if the whole source has been consumed."""
        return self._pos >= self._length

    def peek(self, offset: int = 0) -> str:
        """
        Look at the character at current position + offset without
        advancing.

        Returns END_OF_INPUT if the position is outside the source.
        """
        pos = self._pos + offset
        if pos < 0 or pos >= self._length:
            return END_OF_INPUT
        return self.source[pos]

    def advance(self) -> None:
        """Move to the next character, updating line and column."""
        if self._pos >= self._length:
            return

        char = self.source[self._pos]
        self._pos += 1

        if char == "\n":
            self.line += 1
            self.column = 1
            self._line_start = self._pos
        else:
            self.column += 1

    def skip_whitespace(self) -> None:
        """Advance past a run of whitespace, which may span several lines."""
        while is_whitespace(self.current_char):
            self.advance()

    def text_since(self, start: int) -> str:
        """Return a copy of the source from offset start to the cursor."""
        return self.source[start:self._pos]

    def line_text(self) -> str:
        """Return the current line of source text, for error reporting."""
        line_end = self.source.find("\n", self._line_start)
        if line_end == -1:
            line_end = self._length
        return self.source[self._line_start:line_end]

    # =========================================================================
    # State Save/Restore
    # =========================================================================

    def save(self) -> CursorState:
        """Capture the scanning state so it can be restored later."""
        return CursorState(self._pos, self.line, self.column, self._line_start)

    def restore(self, state: CursorState) -> None:
        """Return to a state captured by save()."""
        self._pos = state.position
        self.line = state.line
        self.column = state.column
        self._line_start = state.line_start

    def __repr__(self) -> str:
        return f"Cursor(pos={self._pos}, {self.line}:{self.column}, char={self.current_char!r})"
