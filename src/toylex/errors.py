"""
toylex Error Hierarchy
======================

This module defines the exception hierarchy for toylex. All exceptions
inherit from ToyLexError, allowing callers to catch every toylex-related
error with a single except clause.

Exception Hierarchy
-------------------
ToyLexError (base)
├── LexicalError - a malformed piece of source text
│   ├── UnterminatedStringError - end of input inside a string literal
│   └── UnrecognizedCharacterError - character that cannot start a token
├── LexicalErrorsFound - aggregate raised by DiagnosticCollector
└── SourceReadError - the source file could not be read

Lexical Errors Are Diagnostics
------------------------------
The scanner never raises LexicalError. Each malformed input produces an
ERROR token for the caller *and* a LexicalError object handed to a
reporter callable (the error channel). The default reporter logs the
message; DiagnosticCollector keeps them for batch reporting.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)
    hint: suggestion for fixing (when available)
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# Base Exception Class
# =============================================================================

class ToyLexError(Exception):
    """
    Base exception for all toylex errors.

        try:
            source, length = read_source("prog.toy")
        except ToyLexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    A position in source text.

    Attributes:
        filename: Name of the source file (or "<input>" for in-memory text)
        line: Line number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(ToyLexError):
    """
    A lexical error found while scanning.

    Attributes:
        message: The error description
        location: Where in the source the error occurred (optional)
        hint: A suggestion for fixing the error (optional)
        source_line: The source text of the offending line (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        hint: Optional[str] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.hint = hint
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location, source context, and hint.

        Example output:
            prog.toy:3:9: error: unterminated string literal
                x = 'abc
                    ^
            hint: add a closing "'" to complete the string
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        # Source context with caret pointer
        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


class UnterminatedStringError(LexicalError):
    """
    End of input reached inside a single-quoted string literal.

    There are no escape sequences, so the only way to end a string is a
    second quote character. Example:

        x = 'hello    // no closing quote anywhere after this
    """

    def __init__(
        self,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(
            "unterminated string literal",
            location=location,
            hint="add a closing \"'\" to complete the string",
            source_line=source_line,
        )


class UnrecognizedCharacterError(LexicalError):
    """A character that cannot begin any token."""

    def __init__(
        self,
        char: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.char = char
        super().__init__(
            f"unrecognized character {char!r} (0x{ord(char):02X})",
            location=location,
            source_line=source_line,
        )


class LexicalErrorsFound(ToyLexError):
    """
    Aggregate error carrying a pre-formatted report of several
    lexical errors, raised by DiagnosticCollector.raise_if_errors().
    """

    def __init__(self, report: str, errors: List[LexicalError]):
        self.errors = errors
        super().__init__(report)


class SourceReadError(ToyLexError):
    """The source file could not be opened or read."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"cannot read '{filename}': {reason}")


# =============================================================================
# Error Channel
# =============================================================================

# A reporter receives every lexical error the scanner detects.
Reporter = Callable[[LexicalError], None]


def log_diagnostic(error: LexicalError) -> None:
    """Default reporter: log the formatted diagnostic at ERROR level."""
    logger.error("%s", error)


class DiagnosticCollector:
    """
    Collects lexical errors for batch reporting.

    An instance is a reporter and can be passed straight to a Lexer:

        collector = DiagnosticCollector()
        tokens = tokenize(source, reporter=collector, stop_on_error=False)

        if collector.has_errors():
            print(collector.report())
    """

    def __init__(self, max_errors: Optional[int] = None):
        """
        Initialize the collector.

        Args:
            max_errors: Number of errors after which should_stop() turns
                True. None means no limit.
        """
        self.errors: List[LexicalError] = []
        self.max_errors = max_errors

    def __call__(self, error: LexicalError) -> None:
        self.add(error)

    def add(self, error: LexicalError) -> None:
        """Add an error to the collection."""
        self.errors.append(error)

    def has_errors(self) -> bool:
        """Return True if any errors have been collected."""
        return len(self.errors) > 0

    def should_stop(self) -> bool:
        """Return True once max_errors has been reached."""
        return self.max_errors is not None and len(self.errors) >= self.max_errors

    def error_count(self) -> int:
        """Return the number of collected errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors followed by a summary line."""
        lines = []
        for error in self.errors:
            lines.append(str(error))
            lines.append("")

        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")
        return "\n".join(lines)

    def clear(self) -> None:
        """Forget all collected errors."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise LexicalErrorsFound if any errors were collected."""
        if self.has_errors():
            raise LexicalErrorsFound(self.report(), list(self.errors))
