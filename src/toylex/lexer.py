"""
toylex Scanner
==============

This module implements the scanner for the toy language. It turns source
text into a sequence of tokens, one per call to ``Lexer.next_token()``.

Scanning Steps
--------------
Each call to ``next_token()``:

1. skips whitespace (possibly across several lines);
2. returns EOF if nothing is left;
3. records the start line/column of the token;
4. tries the two-character operators (== != && || <= >=);
5. tries the single-character operators and punctuation;
6. scans a string literal on a quote;
7. scans a number on a digit;
8. scans an identifier or keyword on a letter or underscore;
9. otherwise reports an unrecognized character, skips exactly that
   character and returns an ERROR token.

Every path consumes at least one character or returns EOF, so scanning a
buffer always terminates. Once the input is exhausted every further call
returns EOF at the same position.

Errors
------
Lexical errors are returned as ERROR tokens, never raised. Each one is
also described by a LexicalError handed to the reporter (the error
channel), which defaults to logging it.

Example Usage
-------------
>>> from toylex.lexer import Lexer
>>> lexer = Lexer(b"func main ( ) { }", "main.toy")
>>> for token in lexer.tokenize():
...     print(token)
Token(FUNC, 'func', 1:1)
Token(IDENTIFIER, 'main', 1:6)
Token(LPAREN, '(', 1:11)
Token(RPAREN, ')', 1:13)
Token(LBRACE, '{', 1:15)
Token(RBRACE, '}', 1:17)
Token(EOF, 1:18)
"""

import logging
from typing import Iterator, Optional, Union

from toylex.cursor import Cursor, END_OF_INPUT, is_digit, is_ident_char, is_ident_start
from toylex.errors import (
    LexicalError,
    Reporter,
    SourceLocation,
    UnrecognizedCharacterError,
    UnterminatedStringError,
    log_diagnostic,
)
from toylex.tokens import (
    SINGLE_CHAR_TOKENS,
    TWO_CHAR_OPERATORS,
    Token,
    TokenKind,
    lookup_keyword,
)

logger = logging.getLogger(__name__)

# Fixed texts carried by ERROR tokens
UNTERMINATED_STRING_TEXT = "unterminated string"
UNRECOGNIZED_CHARACTER_TEXT = "unrecognized character"

QUOTE = "'"


def _discard(error: LexicalError) -> None:
    pass


class Lexer:
    """
    Scans toy language source text into tokens.

    Usage:
        lexer = Lexer(source_bytes, "prog.toy")
        token = lexer.next_token()
        while not token.is_eof():
            ...
            token = lexer.next_token()

    Attributes:
        filename: Name of the source file (for tokens and diagnostics)
        error_count: Number of lexical errors reported so far
    """

    def __init__(
        self,
        source: Union[bytes, bytearray, str],
        filename: str = "<input>",
        reporter: Optional[Reporter] = None,
    ):
        """
        Initialize the lexer.

        Args:
            source: The whole source text; bytes are read one character
                per byte
            filename: Name of the source file (for error messages)
            reporter: Callable receiving each LexicalError; defaults to
                logging the formatted message
        """
        self.filename = filename
        self.reporter: Reporter = reporter if reporter is not None else log_diagnostic
        self.error_count = 0
        self._cursor = Cursor(source)

    @property
    def cursor(self) -> Cursor:
        return self._cursor

    # =========================================================================
    # Token Production
    # =========================================================================

    def next_token(self) -> Token:
        """
        Scan and return the next token.

        Safe to call again after EOF or ERROR: an exhausted lexer keeps
        returning EOF at the final position.
        """
        cursor = self._cursor
        cursor.skip_whitespace()

        if cursor.at_end():
            return self._make_token(TokenKind.EOF, None, cursor.line, cursor.column)

        start_line = cursor.line
        start_column = cursor.column
        char = cursor.current_char

        pair = char + cursor.peek(1)
        if pair in TWO_CHAR_OPERATORS:
            cursor.advance()
            cursor.advance()
            return self._make_token(TWO_CHAR_OPERATORS[pair], pair, start_line, start_column)

        if char in SINGLE_CHAR_TOKENS:
            cursor.advance()
            return self._make_token(SINGLE_CHAR_TOKENS[char], char, start_line, start_column)

        if char == QUOTE:
            return self._read_string(start_line, start_column)

        if is_digit(char):
            return self._read_number(start_line, start_column)

        if is_ident_start(char):
            return self._read_identifier(start_line, start_column)

        self._report(UnrecognizedCharacterError(
            char,
            SourceLocation(self.filename, start_line, start_column),
            cursor.line_text(),
        ))
        cursor.advance()
        return self._make_token(
            TokenKind.ERROR, UNRECOGNIZED_CHARACTER_TEXT, start_line, start_column
        )

    def tokenize(self, stop_on_error: bool = True) -> Iterator[Token]:
        """
        Generate tokens up to and including EOF.

        Args:
            stop_on_error: Stop right after the first ERROR token. When
                False, scanning resumes after each error and the stream
                still ends with exactly one EOF.

        Yields:
            Token objects in source order
        """
        while True:
            token = self.next_token()
            yield token
            if token.kind is TokenKind.EOF:
                return
            if token.kind is TokenKind.ERROR and stop_on_error:
                return

    def peek_token(self) -> Token:
        """
        Return the next token without consuming it.

        The cursor state is restored afterwards and no diagnostic is
        emitted for an ERROR token seen this way.
        """
        saved_state = self._cursor.save()
        saved_reporter = self.reporter
        saved_count = self.error_count
        self.reporter = _discard

        try:
            return self.next_token()
        finally:
            self._cursor.restore(saved_state)
            self.reporter = saved_reporter
            self.error_count = saved_count

    # =========================================================================
    # Category Recognizers
    # =========================================================================

    def _read_number(self, start_line: int, start_column: int) -> Token:
        """Scan a run of decimal digits."""
        cursor = self._cursor
        start = cursor.position
        while is_digit(cursor.current_char):
            cursor.advance()

        return self._make_token(
            TokenKind.NUMBER, cursor.text_since(start), start_line, start_column
        )

    def _read_string(self, start_line: int, start_column: int) -> Token:
        """
        Scan a single-quoted string literal.

        The reported text keeps both quotes. There are no escapes, so the
        first quote after the opening one always ends the literal. If the
        input ends first, the cursor is left at end of input.
        """
        cursor = self._cursor
        source_line = cursor.line_text()

        cursor.advance()  # consume opening '
        start = cursor.position

        while cursor.current_char != END_OF_INPUT and cursor.current_char != QUOTE:
            cursor.advance()

        if cursor.at_end():
            self._report(UnterminatedStringError(
                SourceLocation(self.filename, start_line, start_column),
                source_line,
            ))
            return self._make_token(
                TokenKind.ERROR, UNTERMINATED_STRING_TEXT, start_line, start_column
            )

        contents = cursor.text_since(start)
        cursor.advance()  # consume closing '

        return self._make_token(
            TokenKind.STRING_LITERAL, QUOTE + contents + QUOTE, start_line, start_column
        )

    def _read_identifier(self, start_line: int, start_column: int) -> Token:
        """
        Scan an identifier or keyword.

        The whole run of letters, digits and underscores is taken before
        the keyword lookup, so "iffy" is one IDENTIFIER.
        """
        cursor = self._cursor
        start = cursor.position
        while is_ident_char(cursor.current_char):
            cursor.advance()

        name = cursor.text_since(start)
        return self._make_token(lookup_keyword(name), name, start_line, start_column)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _make_token(
        self,
        kind: TokenKind,
        text: Optional[str],
        line: int,
        column: int,
    ) -> Token:
        token = Token(kind=kind, text=text, line=line, column=column, filename=self.filename)
        logger.debug("scanned %r", token)
        return token

    def _report(self, error: LexicalError) -> None:
        self.error_count += 1
        self.reporter(error)


def tokenize(
    source: Union[bytes, bytearray, str],
    filename: str = "<input>",
    stop_on_error: bool = True,
    reporter: Optional[Reporter] = None,
) -> list[Token]:
    """
    Convenience function to scan a whole source text.

    Args:
        source: The source text
        filename: Name used in tokens and diagnostics
        stop_on_error: Stop after the first ERROR token
        reporter: Error channel; defaults to logging

    Returns:
        The scanned tokens, ending with EOF (or with ERROR when
        stop_on_error is set and an error was found)
    """
    lexer = Lexer(source, filename, reporter)
    return list(lexer.tokenize(stop_on_error=stop_on_error))
