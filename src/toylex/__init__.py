"""
toylex - Scanner for a Small C-like Toy Language
================================================

This package turns source text of a small C-like language into a stream
of classified tokens for a downstream parser.

The language has:
- Keywords: func, if, else, while, break, int, char
- Integer literals and 'single quoted' strings (no escapes)
- Arithmetic, relational and logical operators
- Identifiers made of letters, digits and underscores

Main Components
---------------
- **cursor**: character cursor with line/column tracking and lookahead
- **tokens**: token kinds, the Token value, keyword and operator tables
- **lexer**: the scanner (``Lexer.next_token``) and ``tokenize`` helper
- **source**: reading a source file into memory
- **cli**: the ``tlex`` command-line tool

Quick Start
-----------
    >>> from toylex import tokenize
    >>> [t.kind.name for t in tokenize("if x == 1")]
    ['IF', 'IDENTIFIER', 'EQ', 'NUMBER', 'EOF']

Or from the command line:
    $ tlex program.toy
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from toylex.cursor import Cursor, CursorState, END_OF_INPUT
from toylex.errors import (
    ToyLexError,
    SourceLocation,
    LexicalError,
    UnterminatedStringError,
    UnrecognizedCharacterError,
    LexicalErrorsFound,
    SourceReadError,
    DiagnosticCollector,
    log_diagnostic,
)
from toylex.lexer import Lexer, tokenize
from toylex.source import read_source
from toylex.tokens import Token, TokenKind, KEYWORDS, format_token, lookup_keyword

__all__ = [
    "__version__",
    # Cursor
    "Cursor",
    "CursorState",
    "END_OF_INPUT",
    # Tokens
    "Token",
    "TokenKind",
    "KEYWORDS",
    "format_token",
    "lookup_keyword",
    # Scanner
    "Lexer",
    "tokenize",
    "read_source",
    # Errors
    "ToyLexError",
    "SourceLocation",
    "LexicalError",
    "UnterminatedStringError",
    "UnrecognizedCharacterError",
    "LexicalErrorsFound",
    "SourceReadError",
    "DiagnosticCollector",
    "log_diagnostic",
]
