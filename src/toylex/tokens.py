"""
Token Model
===========

Token kinds, the token value produced by the scanner, the keyword table
and the operator tables used to classify source text.

Token Categories
----------------
- Keywords: func, if, else, while, break, int, char
- Identifiers: letter or underscore, then letters, digits, underscores
- Numbers: decimal digits only (no sign, point or exponent)
- Strings: 'single quoted', no escape sequences
- Operators: = + - * / < > == != && || <= >=
- Punctuation: ( ) { } ; ,

Example
-------
>>> from toylex import tokenize, format_token
>>> for token in tokenize("x = 10;"):
...     print(format_token(token))
Token(IDENTIFIER, 'x', L1, C1)
Token(ASSIGN, '=', L1, C3)
Token(NUMBER, '10', L1, C5)
Token(SEMICOLON, ';', L1, C7)
Token(EOF, NULL, L1, C8)
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from toylex.errors import SourceLocation


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """Closed set of token kinds produced by the scanner."""

    # === Keywords ===
    FUNC = auto()           # func
    IF = auto()             # if
    ELSE = auto()           # else
    WHILE = auto()          # while
    BREAK = auto()          # break
    INT = auto()            # int
    CHAR = auto()           # char

    # === Operators and Punctuation ===
    ASSIGN = auto()         # =
    SEMICOLON = auto()      # ;
    LPAREN = auto()         # (
    RPAREN = auto()         # )
    LBRACE = auto()         # {
    RBRACE = auto()         # }
    COMMA = auto()          # ,
    PLUS = auto()           # +
    MINUS = auto()          # -
    MULTIPLY = auto()       # *
    DIVIDE = auto()         # /
    AND = auto()            # &&
    OR = auto()             # ||
    NE = auto()             # !=
    GT = auto()             # >
    LT = auto()             # <
    EQ = auto()             # ==
    LE = auto()             # <=
    GE = auto()             # >=

    # === Literals ===
    NUMBER = auto()         # 123
    STRING_LITERAL = auto() # 'text'

    IDENTIFIER = auto()

    # === Structural ===
    EOF = auto()            # End of input
    ERROR = auto()          # Lexical error


# =============================================================================
# Keyword and Operator Tables
# =============================================================================

KEYWORDS: dict[str, TokenKind] = {
    "func": TokenKind.FUNC,
    "if": TokenKind.IF,
    "else": TokenKind.ELSE,
    "while": TokenKind.WHILE,
    "break": TokenKind.BREAK,
    "int": TokenKind.INT,
    "char": TokenKind.CHAR,
}

KEYWORD_KINDS = frozenset(KEYWORDS.values())

# Tried before SINGLE_CHAR_TOKENS; the spellings are pairwise disjoint.
TWO_CHAR_OPERATORS: dict[str, TokenKind] = {
    "==": TokenKind.EQ,
    "!=": TokenKind.NE,
    "&&": TokenKind.AND,
    "||": TokenKind.OR,
    "<=": TokenKind.LE,
    ">=": TokenKind.GE,
}

SINGLE_CHAR_TOKENS: dict[str, TokenKind] = {
    "=": TokenKind.ASSIGN,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    ",": TokenKind.COMMA,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.MULTIPLY,
    "/": TokenKind.DIVIDE,
    "<": TokenKind.LT,
    ">": TokenKind.GT,
}


def lookup_keyword(text: str) -> TokenKind:
    """
    Resolve identifier text to its keyword kind.

    Matching is exact and case-sensitive; anything that is not a
    reserved word is an IDENTIFIER ("If" and "iffy" included).
    """
    return KEYWORDS.get(text, TokenKind.IDENTIFIER)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token scanned from source text.

    Tokens are immutable and hold their own copy of the lexeme, so they
    stay valid after the source buffer is gone.

    Attributes:
        kind: The TokenKind classification
        text: The lexeme as written (quotes included for strings), the
            diagnostic text for ERROR tokens, None for EOF
        line: Line of the token's first character (1-indexed)
        column: Column of the token's first character (1-indexed)
        filename: Name of the source file
    """
    kind: TokenKind
    text: Optional[str]
    line: int
    column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        """Format token for debugging output."""
        if self.text is not None:
            return f"Token({self.kind.name}, {self.text!r}, {self.line}:{self.column})"
        return f"Token({self.kind.name}, {self.line}:{self.column})"

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.line, self.column)

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.kind in KEYWORD_KINDS

    def is_error(self) -> bool:
        return self.kind is TokenKind.ERROR

    def is_eof(self) -> bool:
        return self.kind is TokenKind.EOF


def format_token(token: Token) -> str:
    """
    Render a token as one human-readable trace line.

    Tokens without text show NULL in place of the quoted lexeme:

        Token(NUMBER, '10', L1, C5)
        Token(EOF, NULL, L3, C1)
    """
    text = f"'{token.text}'" if token.text is not None else "NULL"
    return f"Token({token.kind.name}, {text}, L{token.line}, C{token.column})"
