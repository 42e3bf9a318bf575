"""
Token definitions for the CSS-module output lexer.

This module contains the TokenType enum, Token dataclass, and the
constant mapping for the punctuation the lexer recognizes.
"""

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Enumeration of all token types recognized by the lexer."""

    # Delimiters
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    SEMICOLON = auto()
    COMMA = auto()
    DOT = auto()
    COLON = auto()
    EQ = auto()

    # Literals
    NUMBER = auto()
    STRING_LITERAL = auto()
    IDENTIFIER = auto()

    # Anything else the build step may emit (operators, stray characters)
    OTHER = auto()

    # Special
    EOF = auto()


@dataclass
class Token:
    """Represents a single token from the lexer."""
    type: TokenType
    value: str
    line: int
    column: int


# Single-character delimiters
SINGLE_CHAR_OPS = {
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    '[': TokenType.LBRACKET,
    ']': TokenType.RBRACKET,
    ';': TokenType.SEMICOLON,
    ',': TokenType.COMMA,
    '.': TokenType.DOT,
    ':': TokenType.COLON,
    '=': TokenType.EQ,
}

# Characters that open a string literal
QUOTES = '"\'`'
