"""
Lexer module for the typed-css declaration generator.

This module provides tokenization of generated CSS-module JavaScript.
"""

from .tokens import TokenType, Token, SINGLE_CHAR_OPS, QUOTES
from .lexer import Lexer

__all__ = [
    'TokenType',
    'Token',
    'SINGLE_CHAR_OPS',
    'QUOTES',
    'Lexer',
]
