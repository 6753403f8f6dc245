"""
Lexer module for the interpreter.

This module provides tokenization of interpreter source code.
"""

from .tokens import (
    TokenType,
    Token,
    KEYWORDS,
    MAX_INTEGER,
    SINGLE_CHAR_TOKENS,
    TWO_CHAR_TOKENS,
    lookup_keyword,
)
from .lexer import Lexer, LexerError, IntegerOverflowError

__all__ = [
    'TokenType',
    'Token',
    'KEYWORDS',
    'MAX_INTEGER',
    'SINGLE_CHAR_TOKENS',
    'TWO_CHAR_TOKENS',
    'lookup_keyword',
    'Lexer',
    'LexerError',
    'IntegerOverflowError',
]
