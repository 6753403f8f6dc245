"""
Interpreter front end

This package provides the lexer for a small C-like scripting language
and an interactive shell that prints the tokens of each input line.

Module Structure:
- lexer/: Tokenization (TokenType, Token, KEYWORDS, Lexer)
- repl/: Interactive shell and diagnostics (Repl, ReplDiagnostics)

Usage:
    from interpreterbook.lexer import Lexer

    tokens = Lexer('let five = 5;').tokenize()
"""

from .lexer import Lexer, LexerError, IntegerOverflowError, Token, TokenType
from .repl import Repl

__all__ = [
    'Lexer',
    'LexerError',
    'IntegerOverflowError',
    'Token',
    'TokenType',
    'Repl',
]
