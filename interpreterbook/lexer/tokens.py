"""
Token definitions for the interpreter lexer.

This module contains the TokenType enum, the Token dataclass, and the
static lookup tables for keywords, operators, and delimiters.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Tuple, Union


# Integer literals are unsigned 64-bit values.
MAX_INTEGER = 2 ** 64 - 1


class TokenType(Enum):
    """Enumeration of every lexical category recognized by the lexer."""

    # Keywords
    LET = 'Let'
    FUNCTION = 'Function'
    TRUE = 'True'
    FALSE = 'False'
    IF = 'If'
    ELSE = 'Else'
    RETURN = 'Return'

    # Operators
    EQUAL = 'Equal'
    NOT_EQUAL = 'NotEqual'
    ASSIGN = 'Assign'
    PLUS = 'Plus'
    MINUS = 'Minus'
    BANG = 'Bang'
    ASTERISK = 'Asterisk'
    SLASH = 'Slash'
    LESS_THAN = 'LessThan'
    GREATER_THAN = 'GreaterThan'

    # Delimiters
    COMMA = 'Comma'
    SEMICOLON = 'Semicolon'
    LEFT_PAREN = 'LeftParen'
    RIGHT_PAREN = 'RightParen'
    LEFT_BRACE = 'LeftBrace'
    RIGHT_BRACE = 'RightBrace'

    # Literals
    IDENTIFIER = 'Identifier'
    INTEGER_LITERAL = 'IntegerLiteral'

    # Special
    ILLEGAL = 'Illegal'


@dataclass(frozen=True)
class Token:
    """
    A single classified lexical unit.

    Only IDENTIFIER (str) and INTEGER_LITERAL (int) carry a value; every
    other type has ``value`` set to None.
    """
    type: TokenType
    value: Union[str, int, None] = None

    def __post_init__(self):
        if self.type == TokenType.IDENTIFIER:
            if not isinstance(self.value, str) or not self.value:
                raise ValueError(f'Identifier needs a non-empty name, got {self.value!r}')
        elif self.type == TokenType.INTEGER_LITERAL:
            if not isinstance(self.value, int) or isinstance(self.value, bool):
                raise ValueError(f'IntegerLiteral needs an int value, got {self.value!r}')
            if not 0 <= self.value <= MAX_INTEGER:
                raise ValueError(f'integer literal out of range: {self.value}')
        elif self.value is not None:
            raise ValueError(f'{self.type.value} takes no value, got {self.value!r}')

    @classmethod
    def identifier(cls, name: str) -> 'Token':
        return cls(TokenType.IDENTIFIER, name)

    @classmethod
    def integer(cls, value: int) -> 'Token':
        return cls(TokenType.INTEGER_LITERAL, value)

    @property
    def is_keyword(self) -> bool:
        return self.type in _KEYWORD_TYPES

    def __repr__(self) -> str:
        if self.type == TokenType.IDENTIFIER:
            return f'{self.type.value}("{self.value}")'
        if self.type == TokenType.INTEGER_LITERAL:
            return f'{self.type.value}({self.value})'
        return self.type.value


# Reserved word to Token mapping, read-only after import
KEYWORDS: Mapping[str, Token] = MappingProxyType({
    'true': Token(TokenType.TRUE),
    'false': Token(TokenType.FALSE),
    'fn': Token(TokenType.FUNCTION),
    'let': Token(TokenType.LET),
    'if': Token(TokenType.IF),
    'else': Token(TokenType.ELSE),
    'return': Token(TokenType.RETURN),
})

_KEYWORD_TYPES = frozenset(token.type for token in KEYWORDS.values())


def lookup_keyword(text: str) -> Optional[Token]:
    """Return the reserved-word token for ``text``, or None if it is not one."""
    return KEYWORDS.get(text)


# Operators whose meaning depends on whether '=' follows:
# first char -> (token alone, token when followed by '=')
TWO_CHAR_TOKENS: Mapping[str, Tuple[Token, Token]] = MappingProxyType({
    '!': (Token(TokenType.BANG), Token(TokenType.NOT_EQUAL)),
    '=': (Token(TokenType.ASSIGN), Token(TokenType.EQUAL)),
})

# Single-character operators and delimiters
SINGLE_CHAR_TOKENS: Mapping[str, Token] = MappingProxyType({
    '*': Token(TokenType.ASTERISK),
    '/': Token(TokenType.SLASH),
    '<': Token(TokenType.LESS_THAN),
    '>': Token(TokenType.GREATER_THAN),
    '-': Token(TokenType.MINUS),
    '+': Token(TokenType.PLUS),
    ',': Token(TokenType.COMMA),
    ';': Token(TokenType.SEMICOLON),
    '(': Token(TokenType.LEFT_PAREN),
    ')': Token(TokenType.RIGHT_PAREN),
    '{': Token(TokenType.LEFT_BRACE),
    '}': Token(TokenType.RIGHT_BRACE),
})

WHITESPACE = frozenset(' \t\r\n')
DIGITS = frozenset('0123456789')
LETTERS = frozenset('abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ')
