"""
Lexer implementation for interpreter source code.

The Lexer turns source text into a lazy stream of tokens that can be
consumed one at a time by a parser, or drained into a list.
"""

from typing import Callable, Iterator, List, Optional

from .tokens import (
    Token,
    TokenType,
    DIGITS,
    LETTERS,
    MAX_INTEGER,
    SINGLE_CHAR_TOKENS,
    TWO_CHAR_TOKENS,
    WHITESPACE,
    lookup_keyword,
)


_MAX_INTEGER_DIGITS = len(str(MAX_INTEGER))


class LexerError(Exception):
    """Raised when a lexeme is recognized but cannot be turned into a token."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column


class IntegerOverflowError(LexerError):
    """An integer literal does not fit in an unsigned 64-bit value."""

    def __init__(self, literal: str, line: Optional[int] = None, column: Optional[int] = None):
        shown = literal if len(literal) <= 40 else f'{literal[:20]}... ({len(literal)} digits)'
        super().__init__(
            f'integer literal {shown} exceeds maximum value {MAX_INTEGER}',
            line,
            column,
        )
        self.literal = literal


class Lexer:
    """
    Lexer for interpreter source code.

    Single-pass and forward-only: each call to next_token() scans one
    token, and once the input is exhausted no further tokens are produced.
    Line and column are kept for error reporting only; tokens never carry
    a position.

    Usage:
        lexer = Lexer('let five = 5;')
        for token in lexer:
            print(repr(token))
    """

    def __init__(self, source: str):
        self.source = source
        self.pos = 0
        self.line = 1
        self.column = 1
        self._done = False

    @property
    def exhausted(self) -> bool:
        """True once the end of input has been reported."""
        return self._done

    def peek(self) -> str:
        """Look at the next character without consuming it."""
        if self.pos >= len(self.source):
            return ''
        return self.source[self.pos]

    def advance(self) -> str:
        """Consume and return the current character."""
        ch = self.peek()
        if not ch:
            return ch
        self.pos += 1
        if ch == '\n':
            self.line += 1
            self.column = 1
        else:
            self.column += 1
        return ch

    def skip_whitespace(self) -> None:
        """Skip over whitespace characters."""
        while self.peek() in WHITESPACE:
            self.advance()

    def read_while(self, first: str, accept: Callable[[str], bool]) -> str:
        """Read ``first`` plus the longest following run of accepted characters."""
        result = first
        while self.peek() and accept(self.peek()):
            result += self.advance()
        return result

    def read_integer(self, first: str, line: int, column: int) -> Token:
        """Read a decimal integer literal (first digit already consumed)."""
        literal = self.read_while(first, DIGITS.__contains__)
        # Reject long runs before int(), which refuses very long strings
        significant = literal.lstrip('0')
        if len(significant) > _MAX_INTEGER_DIGITS:
            raise IntegerOverflowError(literal, line, column)
        value = int(significant or '0')
        if value > MAX_INTEGER:
            raise IntegerOverflowError(literal, line, column)
        return Token.integer(value)

    def read_word(self, first: str) -> Token:
        """Read an identifier or keyword (first letter already consumed)."""
        word = self.read_while(first, LETTERS.__contains__)
        keyword = lookup_keyword(word)
        if keyword is not None:
            return keyword
        return Token.identifier(word)

    def next_token(self) -> Optional[Token]:
        """
        Scan and return the next token.

        Returns:
            The next Token, or None once the input is exhausted.

        Raises:
            IntegerOverflowError: an integer literal is too large. The
                digits are consumed, so scanning may continue afterwards.
        """
        if self._done:
            return None

        self.skip_whitespace()

        start_line = self.line
        start_col = self.column
        ch = self.advance()

        if not ch:
            self._done = True
            return None

        if ch in SINGLE_CHAR_TOKENS:
            return SINGLE_CHAR_TOKENS[ch]

        # '!' / '!=' and '=' / '=='
        if ch in TWO_CHAR_TOKENS:
            single, double = TWO_CHAR_TOKENS[ch]
            if self.peek() == '=':
                self.advance()
                return double
            return single

        if ch in DIGITS:
            return self.read_integer(ch, start_line, start_col)

        if ch in LETTERS:
            return self.read_word(ch)

        return Token(TokenType.ILLEGAL)

    def tokenize(self) -> List[Token]:
        """
        Tokenize the remaining source and return the tokens as a list.

        Returns:
            List of Token objects in source order. Empty for blank input.
        """
        return list(self)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token
