"""
Diagnostic system for the interactive shell.

Collects and reports problems found while tokenizing input lines:
integer literals that overflow and lines containing illegal characters.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from ..lexer import LexerError


class DiagnosticSeverity(Enum):
    """Severity levels for shell diagnostics."""
    ERROR = 'error'
    WARNING = 'warning'


@dataclass
class Diagnostic:
    """A single diagnostic message."""
    severity: DiagnosticSeverity
    code: str
    message: str
    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        if self.line is not None:
            location = f'{self.line}:{self.column}' if self.column is not None else f'{self.line}'
            return f'[{self.severity.value}] {location}: {self.message} ({self.code})'
        return f'[{self.severity.value}] {self.message} ({self.code})'


class ReplDiagnostics:
    """
    Collects diagnostics while the shell tokenizes input.

    Usage:
        diag = ReplDiagnostics()
        try:
            tokens = repl.line(text)
        except LexerError as err:
            diag.error_integer_overflow(err)
        diag.print_summary()
    """

    def __init__(self, verbose: bool = False):
        self._diagnostics: List[Diagnostic] = []
        self._verbose = verbose

    @property
    def diagnostics(self) -> List[Diagnostic]:
        """Get all collected diagnostics."""
        return list(self._diagnostics)

    @property
    def errors(self) -> List[Diagnostic]:
        """Get only error-level diagnostics."""
        return [d for d in self._diagnostics if d.severity == DiagnosticSeverity.ERROR]

    @property
    def count(self) -> int:
        return len(self._diagnostics)

    def clear(self) -> None:
        self._diagnostics.clear()

    def error_integer_overflow(self, error: LexerError, line: Optional[int] = None) -> Diagnostic:
        """
        Record an integer literal that was too large to tokenize.

        ``line`` overrides the lexer's own line number, for callers that
        tokenize input one line at a time.
        """
        diagnostic = Diagnostic(
            severity=DiagnosticSeverity.ERROR,
            code='E001',
            message=error.message,
            line=line if line is not None else error.line,
            column=error.column,
        )
        self._diagnostics.append(diagnostic)
        return diagnostic

    def warn_illegal_character(self, count: int, line: Optional[int] = None) -> Diagnostic:
        """Record that a line produced one or more Illegal tokens."""
        diagnostic = Diagnostic(
            severity=DiagnosticSeverity.WARNING,
            code='W001',
            message=f'{count} illegal character(s) in input',
            line=line,
        )
        self._diagnostics.append(diagnostic)
        return diagnostic

    def print_summary(self, file=None) -> None:
        """Print a summary of all diagnostics to stderr (or specified file)."""
        if file is None:
            file = sys.stderr

        if not self._diagnostics:
            return

        errors = self.errors
        warnings = [d for d in self._diagnostics if d.severity == DiagnosticSeverity.WARNING]

        if errors:
            print(f'\nLexer errors ({len(errors)}):', file=file)
            for d in errors:
                print(f'  {d}', file=file)

        if warnings and self._verbose:
            print(f'\nLexer warnings ({len(warnings)}):', file=file)
            for d in warnings:
                print(f'  {d}', file=file)

    def get_summary(self) -> str:
        """Get a one-line summary of all diagnostics."""
        if not self._diagnostics:
            return 'No lexer diagnostics.'
        errors = len(self.errors)
        warnings = self.count - errors
        return f'Lexer diagnostics: {errors} error(s), {warnings} warning(s)'
