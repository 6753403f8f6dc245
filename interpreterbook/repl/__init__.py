"""
Interactive shell module for the interpreter.

This module provides the read-tokenize-print loop and its diagnostics.
"""

from .diagnostics import Diagnostic, DiagnosticSeverity, ReplDiagnostics
from .repl import PROMPT, Repl, main, print_tokens

__all__ = [
    'Diagnostic',
    'DiagnosticSeverity',
    'ReplDiagnostics',
    'PROMPT',
    'Repl',
    'main',
    'print_tokens',
]
