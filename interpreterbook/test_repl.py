#!/usr/bin/env python3
"""
Unit tests for the interactive shell.

Run with: python3 -m pytest interpreterbook/test_repl.py
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import io
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout

from interpreterbook.lexer import IntegerOverflowError, MAX_INTEGER, Token, TokenType
from interpreterbook.repl import (
    DiagnosticSeverity,
    PROMPT,
    Repl,
    ReplDiagnostics,
    main,
)


OVERFLOW = str(MAX_INTEGER + 1)


class TestReplLine(unittest.TestCase):
    """Test tokenizing a single line."""

    def test_line_returns_tokens(self):
        self.assertEqual(Repl().line('let x = 5;'), [
            Token(TokenType.LET),
            Token.identifier('x'),
            Token(TokenType.ASSIGN),
            Token.integer(5),
            Token(TokenType.SEMICOLON),
        ])

    def test_line_overflow_raises(self):
        with self.assertRaises(IntegerOverflowError):
            Repl().line(OVERFLOW)


class TestReplRun(unittest.TestCase):
    """Test the read-tokenize-print loop."""

    def run_repl(self, text, **kwargs):
        repl = Repl(**kwargs)
        stdout, stderr = io.StringIO(), io.StringIO()
        status = repl.run(io.StringIO(text), stdout, stderr)
        return repl, status, stdout.getvalue(), stderr.getvalue()

    def test_prints_token_reprs_one_per_line(self):
        _, status, out, err = self.run_repl('let five = 5;\n')
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [
            PROMPT,
            'Let',
            'Identifier("five")',
            'Assign',
            'IntegerLiteral(5)',
            'Semicolon',
            PROMPT,
        ])
        self.assertEqual(err, '')

    def test_stops_at_end_of_input(self):
        _, status, out, _ = self.run_repl('')
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [PROMPT])

    def test_blank_line_prints_nothing(self):
        _, _, out, _ = self.run_repl('\n\n')
        self.assertEqual(out.splitlines(), [PROMPT, PROMPT, PROMPT])

    def test_custom_prompt(self):
        _, _, out, _ = self.run_repl('1\n', prompt='monkey>')
        self.assertEqual(out.splitlines(), ['monkey>', 'IntegerLiteral(1)', 'monkey>'])

    def test_overflow_reported_and_loop_continues(self):
        repl, status, out, err = self.run_repl(f'{OVERFLOW}\n2\n')
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [PROMPT, PROMPT, 'IntegerLiteral(2)', PROMPT])
        self.assertIn('(E001)', err)
        self.assertIn('[error] 1:1:', err)
        self.assertEqual(len(repl.diagnostics.errors), 1)

    def test_overflow_line_number_tracks_input(self):
        _, _, _, err = self.run_repl(f'1\n2\n  {OVERFLOW}\n')
        self.assertIn('[error] 3:3:', err)

    def test_warn_illegal(self):
        repl, _, out, err = self.run_repl('a @ #\n', warn_illegal=True)
        self.assertIn('Illegal', out)
        self.assertIn('2 illegal character(s)', err)
        self.assertEqual(repl.diagnostics.diagnostics[0].severity, DiagnosticSeverity.WARNING)

    def test_very_long_literal_does_not_stop_loop(self):
        repl, status, out, err = self.run_repl('9' * 5000 + '\n1\n')
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [PROMPT, PROMPT, 'IntegerLiteral(1)', PROMPT])
        self.assertIn('(E001)', err)
        self.assertEqual(len(repl.diagnostics.errors), 1)

    def test_tokens_around_overflow_are_printed(self):
        _, _, out, err = self.run_repl(f'x + {OVERFLOW} + y\n')
        self.assertEqual(out.splitlines(), [
            PROMPT,
            'Identifier("x")',
            'Plus',
            'Plus',
            'Identifier("y")',
            PROMPT,
        ])
        self.assertIn('[error] 1:5:', err)

    def test_interactive_matches_command_output(self):
        source = f'x + {OVERFLOW} + y'
        _, _, interactive, _ = self.run_repl(source + '\n')
        stdout = io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(io.StringIO()):
            main(['-c', source])
        self.assertEqual(interactive.splitlines()[1:-1], stdout.getvalue().splitlines())

    def test_illegal_silent_by_default(self):
        _, _, _, err = self.run_repl('@\n')
        self.assertEqual(err, '')


class TestReplDiagnostics(unittest.TestCase):
    """Test diagnostic collection and formatting."""

    def test_empty_summary(self):
        diag = ReplDiagnostics()
        self.assertEqual(diag.count, 0)
        self.assertEqual(diag.get_summary(), 'No lexer diagnostics.')
        out = io.StringIO()
        diag.print_summary(out)
        self.assertEqual(out.getvalue(), '')

    def test_summary_counts(self):
        diag = ReplDiagnostics(verbose=True)
        diag.error_integer_overflow(IntegerOverflowError(OVERFLOW, 4, 2))
        diag.warn_illegal_character(3)
        self.assertEqual(diag.get_summary(), 'Lexer diagnostics: 1 error(s), 1 warning(s)')
        self.assertEqual(str(diag.errors[0]), f'[error] 4:2: {diag.errors[0].message} (E001)')
        self.assertEqual(str(diag.diagnostics[1]), '[warning] 3 illegal character(s) in input (W001)')

        out = io.StringIO()
        diag.print_summary(out)
        self.assertIn('Lexer errors (1):', out.getvalue())
        self.assertIn('Lexer warnings (1):', out.getvalue())

        diag.clear()
        self.assertEqual(diag.count, 0)


class TestMain(unittest.TestCase):
    """Test the command line interface."""

    def call_main(self, argv):
        stdout, stderr = io.StringIO(), io.StringIO()
        with redirect_stdout(stdout), redirect_stderr(stderr):
            status = main(argv)
        return status, stdout.getvalue(), stderr.getvalue()

    def test_command(self):
        status, out, err = self.call_main(['-c', '10 != 9'])
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), ['IntegerLiteral(10)', 'NotEqual', 'IntegerLiteral(9)'])
        self.assertEqual(err, '')

    def test_command_overflow_continues_and_fails(self):
        status, out, err = self.call_main(['-c', f'{OVERFLOW};'])
        self.assertEqual(status, 1)
        self.assertEqual(out.splitlines(), ['Semicolon'])
        self.assertIn('(E001)', err)

    def test_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'prog.monkey')
            with open(path, 'w') as f:
                f.write('let x = 1;\nreturn x;\n')
            status, out, _ = self.call_main([path])
        self.assertEqual(status, 0)
        self.assertEqual(out.splitlines(), [
            'Let', 'Identifier("x")', 'Assign', 'IntegerLiteral(1)', 'Semicolon',
            'Return', 'Identifier("x")', 'Semicolon',
        ])

    def test_undecodable_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'prog.monkey')
            with open(path, 'wb') as f:
                f.write(b'let x = \xff\xfe;\n')
            status, out, err = self.call_main([path])
        self.assertEqual(status, 1)
        self.assertEqual(out, '')
        self.assertIn('cannot read', err)

    def test_missing_file(self):
        status, _, err = self.call_main(['/nonexistent/prog.monkey'])
        self.assertEqual(status, 1)
        self.assertIn('is not a valid file', err)


if __name__ == '__main__':
    unittest.main(verbosity=2)
