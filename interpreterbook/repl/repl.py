"""
Interactive shell for the interpreter.

Reads source one line at a time, tokenizes each line with a fresh Lexer,
and prints every token's debug representation on its own line. Can also
tokenize a single command string or a whole file and exit.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from ..lexer import IntegerOverflowError, Lexer, Token, TokenType
from .diagnostics import Diagnostic, ReplDiagnostics


PROMPT = '>>'


class Repl:
    """
    Read-tokenize-print loop.

    Usage:
        repl = Repl()
        repl.line('let five = 5;')   # -> [Let, Identifier("five"), ...]
        repl.run()                   # interactive loop over stdin
    """

    def __init__(
        self,
        prompt: str = PROMPT,
        diagnostics: Optional[ReplDiagnostics] = None,
        warn_illegal: bool = False,
    ):
        self.prompt = prompt
        self.diagnostics = diagnostics or ReplDiagnostics()
        self.warn_illegal = warn_illegal

    def line(self, text: str) -> List[Token]:
        """
        Tokenize a single line of input.

        Raises:
            IntegerOverflowError: the line contains an integer literal
                that does not fit in 64 bits.
        """
        return Lexer(text).tokenize()

    def tokenize_source(self, source: str) -> List[Token]:
        """
        Tokenize a whole source text, recording overflow errors as
        diagnostics and continuing past them.
        """
        tokens, _ = self._scan(source)
        return tokens

    def _scan(self, source: str, line: Optional[int] = None) -> Tuple[List[Token], List[Diagnostic]]:
        """Drain a fresh Lexer, returning its tokens and the diagnostics it raised."""
        lexer = Lexer(source)
        tokens: List[Token] = []
        reported: List[Diagnostic] = []
        while True:
            try:
                token = lexer.next_token()
            except IntegerOverflowError as err:
                reported.append(self.diagnostics.error_integer_overflow(err, line))
                continue
            if token is None:
                break
            tokens.append(token)
        warning = self._check_illegal(tokens, line)
        if warning is not None:
            reported.append(warning)
        return tokens, reported

    def _check_illegal(self, tokens: List[Token], line: Optional[int] = None):
        if not self.warn_illegal:
            return None
        illegal = sum(1 for t in tokens if t.type == TokenType.ILLEGAL)
        if illegal:
            return self.diagnostics.warn_illegal_character(illegal, line)
        return None

    def run(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> int:
        """
        Run the interactive loop until end of input or Ctrl-C.

        Returns:
            Exit status (always 0; errors are reported and the loop goes on).
        """
        stdin = stdin or sys.stdin
        stdout = stdout or sys.stdout
        stderr = stderr or sys.stderr

        line_number = 0
        try:
            while True:
                print(self.prompt, file=stdout, flush=True)
                text = stdin.readline()
                # readline() returns '' only at end of input
                if not text:
                    break
                line_number += 1

                tokens, reported = self._scan(text, line_number)
                for diagnostic in reported:
                    print(diagnostic, file=stderr)
                print_tokens(tokens, stdout)
        except KeyboardInterrupt:
            print(file=stdout)

        return 0


def print_tokens(tokens: List[Token], file: Optional[TextIO] = None) -> None:
    """Print each token's debug representation on its own line."""
    for token in tokens:
        print(repr(token), file=file or sys.stdout)


# =============================================================================
# CLI INTERFACE
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Interpreter lexer shell')
    parser.add_argument('file', nargs='?', help="Source file to tokenize ('-' for stdin)")
    parser.add_argument('-c', '--command', metavar='SOURCE', help='Tokenize SOURCE and exit')
    parser.add_argument('--prompt', default=PROMPT, help='Prompt printed before each line')
    parser.add_argument('-w', '--warn-illegal', action='store_true',
                        help='Warn about lines containing illegal characters')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Print a diagnostic summary on exit')

    args = parser.parse_args(argv)

    diagnostics = ReplDiagnostics(verbose=args.verbose)
    repl = Repl(args.prompt, diagnostics, warn_illegal=args.warn_illegal)

    if args.command is None and args.file is None:
        status = repl.run()
        if args.verbose:
            diagnostics.print_summary()
        return status

    if args.command is not None:
        source = args.command
    elif args.file == '-':
        source = sys.stdin.read()
    else:
        input_path = Path(args.file)
        if not input_path.is_file():
            print(f"Error: {args.file} is not a valid file", file=sys.stderr)
            return 1
        try:
            source = input_path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as err:
            print(f"Error: cannot read {args.file}: {err}", file=sys.stderr)
            return 1

    print_tokens(repl.tokenize_source(source))

    if args.verbose:
        diagnostics.print_summary()
    else:
        for d in diagnostics.diagnostics:
            print(d, file=sys.stderr)

    return 1 if diagnostics.errors else 0


if __name__ == '__main__':
    sys.exit(main())
