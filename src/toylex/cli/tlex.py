"""
tlex - Scanner Command-Line Interface
=====================================

Scans a toy language source file and prints one line per token, in the
trace format of ``toylex.tokens.format_token``:

    Token(FUNC, 'func', L1, C1)
    Token(IDENTIFIER, 'main', L1, C6)
    ...
    Token(EOF, NULL, L3, C2)

Usage Examples
--------------
Print the tokens of a file:
    $ tlex program.toy

Keep scanning past lexical errors:
    $ tlex --continue-on-error program.toy

Only check for lexical errors:
    $ tlex -q program.toy

Exit Codes
----------
0 - No lexical errors
1 - Lexical errors found
2 - Invalid arguments or unreadable input file
3 - Internal error
"""

import logging
import sys
from pathlib import Path

import click

from toylex import __version__
from toylex.cli.errors import ExitCode, handle_cli_exception
from toylex.errors import LexicalError
from toylex.lexer import Lexer
from toylex.source import read_source
from toylex.tokens import format_token

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def echo_diagnostic(error: LexicalError) -> None:
    """Reporter printing each lexical error to stderr."""
    click.echo(str(error), err=True)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--continue-on-error",
    is_flag=True,
    help="Keep scanning after a lexical error instead of stopping",
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Do not print tokens, only diagnostics",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="tlex")
def main(
    input_file: Path,
    continue_on_error: bool,
    quiet: bool,
    verbose: bool,
) -> None:
    """
    Print the tokens of a toy language source file.

    INPUT_FILE is the source file to scan.

    By default scanning stops at the end of the file or at the first
    lexical error, whichever comes first.

    \b
    Examples:
        tlex prog.toy                      # Print all tokens
        tlex --continue-on-error prog.toy  # Report every error
        tlex -q prog.toy                   # Diagnostics only
    """
    setup_logging(verbose)

    try:
        source, length = read_source(input_file)
        logger.debug(f"Scanning {input_file} ({length} bytes)")

        lexer = Lexer(source, str(input_file), reporter=echo_diagnostic)

        token_count = 0
        for token in lexer.tokenize(stop_on_error=not continue_on_error):
            token_count += 1
            if not quiet:
                click.echo(format_token(token))

        logger.debug(f"Produced {token_count} tokens, {lexer.error_count} errors")

    except Exception as e:
        handle_cli_exception(e, verbose)

    if lexer.error_count:
        sys.exit(ExitCode.LEXICAL_ERROR)


if __name__ == "__main__":
    main()
