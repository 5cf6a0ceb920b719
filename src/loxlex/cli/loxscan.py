"""
loxscan - Lox Token Dump Command-Line Interface
===============================================

Scans a Lox source file and prints the resulting token stream. Useful for
checking what the parser will see and for spotting lexical errors.

Usage Examples
--------------
Dump tokens, one per line:
    $ loxscan script.lox

Read from stdin:
    $ echo '(+-)' | loxscan -

JSON output:
    $ loxscan --json script.lox

Scanner dialect:
    $ loxscan --no-block-comments --no-exponent script.lox

Scanner defaults can also come from the environment, see
ScannerOptions.from_env(). Command-line flags win.
"""

import json
import logging
import sys
from pathlib import Path

import click

from loxlex import __version__
from loxlex.cli.errors import ExitCode, handle_cli_exception
from loxlex.errors import ErrorCollector
from loxlex.scanner import Scanner, ScannerOptions

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def read_source(input_file: Path) -> tuple[str, str]:
    """Return (source, display name), reading stdin for '-'."""
    if str(input_file) == "-":
        return sys.stdin.read(), "<stdin>"
    return input_file.read_text(encoding="utf-8"), str(input_file)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "--json", "as_json",
    is_flag=True,
    help="Print tokens as a JSON array",
)
@click.option(
    "--no-block-comments",
    is_flag=True,
    help="Treat /* like // (skip to end of line only)",
)
@click.option(
    "--no-exponent",
    is_flag=True,
    help="Scan ** as two STAR tokens",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(
    input_file: Path,
    as_json: bool,
    no_block_comments: bool,
    no_exponent: bool,
    verbose: bool,
) -> None:
    """
    Print the tokens of a Lox source file.

    INPUT_FILE is the Lox source file to scan, or - for stdin.

    Lexical errors are printed to stderr after the tokens, and the exit
    status is 1 when any were found.

    \b
    Examples:
        loxscan script.lox           # One token per line
        loxscan --json script.lox    # JSON array of tokens
        cat script.lox | loxscan -   # Read from stdin
    """
    setup_logging(verbose)

    options = ScannerOptions.from_env()
    if no_block_comments:
        options.block_comments = False
    if no_exponent:
        options.exponent_operator = False

    try:
        source, name = read_source(input_file)
        logger.debug("options: %s", options)

        collector = ErrorCollector(source, name)
        tokens = Scanner(source, reporter=collector, options=options, filename=name).scan_tokens()

        if as_json:
            click.echo(json.dumps([token.to_dict() for token in tokens], indent=2))
        else:
            for token in tokens:
                click.echo(str(token))

        collector.raise_if_errors()

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)

    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
