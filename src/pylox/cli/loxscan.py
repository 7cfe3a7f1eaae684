"""
loxscan - Lox Scanner Command-Line Interface
============================================

Scans Lox source and prints one token per line. Lexical errors go to
stderr as ``[line N] Error: message``.

Usage Examples
--------------
Scan a file:
    $ loxscan hello.lox

Interactive prompt (an empty line or Ctrl-D quits):
    $ loxscan
    > print 1 + 2;
    PRINT print
    NUMBER 1 1.0
    ...

Debugging representation:
    $ loxscan --format repr hello.lox
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

import click

from pylox import __version__
from pylox.cli.errors import ConsoleReporter, ExitCode, handle_cli_exception
from pylox.config import TOKEN_FORMATS, ScanConfig
from pylox.scanner import Scanner, Token

logger = logging.getLogger(__name__)


# =============================================================================
# Scan Helpers
# =============================================================================

def format_token(token: Token, token_format: str) -> str:
    """Render a token for output in the chosen format."""
    if token_format == "repr":
        return repr(token)
    return str(token)


def run(source: Union[str, bytes], reporter: ConsoleReporter, config: ScanConfig) -> int:
    """
    Scan one source unit and print its tokens.

    Returns:
        Number of tokens printed (EOF included)
    """
    scanner = Scanner(source, reporter)
    count = 0
    for token in scanner.tokens():
        click.echo(format_token(token, config.token_format))
        count += 1

    if config.verbose:
        click.echo(
            f"Scanned {count} tokens, {len(scanner.errors)} errors, {scanner.line} lines",
            err=True,
        )
    return count


def run_file(path: Path, config: ScanConfig) -> bool:
    """
    Scan a whole file.

    The file is read as UTF-8 text.

    Returns:
        True if any lexical error was reported
    """
    logger.debug("scanning %s", path)
    reporter = ConsoleReporter()
    run(path.read_text(encoding="utf-8"), reporter, config)
    return reporter.had_error


def run_prompt(config: ScanConfig) -> None:
    """
    Read-scan-print loop.

    Each line is scanned on its own. Errors are printed but never end the
    session; an empty line or end of input does.
    """
    stdin = click.get_text_stream("stdin")
    reporter = ConsoleReporter()

    while True:
        click.echo(config.prompt, nl=False)
        line = stdin.readline()
        if not line.rstrip("\n"):
            if not line:
                click.echo()
            break

        run(line.rstrip("\n"), reporter, config)
        reporter.reset()


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "script",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-f", "--format", "token_format",
    type=click.Choice(TOKEN_FORMATS),
    default=None,
    help="Token output style (default: display, or $PYLOX_TOKEN_FORMAT)",
)
@click.option(
    "--keep-going",
    is_flag=True,
    help="Exit with status 0 even if lexical errors were reported",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="loxscan")
def main(
    script: Optional[Path],
    token_format: Optional[str],
    keep_going: bool,
    verbose: bool,
) -> None:
    """
    Scan Lox source code and print its tokens.

    SCRIPT is the Lox source file to scan. Without it, loxscan reads
    lines from an interactive prompt.

    \b
    Examples:
        loxscan hello.lox              # Scan a file
        loxscan                        # Interactive prompt
        loxscan -f repr hello.lox      # Debugging output
        loxscan --keep-going bad.lox   # Report errors, exit 0
    """
    config = ScanConfig.from_env()
    if token_format is not None:
        config.token_format = token_format
    config.keep_going = config.keep_going or keep_going
    config.verbose = config.verbose or verbose
    config.setup_logging()

    try:
        if script is None:
            run_prompt(config)
            return
        had_error = run_file(script, config)
    except Exception as e:
        handle_cli_exception(e, verbose=config.verbose)

    if had_error and not config.keep_going:
        sys.exit(ExitCode.SCAN_ERROR)


if __name__ == "__main__":
    main()
