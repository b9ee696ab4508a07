"""
Unified CLI Error Handling
==========================

Provides consistent error reporting and exit codes for the stc commands.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from stc.errors import STCError


class ExitCode(IntEnum):
    """Standard exit codes for the CLI."""
    SUCCESS = 0
    COMPILE_ERROR = 1    # Lexer or parser failure
    INVALID_ARGS = 2     # Invalid arguments or missing files
    INTERNAL_ERROR = 3   # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Report an exception on stderr and exit with the matching code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    if isinstance(error, STCError):
        # Compiler errors already carry the "error:" prefix
        click.echo(str(error), err=True)
        sys.exit(ExitCode.COMPILE_ERROR)

    elif isinstance(error, (click.BadParameter, OSError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.INVALID_ARGS)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
