"""
jacktok Failure Reporting
=========================

Turns whatever stopped a ``jacktok`` run into one stderr report and a
process exit status.

| Failure                                  | Exit | Report                          |
|------------------------------------------|------|---------------------------------|
| lexical error in the Jack source         | 1    | the diagnostic, caret and hint  |
| bad or missing source path argument      | 2    | ``Error: <reason>``             |
| source unreadable or output unwritable   | 2    | ``Error: <path>: <reason>``     |
| source not decodable in the encoding     | 2    | ``Error: source is not valid``  |
| anything else                            | 3    | ``Internal error: <reason>``    |

With ``--verbose`` an internal error also prints its traceback.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click

from jack_tokenizer.errors import JackError


class ExitCode(IntEnum):
    """Process exit status of ``jacktok``."""
    SUCCESS = 0
    LEX_ERROR = 1
    INVALID_ARGS = 2
    INTERNAL_ERROR = 3


def describe_failure(error: Exception) -> tuple[ExitCode, str]:
    """
    Choose the exit status and stderr report for an exception.

    Returns:
        (exit code, message) pair; the message has no trailing newline
    """
    if isinstance(error, JackError):
        # Lexical diagnostics carry their own "file:line:col: error:" prefix
        return ExitCode.LEX_ERROR, str(error)

    if isinstance(error, click.BadParameter):
        return ExitCode.INVALID_ARGS, f"Error: {error.format_message()}"

    if isinstance(error, OSError):
        reason = error.strerror or str(error)
        if error.filename is not None:
            return ExitCode.INVALID_ARGS, f"Error: {error.filename}: {reason}"
        return ExitCode.INVALID_ARGS, f"Error: {reason}"

    if isinstance(error, UnicodeDecodeError):
        return (
            ExitCode.INVALID_ARGS,
            f"Error: source is not valid {error.encoding} text "
            f"(byte offset {error.start})",
        )

    return ExitCode.INTERNAL_ERROR, f"Internal error: {error}"


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """Report ``error`` on stderr and exit with its status."""
    code, message = describe_failure(error)
    click.echo(message, err=True)
    if code is ExitCode.INTERNAL_ERROR and verbose:
        traceback.print_exception(type(error), error, error.__traceback__)
    sys.exit(code)
