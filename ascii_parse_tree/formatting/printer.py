"""
Convenience printer for parse results.
"""

import logging
import sys
from typing import Optional, Sequence, TextIO, Union

from ascii_parse_tree.errors import FormatError
from ascii_parse_tree.formatting.formatter import as_ascii_tree
from ascii_parse_tree.models import ParseNode

logger = logging.getLogger(__name__)

ParseResult = Union[Sequence[ParseNode], BaseException]


def _emit(message: object, stream: TextIO) -> bool:
    """Print a message, returning False when the stream refuses it."""
    try:
        print(message, file=stream)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to write to {getattr(stream, 'name', 'stream')}: {e}")
        return False
    return True


def print_as_ascii_tree(
    result: ParseResult,
    out: Optional[TextIO] = None,
    err: Optional[TextIO] = None,
) -> None:
    """
    Print the result of a parse.

    A parse error or a formatting error is printed to ``err``; otherwise the
    ASCII tree is printed to ``out``. A stream that cannot be written to is
    reported on ``err`` when possible and logged otherwise. Nothing is raised
    and nothing is returned. For assertions in unit tests use
    ``as_ascii_tree`` instead.

    Args:
        result: The parse forest, or the exception the parse raised
        out: Output stream, defaults to the current ``sys.stdout``
        err: Diagnostic stream, defaults to the current ``sys.stderr``
    """
    out = out if out is not None else sys.stdout
    err = err if err is not None else sys.stderr

    if isinstance(result, BaseException):
        logger.debug(f"Parse failed: {type(result).__name__}")
        _emit(result, err)
        return

    try:
        output = as_ascii_tree(result)
    except FormatError as e:
        logger.warning(f"Failed to format parse tree: {e}")
        _emit(e, err)
        return

    try:
        print(output, file=out)
    except (OSError, ValueError) as e:
        _emit(FormatError(f"Failed to write tree output: {e}"), err)
