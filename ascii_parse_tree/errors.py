"""Exception types raised while parsing and rendering."""


class AsciiTreeError(Exception):
    """Base class for all errors raised by this package."""


class ParseError(AsciiTreeError):
    """A grammar engine could not parse its input.

    The message is the engine's own human-readable description; it is
    forwarded verbatim and never inspected.
    """


class FormatError(AsciiTreeError):
    """The output sink refused further writes while rendering a tree."""
