"""
Render grammar parse results as indented ASCII trees for debugging grammars.
"""

from ascii_parse_tree.errors import AsciiTreeError, FormatError, ParseError
from ascii_parse_tree.formatting import as_ascii_tree, print_as_ascii_tree
from ascii_parse_tree.models import ParseNode

__version__ = "0.1.0"

__all__ = [
    "as_ascii_tree",
    "print_as_ascii_tree",
    "ParseNode",
    "AsciiTreeError",
    "ParseError",
    "FormatError",
]
