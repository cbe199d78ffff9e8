"""Parse tree formatting: transducer, renderer, formatter and printer."""

from ascii_parse_tree.formatting.formatter import as_ascii_tree
from ascii_parse_tree.formatting.printer import print_as_ascii_tree
from ascii_parse_tree.formatting.renderer import render, write_tree
from ascii_parse_tree.formatting.transducer import END_OF_INPUT, escape, to_display_forest

__all__ = [
    "as_ascii_tree",
    "print_as_ascii_tree",
    "render",
    "write_tree",
    "to_display_forest",
    "escape",
    "END_OF_INPUT",
]
