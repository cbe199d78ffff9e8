"""Data models for the ASCII parse tree renderer."""

from .display_tree import DisplayTree, Leaf, Node, label_of
from .parse_node import ParseNode

__all__ = [
    # Engine-facing models
    "ParseNode",
    # Display models
    "DisplayTree",
    "Leaf",
    "Node",
    "label_of",
]
