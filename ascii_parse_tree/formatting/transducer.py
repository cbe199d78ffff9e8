"""
Transducer from engine parse nodes to display trees.

Each parse node becomes either a ``Leaf`` (no surviving children) or a
``Node`` (one or more surviving children). End-of-input markers are dropped
at every depth before classification.
"""

import logging
from typing import Iterator, List, Optional, Sequence, Tuple

from ascii_parse_tree.models import DisplayTree, Leaf, Node, ParseNode

logger = logging.getLogger(__name__)

END_OF_INPUT = "EOI"

_NAMED_ESCAPES = {
    "\n": "\\n",
    "\t": "\\t",
    "\r": "\\r",
    "\\": "\\\\",
    "\"": "\\\"",
    "'": "\\'",
}

# Remaining C0 controls and DEL are written as \xNN
_ESCAPES = str.maketrans({
    **{chr(code): f"\\x{code:02x}" for code in [*range(0x20), 0x7f]},
    **_NAMED_ESCAPES,
})


def escape(text: str) -> str:
    """Replace control characters, backslashes and quotes with escape sequences."""
    return text.translate(_ESCAPES)


def _classify(node: ParseNode, children: List[DisplayTree]) -> DisplayTree:
    if not children:
        return Leaf(line=f'{node.rule} "{escape(node.text.strip())}"')
    return Node(label=node.rule, children=children)


def to_display_forest(forest: Sequence[ParseNode]) -> List[DisplayTree]:
    """
    Convert an ordered forest of parse nodes into display trees.

    Args:
        forest: Top-level parse nodes in source order

    Returns:
        Display trees in the same order, without any ``EOI`` nodes
    """
    roots: List[DisplayTree] = []

    # Each frame: the parse node being converted (None for the top level),
    # its not yet visited children, and its already converted children.
    stack: List[Tuple[Optional[ParseNode], Iterator[ParseNode], List[DisplayTree]]] = [
        (None, iter(forest), roots)
    ]

    while stack:
        node, pending, converted = stack[-1]
        child = next(pending, None)

        if child is not None:
            if child.rule == END_OF_INPUT:
                continue
            stack.append((child, iter(child.children), []))
            continue

        stack.pop()
        if node is not None:
            stack[-1][2].append(_classify(node, converted))

    logger.debug(f"Transduced {len(forest)} top-level parse nodes into {len(roots)} display trees")
    return roots
