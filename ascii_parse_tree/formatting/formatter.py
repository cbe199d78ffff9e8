"""
Formatter turning a parse forest into ASCII tree text.
"""

import logging
from typing import Sequence

from ascii_parse_tree.formatting.renderer import render
from ascii_parse_tree.formatting.transducer import to_display_forest
from ascii_parse_tree.models import Node, ParseNode

logger = logging.getLogger(__name__)


def as_ascii_tree(forest: Sequence[ParseNode]) -> str:
    """
    Render the result of a parse as an ASCII tree.

    A single top-level match is drawn with its own root line. Several
    top-level matches are drawn as siblings under an invisible root, so the
    output starts directly with the first sibling's connector line.

    Args:
        forest: Top-level parse nodes returned by a grammar engine

    Returns:
        The rendered tree, or an empty string if nothing is left to draw

    Raises:
        FormatError: If the renderer's sink refuses a write

    Example:
        text = as_ascii_tree(plugin.parse("a + b", start="expr"))
        #  expr
        #  ├─ val "a"
        #  ├─ op "+"
        #  └─ val "b"
    """
    nodes = to_display_forest(forest)

    if not nodes:
        return ""

    if len(nodes) == 1:
        return render(nodes[0])

    logger.debug(f"Rendering {len(nodes)} top-level matches under an anonymous root")
    return render(Node(label="", children=nodes), anonymous_root=True)
