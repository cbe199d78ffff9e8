"""
Renderer for display trees.

Draws a display tree as indented text using box-drawing connectors:

     expr
     ├─ val "a"
     ├─ op "+"
     └─ val "b"

Every line starts with a single space. A child that is not the last one of
its parent is introduced by ``├─ `` and its descendants are indented with
``│  ``; the last child uses ``└─ `` and three spaces.
"""

import io
from typing import List, TextIO, Tuple

from ascii_parse_tree.errors import FormatError
from ascii_parse_tree.models import DisplayTree, label_of

BRANCH = "├─ "
LAST_BRANCH = "└─ "
PIPE = "│  "
BLANK = "   "


def _write(sink: TextIO, text: str) -> None:
    try:
        sink.write(text)
    except (OSError, ValueError) as e:
        raise FormatError(f"Failed to write tree output: {e}") from e


def _push_children(
    stack: List[Tuple[DisplayTree, str, str]],
    tree: DisplayTree,
    indent: str,
) -> None:
    last = len(tree.children) - 1
    # Pushed in reverse so the first child is popped first
    for index in range(last, -1, -1):
        if index == last:
            stack.append((tree.children[index], indent + LAST_BRANCH, indent + BLANK))
        else:
            stack.append((tree.children[index], indent + BRANCH, indent + PIPE))


def write_tree(sink: TextIO, tree: DisplayTree, anonymous_root: bool = False) -> None:
    """
    Write a display tree to a text sink.

    Args:
        sink: Any object with a ``write(str)`` method
        tree: Tree to draw
        anonymous_root: When the tree is a Node, draw only its children at
            depth zero and skip the root's own line

    Raises:
        FormatError: If the sink refuses a write
    """
    # Each frame: tree, prefix for its own line, indent for its descendants
    stack: List[Tuple[DisplayTree, str, str]] = []

    if anonymous_root and tree.kind == "node":
        _push_children(stack, tree, "")
    else:
        stack.append((tree, "", ""))

    while stack:
        current, prefix, indent = stack.pop()
        _write(sink, f" {prefix}{label_of(current)}\n")
        if current.kind == "node":
            _push_children(stack, current, indent)


def render(tree: DisplayTree, anonymous_root: bool = False) -> str:
    """Render a display tree to a string."""
    output = io.StringIO()
    write_tree(output, tree, anonymous_root=anonymous_root)
    return output.getvalue()
