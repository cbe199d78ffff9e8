"""
Lark grammar plugin.

Parses text with a user-written lark grammar and converts the resulting
``lark.Tree`` into ParseNode objects. Only rule matches become nodes;
terminals contribute their text to the enclosing rule's span.
"""

import logging
from pathlib import Path
from typing import Any, Iterator, List, Optional, Sequence, Tuple, Union

from lark import Lark, Tree
from lark.exceptions import LarkError

from ascii_parse_tree.errors import ParseError
from ascii_parse_tree.models import ParseNode
from plugins.base import GrammarPlugin

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


class LarkPlugin(GrammarPlugin):
    """Grammar plugin backed by a lark grammar."""

    def __init__(
        self,
        grammar: str,
        name: str = "lark",
        start: Optional[Union[str, Sequence[str]]] = None,
        parser: str = "lalr",
        file_extensions: Optional[List[str]] = None,
    ):
        """
        Compile the grammar.

        Args:
            grammar: Grammar text in lark's EBNF notation
            name: Plugin name
            start: Entry rule or rules; the first one is the default
            parser: lark parser algorithm ('lalr' or 'earley')
            file_extensions: Input file extensions this grammar parses

        Raises:
            ValueError: If the grammar cannot be compiled
        """
        if start is None:
            starts = ["start"]
        elif isinstance(start, str):
            starts = [start]
        else:
            starts = list(start)

        self._name = name
        self._starts = starts
        self._file_extensions = list(file_extensions or [])

        try:
            self._parser = Lark(
                grammar,
                start=starts,
                parser=parser,
                propagate_positions=True,
            )
        except LarkError as e:
            logger.error(f"Failed to compile grammar '{name}': {e}")
            raise ValueError(f"Invalid lark grammar '{name}': {e}") from e

        logger.info(f"Lark plugin '{name}' initialized with entry rules {starts}")

    @classmethod
    def from_file(cls, grammar_path: Path, **kwargs) -> "LarkPlugin":
        """
        Create a plugin from a grammar file.

        The plugin name defaults to the file name without its suffix.
        """
        grammar_path = Path(grammar_path)
        kwargs.setdefault("name", grammar_path.stem)
        return cls(grammar_path.read_text(encoding="utf-8"), **kwargs)

    @property
    def name(self) -> str:
        """Return the plugin name."""
        return self._name

    @property
    def file_extensions(self) -> List[str]:
        """Return supported input file extensions."""
        return self._file_extensions

    @property
    def default_start(self) -> Optional[str]:
        """Return the first configured entry rule."""
        return self._starts[0]

    def parse(self, text: str, start: Optional[str] = None) -> List[ParseNode]:
        """
        Parse text with the lark grammar.

        A top-level match of a rule whose name starts with an underscore is
        replaced by its children, matching lark's convention for inlined rules.

        Args:
            text: Input text
            start: Entry rule, or None for the default one

        Returns:
            Top-level ParseNode objects

        Raises:
            ParseError: If lark rejects the input or the entry rule
        """
        start = start or self.default_start

        try:
            tree = self._parser.parse(text, start=start)
        except LarkError as e:
            logger.debug(f"Lark plugin '{self._name}' failed to parse input: {e}")
            raise ParseError(str(e)) from e

        if str(tree.data).startswith("_"):
            forest = [
                self._convert_to_parse_node(child, text)
                for child in tree.children
                if isinstance(child, Tree)
            ]
        else:
            forest = [self._convert_to_parse_node(tree, text)]

        logger.debug(f"Parsed {len(text)} characters from rule '{start}' into {len(forest)} matches")
        return forest

    def _convert_to_parse_node(self, tree: Tree, content: str) -> ParseNode:
        """
        Convert a lark Tree into a ParseNode.

        Walks the tree with an explicit stack, so nesting depth is not bound
        by the interpreter's recursion limit.

        Args:
            tree: lark Tree
            content: Original input text

        Returns:
            ParseNode model instance
        """
        # Each frame: the lark tree, its not yet visited children, and its
        # already converted rule children.
        stack: List[Tuple[Tree, Iterator[Any], List[ParseNode]]] = [
            (tree, iter(tree.children), [])
        ]

        while True:
            current, pending, converted = stack[-1]
            child = next(pending, _EXHAUSTED)

            if child is not _EXHAUSTED:
                if isinstance(child, Tree):
                    stack.append((child, iter(child.children), []))
                continue

            stack.pop()
            node = self._make_parse_node(current, converted, content)
            if not stack:
                return node
            stack[-1][2].append(node)

    def _make_parse_node(self, tree: Tree, children: List[ParseNode], content: str) -> ParseNode:
        meta = tree.meta
        if getattr(meta, "empty", True):
            start = end = 0
            node_text = ""
        else:
            start = meta.start_pos
            end = meta.end_pos
            node_text = content[start:end]

        return ParseNode(
            rule=str(tree.data),
            start=start,
            end=end,
            text=node_text,
            children=children,
        )
