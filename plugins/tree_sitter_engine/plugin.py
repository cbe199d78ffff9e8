"""
Tree-sitter grammar plugin.

This plugin parses source code with a prebuilt tree-sitter grammar (for
example ``tree-sitter-java``) and converts the syntax tree into ParseNode
objects. The node type is used as the rule name.
"""

import importlib
import logging
from typing import Iterator, List, Optional, Tuple

import tree_sitter

from ascii_parse_tree.errors import ParseError
from ascii_parse_tree.models import ParseNode
from plugins.base import GrammarPlugin

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = {
    "java": [".java"],
    "python": [".py"],
    "javascript": [".js", ".mjs"],
    "typescript": [".ts"],
    "json": [".json"],
}


def load_language(language: str) -> tree_sitter.Language:
    """
    Load a tree-sitter language from its ``tree_sitter_<language>`` package.

    Raises:
        ValueError: If the grammar package is not installed
    """
    module_name = f"tree_sitter_{language}"
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise ValueError(
            f"Tree-sitter grammar for '{language}' not found. "
            f"Please install it with: pip install {module_name.replace('_', '-')}"
        ) from e

    language_fn = getattr(module, "language", None) or getattr(module, f"language_{language}", None)
    if language_fn is None:
        raise ValueError(f"Module {module_name} does not expose a tree-sitter language")

    return tree_sitter.Language(language_fn())


class TreeSitterPlugin(GrammarPlugin):
    """Grammar plugin backed by a tree-sitter language."""

    def __init__(
        self,
        language: str,
        named_only: bool = True,
        file_extensions: Optional[List[str]] = None,
    ):
        """
        Initialize the tree-sitter plugin.

        Args:
            language: Language name, e.g. 'java' for the tree_sitter_java package
            named_only: Keep only named nodes; anonymous nodes are literal tokens
            file_extensions: Input file extensions; defaults depend on the language
        """
        self._language_name = language
        self._named_only = named_only
        self._file_extensions = (
            list(file_extensions)
            if file_extensions is not None
            else list(DEFAULT_EXTENSIONS.get(language, []))
        )

        self._parser = tree_sitter.Parser(load_language(language))

        logger.info(f"Tree-sitter plugin for '{language}' initialized successfully")

    @property
    def name(self) -> str:
        """Return the language name."""
        return self._language_name

    @property
    def file_extensions(self) -> List[str]:
        """Return supported file extensions."""
        return self._file_extensions

    def parse(self, text: str, start: Optional[str] = None) -> List[ParseNode]:
        """
        Parse source code with tree-sitter.

        Args:
            text: Source code
            start: Ignored, tree-sitter grammars have a single root rule

        Returns:
            A one-element forest holding the root node

        Raises:
            ParseError: If the syntax tree contains errors
        """
        if start is not None:
            logger.debug(f"Ignoring entry rule '{start}' for tree-sitter language '{self._language_name}'")

        content = text.encode("utf8")
        tree = self._parser.parse(content)
        root = tree.root_node

        if root.has_error:
            error_node = self._find_error_node(root)
            row, column = error_node.start_point if error_node is not None else root.start_point
            raise ParseError(
                f"{self._language_name}: syntax error at line {row + 1}, column {column + 1}"
            )

        return [self._convert_to_parse_node(root, content)]

    def _find_error_node(self, root: tree_sitter.Node) -> Optional[tree_sitter.Node]:
        """Return the first ERROR or missing node in source order."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                return node
            stack.extend(reversed(node.children))
        return None

    def _convert_to_parse_node(
        self,
        ts_node: tree_sitter.Node,
        content: bytes,
    ) -> ParseNode:
        """
        Convert tree-sitter Node to ParseNode model.

        Walks the syntax tree with an explicit stack, so nesting depth is not
        bound by the interpreter's recursion limit.

        Args:
            ts_node: tree-sitter Node
            content: Original source as UTF-8 bytes

        Returns:
            ParseNode model instance
        """
        # Each frame: the tree-sitter node, its not yet visited children, and
        # its already converted children.
        stack: List[Tuple[tree_sitter.Node, Iterator[tree_sitter.Node], List[ParseNode]]] = [
            (ts_node, iter(self._children_of(ts_node)), [])
        ]

        while True:
            current, pending, converted = stack[-1]
            child = next(pending, None)

            if child is not None:
                stack.append((child, iter(self._children_of(child)), []))
                continue

            stack.pop()
            node = ParseNode(
                rule=current.type,
                start=current.start_byte,
                end=current.end_byte,
                text=content[current.start_byte:current.end_byte].decode("utf8", errors="replace"),
                children=converted,
            )
            if not stack:
                return node
            stack[-1][2].append(node)

    def _children_of(self, ts_node: tree_sitter.Node) -> List[tree_sitter.Node]:
        return ts_node.named_children if self._named_only else ts_node.children
