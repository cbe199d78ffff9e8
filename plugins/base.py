"""
Base interface for grammar engine plugins.

This module defines the abstract base class that every grammar engine plugin
must implement so its parse results can be drawn as ASCII trees.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ascii_parse_tree.models import ParseNode


class GrammarPlugin(ABC):
    """Base interface for grammar engine plugins."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the plugin name (e.g., 'expression', 'java')."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> List[str]:
        """Return the input file extensions this grammar parses (e.g., ['.java'])."""
        pass

    @property
    def default_start(self) -> Optional[str]:
        """Return the rule parsing starts from when none is given."""
        return None

    @abstractmethod
    def parse(self, text: str, start: Optional[str] = None) -> List[ParseNode]:
        """
        Parse text into an ordered forest of rule matches.

        Args:
            text: Input text
            start: Entry rule, or None for the plugin's default

        Returns:
            Top-level ParseNode objects in source order

        Raises:
            ParseError: If the text cannot be parsed
        """
        pass
