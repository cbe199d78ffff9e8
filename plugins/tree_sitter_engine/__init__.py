"""
Tree-sitter grammar engine plugin.

This plugin parses source code with prebuilt tree-sitter language grammars.
"""

from plugins.tree_sitter_engine.plugin import TreeSitterPlugin, load_language

__all__ = ['TreeSitterPlugin', 'load_language']
