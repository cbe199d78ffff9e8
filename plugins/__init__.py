"""
Grammar engine plugins.

This package provides the plugin system for parsing engines, including the
base plugin interface and plugin manager.
"""

from plugins.base import GrammarPlugin
from plugins.manager import BUNDLED_PLUGINS_DIR, PluginManager

__all__ = ['GrammarPlugin', 'PluginManager', 'BUNDLED_PLUGINS_DIR']
