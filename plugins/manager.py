"""
Plugin Manager for grammar engine plugins.

This module manages plugin registration, discovery from ``config.yaml``
files, and selection by name or by input file extension.
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from plugins.base import GrammarPlugin
from plugins.lark_engine import LarkPlugin
from plugins.tree_sitter_engine import TreeSitterPlugin

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('name', 'version', 'engine')

# Directory holding the grammar plugins shipped with this package
BUNDLED_PLUGINS_DIR = Path(__file__).parent


class PluginManager:
    """Manages grammar plugin registration and selection."""

    def __init__(self):
        """Initialize the plugin manager."""
        self._plugins: Dict[str, GrammarPlugin] = {}
        self._extension_map: Dict[str, str] = {}
        self._config_cache: Dict[str, Dict] = {}

    def register_plugin(self, plugin: GrammarPlugin) -> None:
        """
        Register a grammar plugin.

        Args:
            plugin: GrammarPlugin instance to register
        """
        name = plugin.name

        if name in self._plugins:
            logger.warning(f"Plugin '{name}' already registered, overwriting")

        self._plugins[name] = plugin

        for ext in plugin.file_extensions:
            if ext in self._extension_map:
                logger.warning(
                    f"Extension '{ext}' already mapped to '{self._extension_map[ext]}', "
                    f"overwriting with '{name}'"
                )
            self._extension_map[ext] = name

        logger.info(
            f"Registered plugin '{name}' "
            f"with extensions: {plugin.file_extensions}"
        )

    def get_plugin_for_file(self, file_path: str) -> Optional[GrammarPlugin]:
        """
        Get the plugin that parses a file, based on its extension.

        Args:
            file_path: Path to the input file

        Returns:
            GrammarPlugin instance if found, None otherwise
        """
        ext = Path(file_path).suffix
        name = self._extension_map.get(ext)

        if name:
            return self._plugins.get(name)

        logger.debug(f"No plugin found for file extension '{ext}' (file: {file_path})")
        return None

    def get_plugin(self, name: str) -> Optional[GrammarPlugin]:
        """Get plugin by name, or None if it is not registered."""
        return self._plugins.get(name)

    def list_plugins(self) -> List[str]:
        """List the names of all registered plugins."""
        return list(self._plugins.keys())

    def list_supported_extensions(self) -> List[str]:
        """List all input file extensions mapped to a plugin."""
        return list(self._extension_map.keys())

    def load_plugin_config(self, plugin_dir: Path) -> Dict:
        """
        Load plugin configuration from YAML file.

        Args:
            plugin_dir: Directory containing the grammar and config.yaml

        Returns:
            Dictionary containing plugin configuration

        Raises:
            FileNotFoundError: If config.yaml is not found
            ValueError: If a required field is missing
            yaml.YAMLError: If config.yaml is malformed
        """
        config_path = plugin_dir / "config.yaml"

        cache_key = str(config_path)
        if cache_key in self._config_cache:
            return self._config_cache[cache_key]

        if not config_path.exists():
            raise FileNotFoundError(f"Plugin configuration not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse plugin configuration {config_path}: {e}")
            raise

        if not isinstance(config, dict):
            raise ValueError(f"Plugin configuration {config_path} must be a mapping")

        for field in REQUIRED_FIELDS:
            if field not in config:
                raise ValueError(f"Missing required field '{field}' in {config_path}")

        self._config_cache[cache_key] = config

        logger.info(f"Loaded plugin configuration from {config_path}")
        return config

    def create_plugin(self, config: Dict[str, Any], plugin_dir: Path) -> GrammarPlugin:
        """
        Instantiate the plugin described by a configuration.

        Supported engines:
        - ``lark``: ``grammar`` (file relative to plugin_dir), optional
          ``start``, ``parser`` and ``file_extensions``
        - ``tree-sitter``: ``language``, optional ``named_only`` and
          ``file_extensions``

        Raises:
            ValueError: If the engine is unknown or a field is missing
        """
        engine = config['engine']

        if engine == 'lark':
            if 'grammar' not in config:
                raise ValueError(f"Lark plugin '{config['name']}' has no 'grammar' field")
            return LarkPlugin.from_file(
                plugin_dir / config['grammar'],
                name=config['name'],
                start=config.get('start'),
                parser=config.get('parser', 'lalr'),
                file_extensions=config.get('file_extensions'),
            )

        if engine == 'tree-sitter':
            if 'language' not in config:
                raise ValueError(f"Tree-sitter plugin '{config['name']}' has no 'language' field")
            return TreeSitterPlugin(
                config['language'],
                named_only=config.get('named_only', True),
                file_extensions=config.get('file_extensions'),
            )

        raise ValueError(f"Unknown engine '{engine}' for plugin '{config['name']}'")

    def initialize_plugins(self, plugins_dir: Path) -> None:
        """
        Discover, create and register all plugins in a directory.

        Every sub-directory holding a config.yaml is one plugin. A plugin that
        fails to load is logged and skipped.

        Args:
            plugins_dir: Path to the plugins directory
        """
        if not plugins_dir.exists():
            logger.warning(f"Plugins directory not found: {plugins_dir}")
            return

        logger.info(f"Initializing plugins from {plugins_dir}")

        for plugin_dir in sorted(plugins_dir.iterdir()):
            if not plugin_dir.is_dir():
                continue

            config_path = plugin_dir / "config.yaml"
            if not config_path.exists():
                logger.debug(f"Skipping {plugin_dir.name}: no config.yaml found")
                continue

            try:
                config = self.load_plugin_config(plugin_dir)
                logger.info(
                    f"Found plugin configuration: {config['name']} v{config['version']}"
                )
                self.register_plugin(self.create_plugin(config, plugin_dir))

            except Exception as e:
                logger.error(f"Failed to load plugin from {plugin_dir}: {e}")
                continue

    def unregister_plugin(self, name: str) -> bool:
        """
        Unregister a plugin.

        Args:
            name: Name of the plugin to unregister

        Returns:
            True if plugin was unregistered, False if not found
        """
        if name not in self._plugins:
            return False

        plugin = self._plugins[name]

        for ext in plugin.file_extensions:
            if self._extension_map.get(ext) == name:
                del self._extension_map[ext]

        del self._plugins[name]

        logger.info(f"Unregistered plugin '{name}'")
        return True

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get plugin manager statistics.

        Returns:
            Dictionary with statistics
        """
        return {
            "total_plugins": len(self._plugins),
            "total_extensions": len(self._extension_map),
            "plugins": list(self._plugins.keys())
        }
