"""
Unit tests for configuration management.
"""

from unittest.mock import patch
import os

from ascii_parse_tree.config import Settings


def test_settings_loads_from_environment():
    """Test that settings can be loaded from environment variables."""
    with patch.dict(os.environ, {
        'ASCII_PARSE_TREE_LOG_LEVEL': 'DEBUG',
        'ASCII_PARSE_TREE_LOG_JSON': 'false',
        'ASCII_PARSE_TREE_LARK_PARSER': 'earley',
        'ASCII_PARSE_TREE_TREE_SITTER_NAMED_ONLY': '0',
        'ASCII_PARSE_TREE_PLUGINS_DIR': '/opt/grammars',
    }):
        settings = Settings(_env_file=None)

        assert settings.log_level == 'DEBUG'
        assert settings.log_json is False
        assert settings.lark_parser == 'earley'
        assert settings.tree_sitter_named_only is False
        assert settings.plugins_dir == '/opt/grammars'


def test_settings_has_default_values():
    """Test that settings have appropriate default values."""
    with patch.dict(os.environ, {}, clear=True):
        settings = Settings(_env_file=None)

        assert settings.log_level == 'WARNING'
        assert settings.log_json is True
        assert settings.lark_parser == 'lalr'
        assert settings.tree_sitter_named_only is True
        assert settings.plugins_dir is None


def test_settings_ignore_unprefixed_variables():
    """Only prefixed variables are read."""
    with patch.dict(os.environ, {'LOG_LEVEL': 'ERROR'}, clear=True):
        settings = Settings(_env_file=None)

        assert settings.log_level == 'WARNING'
