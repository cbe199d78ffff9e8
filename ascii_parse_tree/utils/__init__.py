"""
Utility modules for the ASCII parse tree renderer.
"""

from ascii_parse_tree.utils.logging import (
    ContextLoggerAdapter,
    JSONFormatter,
    get_logger,
    log_parse_outcome,
    setup_logging,
)

__all__ = [
    "ContextLoggerAdapter",
    "JSONFormatter",
    "get_logger",
    "log_parse_outcome",
    "setup_logging",
]
