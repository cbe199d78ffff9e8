"""
Command line entry point.

Parses a text with a grammar plugin and prints the result as an ASCII tree:

    ascii-parse-tree --plugin expression --start expr -e "(u + (v + w)) + z"
    ascii-parse-tree --grammar my.lark --start document notes.txt
    ascii-parse-tree --language java Main.java
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from ascii_parse_tree import __version__
from ascii_parse_tree.config import settings
from ascii_parse_tree.errors import ParseError
from ascii_parse_tree.formatting import print_as_ascii_tree
from ascii_parse_tree.utils.logging import get_logger, log_parse_outcome, setup_logging
from plugins import BUNDLED_PLUGINS_DIR, GrammarPlugin, PluginManager
from plugins.lark_engine import LarkPlugin
from plugins.tree_sitter_engine import TreeSitterPlugin

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_USAGE = 2


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the command line tool."""
    argparser = argparse.ArgumentParser(
        prog="ascii-parse-tree",
        description="Print the parse tree of a text as an ASCII tree",
    )
    argparser.add_argument("input", nargs="?", help="Input file (stdin if omitted)")
    argparser.add_argument("-e", "--expression", help="Parse this text instead of a file")

    source = argparser.add_mutually_exclusive_group()
    source.add_argument("--plugin", help="Name of a registered grammar plugin")
    source.add_argument("--grammar", type=Path, help="Lark grammar file")
    source.add_argument("--language", help="Tree-sitter language, e.g. java")

    argparser.add_argument("--start", help="Entry rule to parse from")
    argparser.add_argument(
        "--parser",
        choices=["lalr", "earley"],
        default=None,
        help="Lark parser algorithm used with --grammar",
    )
    argparser.add_argument("--plugins-dir", type=Path, help="Additional plugins directory")
    argparser.add_argument("--list-plugins", action="store_true", help="List registered plugins and exit")
    argparser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return argparser


def load_plugins(plugins_dir: Optional[Path]) -> PluginManager:
    """Register the bundled plugins plus those found in plugins_dir."""
    manager = PluginManager()
    manager.initialize_plugins(BUNDLED_PLUGINS_DIR)

    extra_dir = plugins_dir or (Path(settings.plugins_dir) if settings.plugins_dir else None)
    if extra_dir is not None:
        manager.initialize_plugins(extra_dir)

    return manager


def select_plugin(args: argparse.Namespace, manager: PluginManager) -> GrammarPlugin:
    """
    Pick the grammar plugin requested on the command line.

    Raises:
        ValueError: If no plugin matches the request
    """
    if args.grammar is not None:
        return LarkPlugin.from_file(
            args.grammar,
            start=args.start,
            parser=args.parser or settings.lark_parser,
        )

    if args.language is not None:
        return TreeSitterPlugin(args.language, named_only=settings.tree_sitter_named_only)

    if args.plugin is not None:
        plugin = manager.get_plugin(args.plugin)
        if plugin is None:
            raise ValueError(
                f"Unknown plugin '{args.plugin}'. Available: {', '.join(manager.list_plugins())}"
            )
        return plugin

    if args.input is not None:
        plugin = manager.get_plugin_for_file(args.input)
        if plugin is not None:
            return plugin

    raise ValueError("No grammar selected: use --plugin, --grammar or --language")


def read_input(args: argparse.Namespace) -> str:
    """Return the text to parse."""
    if args.expression is not None:
        return args.expression
    if args.input is not None:
        return Path(args.input).read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool and return its exit status."""
    args = build_arg_parser().parse_args(argv)

    setup_logging(settings.log_level, json_output=settings.log_json)

    try:
        manager = load_plugins(args.plugins_dir)

        if args.list_plugins:
            for name in manager.list_plugins():
                print(name)
            return EXIT_OK

        plugin = select_plugin(args, manager)
        text = read_input(args)
    except (ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return EXIT_USAGE

    start = args.start or plugin.default_start
    parse_logger = logger.with_context(plugin=plugin.name)

    try:
        forest = plugin.parse(text, start=start)
    except ParseError as e:
        log_parse_outcome(parse_logger, start, len(text), error=str(e))
        print_as_ascii_tree(e)
        return EXIT_PARSE_ERROR

    log_parse_outcome(parse_logger, start, len(text), node_count=len(forest))
    print_as_ascii_tree(forest)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
