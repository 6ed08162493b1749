"""
CLI interface for TreeHelper.

Reads a JSON document (file or stdin) and prints it as a tree::

    echo '{"src": {"pkg": ["a.py", "b.py"]}, "docs": ["index.md"]}' | treehelper
"""

import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from .api import build_tree
from .config import FormatKey, RenderConfig, TreeFormat
from .errors import TreeError
from .render.renderer import TreeRenderer
from .render.writer import StreamLineWriter

logger = logging.getLogger(__name__)


def _parse_glyph(text: str) -> tuple:
    key, sep, glyph = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=GLYPH, got {text!r}")
    try:
        return FormatKey.coerce(key), glyph
    except TreeError as e:
        raise argparse.ArgumentTypeError(str(e))


def parse_args(args: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="treehelper",
        description="Render nested JSON data as a Unix tree-style diagram",
    )

    parser.add_argument(
        "file",
        nargs="?",
        help="JSON input file (reads from stdin if not provided)",
    )

    parser.add_argument(
        "--title",
        "-t",
        help="Title of the root line (default: '.')",
    )

    parser.add_argument(
        "--max-values",
        "-n",
        type=int,
        dest="max_values",
        help="Show at most N values per node, then a truncation marker",
    )

    parser.add_argument(
        "--marker",
        default="...",
        help="Text of the truncation marker line (default: '...')",
    )

    parser.add_argument(
        "--compact",
        action="store_true",
        help="Use two-character glyphs",
    )

    parser.add_argument(
        "--glyph",
        action="append",
        type=_parse_glyph,
        default=[],
        metavar="KEY=GLYPH",
        help="Override one glyph, e.g. TEXT_PREFIX='+-- ' (repeatable)",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr")
    verbosity.add_argument("--quiet", "-q", action="store_true", help="Only log errors")

    return parser.parse_args(args)


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.ERROR if quiet else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s | %(name)s | %(message)s", stream=sys.stderr)


def _load_json(path: Optional[str]):
    if path is None:
        return json.load(sys.stdin)
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def build_config(args: argparse.Namespace) -> RenderConfig:
    formats = TreeFormat.compact() if args.compact else TreeFormat()
    overrides: Dict[FormatKey, str] = dict(args.glyph)
    if overrides:
        formats = formats.replace_glyphs(overrides)
    return RenderConfig(
        formats=formats,
        max_depth=args.max_values,
        truncation_marker=args.marker,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    _configure_logging(args.verbose, args.quiet)

    try:
        data = _load_json(args.file)
    except (OSError, ValueError) as e:
        logger.error("Cannot read input: %s", e)
        return 1

    try:
        renderer = TreeRenderer(build_config(args))
        root = build_tree(data, args.title)
        renderer.render(root, StreamLineWriter())
    except TreeError as e:
        logger.error("%s", e)
        return 1

    return 0
