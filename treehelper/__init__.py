"""TreeHelper - build trees fluently and print them like Unix ``tree``.

Quick start:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from treehelper import TreeNode

    tree = TreeNode()
    tree.new_child("foo").add_value("first foo").add_value("second foo")
    tree.print_tree()
━━━━━━━━━━━━━━━━━━━━━━━━━━

Nested dictionaries and lists can be loaded in one call with
``add_from_nested_map`` or rendered directly with ``format_nested``.
"""

__version__ = "0.1.0"

from .config import DEFAULT_FORMAT, FormatKey, RenderConfig, TreeFormat
from .errors import (
    CircularReference,
    ConfigurationError,
    InvalidTitle,
    InvalidValue,
    TreeError,
    UnsupportedValueType,
)
from .core import (
    TreeNode,
    NodeAdapter,
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
    load_nested,
    dump_nested,
    stringify_value,
)
from .render import (
    TreeRenderer,
    LineWriter,
    ListLineWriter,
    StreamLineWriter,
    CallableLineWriter,
    LoggingLineWriter,
    as_line_writer,
)
from .api import (
    build_tree,
    print_tree,
    render_lines,
    render_text,
    format_nested,
    find_nodes,
    walk_tree,
)

__all__ = [
    "__version__",
    # Config
    "DEFAULT_FORMAT",
    "FormatKey",
    "RenderConfig",
    "TreeFormat",
    # Errors
    "TreeError",
    "InvalidTitle",
    "InvalidValue",
    "UnsupportedValueType",
    "CircularReference",
    "ConfigurationError",
    # Core
    "TreeNode",
    "NodeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "create_traverser",
    "load_nested",
    "dump_nested",
    "stringify_value",
    # Rendering
    "TreeRenderer",
    "LineWriter",
    "ListLineWriter",
    "StreamLineWriter",
    "CallableLineWriter",
    "LoggingLineWriter",
    "as_line_writer",
    # API
    "build_tree",
    "print_tree",
    "render_lines",
    "render_text",
    "format_nested",
    "find_nodes",
    "walk_tree",
]
