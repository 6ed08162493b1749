"""Core abstractions for TreeHelper.

This package contains the node data model, the adapter that owns the
rules for linking nodes together, and the traversers used to search them.
"""

from .node import TreeNode
from .adapter import NodeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    create_traverser,
)
from .loader import load_nested, dump_nested
from .values import Value, stringify_value, is_supported_value

__all__ = [
    "TreeNode",
    "NodeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "create_traverser",
    "load_nested",
    "dump_nested",
    "Value",
    "stringify_value",
    "is_supported_value",
]
