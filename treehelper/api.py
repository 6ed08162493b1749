"""High-level API for TreeHelper.

Simple functional interfaces for the common cases: build a tree from
nested data, render it, search it. They wrap the object-oriented API.
"""

from typing import Any, Iterator, List, Mapping, Optional, Tuple, Union

from .config import RenderConfig, TreeFormat
from .core.node import TreeNode
from .core.traverser import create_traverser
from .render.renderer import _UNSET, TreeRenderer
from .render.writer import as_line_writer

Formats = Union[TreeFormat, Mapping[Any, str], None]


def build_tree(data: Any, title: Optional[str] = None) -> TreeNode:
    """Create a root node and fill it from nested mappings and sequences.

    Example:
        >>> root = build_tree({"a": [1, 2], "b": {"x": ["y"]}})
        >>> [child.get_title() for child in root.get_nodes()]
        ['a', 'b']
    """
    return TreeNode(title).add_from_nested_map(data)


def print_tree(root: TreeNode,
               writer: Any = None,
               formats: Formats = None,
               max_depth: Any = _UNSET,
               config: Optional[RenderConfig] = None) -> int:
    """Render ``root`` to ``writer`` (stdout by default).

    Args:
        root: Node rendered as the top of the tree
        writer: LineWriter, stream, list, callable or None
        formats: Glyph overrides for this call
        max_depth: Value cap for nodes that set none; None lifts a cap
            set in ``config``
        config: Full render configuration; ``max_depth`` above takes
            precedence when given

    Returns:
        Number of lines written
    """
    renderer = TreeRenderer(config)
    return renderer.render(root, as_line_writer(writer), formats=formats, max_depth=max_depth)


def render_lines(root: TreeNode, **kwargs) -> List[str]:
    """Render ``root`` and return the lines (see ``print_tree`` for options)."""
    lines: List[str] = []
    print_tree(root, lines, **kwargs)
    return lines


def render_text(root: TreeNode, **kwargs) -> str:
    return "".join(line + "\n" for line in render_lines(root, **kwargs))


def format_nested(data: Any,
                  writer: Any = None,
                  formats: Formats = None,
                  max_depth: Optional[int] = None,
                  title: Optional[str] = None) -> int:
    """Render nested mappings and sequences directly as a tree.

    Shortcut for ``print_tree(build_tree(data, title), ...)``.

    Returns:
        Number of lines written
    """
    return print_tree(build_tree(data, title), writer, formats=formats, max_depth=max_depth)


def find_nodes(root: TreeNode, name: str) -> List[TreeNode]:
    return root.find_node(name)


def walk_tree(root: TreeNode,
              strategy: str = "dfs_pre",
              max_depth: Optional[int] = None,
              min_depth: int = 0) -> Iterator[Tuple[TreeNode, int]]:
    """Iterate ``(node, depth)`` pairs below and including ``root``.

    Args:
        root: Starting node (depth 0)
        strategy: ``dfs_pre`` (render order) or ``bfs``
        max_depth: Deepest level to visit, None for all
        min_depth: Shallowest level to yield; 1 skips ``root`` itself

    Yields:
        Tuples of (node, depth)
    """
    traverser = create_traverser(strategy, root.adapter)
    yield from traverser.traverse(root, max_depth=max_depth, min_depth=min_depth)
