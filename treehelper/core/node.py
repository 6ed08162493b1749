"""TreeNode: the single entity TreeHelper builds trees from.

A node has an optional title, an insertion-ordered list of entries (text
values and child nodes, interleaved in the order they were added), a
reference to its parent, an optional cap on how many of its own values are
rendered, and its own glyph set.

Builder methods return either the node itself or the newly created child so
trees can be written fluently and climbed back with ``end()``::

    tree = TreeNode()
    (tree.new_child("foo")
            .add_value("first foo")
            .new_child("sub foo")
                .add_value("1 sub foo")
            .end()
         .end()
         .new_child("bar"))
"""

import logging
from typing import Any, Iterator, List, Mapping, Optional, Union

from ..config import DEFAULT_FORMAT, FormatKey, TreeFormat
from ..errors import ConfigurationError, UnsupportedValueType
from .adapter import NodeAdapter, is_node
from .traverser import DepthFirstPreOrderTraverser
from .values import Value, stringify_value

logger = logging.getLogger(__name__)


class TreeNode:
    """A named node owning values and child nodes."""

    # Shared, stateless navigator
    adapter = NodeAdapter()

    def __init__(self, title: Optional[str] = None, formats: Optional[TreeFormat] = None):
        """Create a detached (root) node.

        Args:
            title: Display name; None or "" marks an anonymous root
            formats: Glyph set, defaults to ``DEFAULT_FORMAT``
        """
        self._title = title
        self._entries: List[Union[str, 'TreeNode']] = []
        self._parent: Optional['TreeNode'] = None
        self._max_depth: Optional[int] = None
        self._formats = formats if formats is not None else DEFAULT_FORMAT

    # Title

    def get_title(self) -> Optional[str]:
        return self._title

    def set_title(self, title: Optional[str]) -> 'TreeNode':
        self._title = title
        return self

    @property
    def title(self) -> Optional[str]:
        return self._title

    # Values

    def add_value(self, value: Value) -> 'TreeNode':
        """Append a value after everything already on this node.

        Raises:
            UnsupportedValueType: If ``value`` is not a supported scalar
        """
        self._entries.append(stringify_value(value))
        return self

    def set_values(self, values: List[Value]) -> 'TreeNode':
        """Replace all values of this node, keeping its children.

        Children are kept in their order and placed after the new values.
        Every value is checked before anything is replaced.

        Raises:
            UnsupportedValueType: If any value is not a supported scalar
        """
        if isinstance(values, (str, bytes)) or not hasattr(values, '__iter__'):
            raise UnsupportedValueType(
                f"set_values expects a sequence of values, got {type(values).__name__}"
            )
        converted = [stringify_value(value) for value in values]
        self._entries = converted + self.get_nodes()
        return self

    def get_values(self) -> List[str]:
        return [entry for entry in self._entries if not is_node(entry)]

    def entries(self) -> List[Union[str, 'TreeNode']]:
        """Values and children interleaved in insertion order."""
        return list(self._entries)

    # Value cap

    def set_max_depth(self, max_depth: Optional[int]) -> 'TreeNode':
        """Cap how many of this node's own values are rendered.

        Args:
            max_depth: Number of values shown before a truncation marker,
                or None for no cap
        """
        if max_depth is not None and (
                not isinstance(max_depth, int) or isinstance(max_depth, bool) or max_depth < 0):
            raise ConfigurationError(f"max_depth must be a non-negative integer or None, got {max_depth!r}")
        self._max_depth = max_depth
        return self

    def get_max_depth(self) -> Optional[int]:
        return self._max_depth

    # Formats

    def get_formats(self) -> TreeFormat:
        return self._formats

    def set_formats(self, formats: Union[TreeFormat, Mapping[Any, str]]) -> 'TreeNode':
        """Override some or all glyphs of this node.

        Args:
            formats: A complete TreeFormat, or a mapping of FormatKey to glyph
                merged over the current glyphs
        """
        if isinstance(formats, TreeFormat):
            self._formats = formats
        else:
            self._formats = self._formats.replace_glyphs(formats)
        return self

    def set_format(self, key: Union[FormatKey, int, str], glyph: str) -> 'TreeNode':
        self._formats = self._formats.replace_glyphs({key: glyph})
        return self

    # Navigation

    def end(self) -> Optional['TreeNode']:
        """Return the parent node, or None for a root."""
        return self.adapter.get_parent(self)

    @property
    def parent(self) -> Optional['TreeNode']:
        return self.adapter.get_parent(self)

    def get_root(self) -> 'TreeNode':
        return self.adapter.get_root(self)

    def is_root(self) -> bool:
        return self.end() is None

    def get_depth(self) -> int:
        return self.adapter.get_depth(self)

    def get_trace(self) -> List['TreeNode']:
        """This node followed by each ancestor up to the root."""
        return self.adapter.get_trace(self)

    def get_nodes(self) -> List['TreeNode']:
        """Direct children, in attachment order."""
        return self.adapter.nodes_from_parent(self)

    @property
    def children(self) -> List['TreeNode']:
        return self.get_nodes()

    def __iter__(self) -> Iterator['TreeNode']:
        return iter(self.get_nodes())

    def find_node(self, name: str) -> List['TreeNode']:
        """Find every node titled ``name`` in the whole tree.

        The search always starts at the root, whichever node it is called on.

        Returns:
            Matching nodes in depth-first pre-order, empty if none
        """
        traverser = DepthFirstPreOrderTraverser(self.adapter)
        return [node for node, _ in traverser.traverse(self.get_root())
                if node.get_title() == name]

    # Building

    def new_child(self, title: str) -> 'TreeNode':
        """Create a child titled ``title`` and return it.

        Raises:
            InvalidTitle: If ``title`` is empty
        """
        return self.adapter.new_child(self, title)

    def add_child(self, node: 'TreeNode') -> 'TreeNode':
        """Attach a deep copy of ``node`` and return the copy.

        ``node`` itself is left untouched, so the same prepared subtree can
        be added at any number of places.

        Raises:
            InvalidTitle: If ``node`` has no title
        """
        return self.adapter.add_child(self, node)

    def set_parent(self, parent: 'TreeNode') -> 'TreeNode':
        """Move this node (and its subtree) under ``parent``.

        Raises:
            InvalidTitle: If this node has no title
            CircularReference: If ``parent`` is this node or one of its
                descendants; the tree is left unchanged
        """
        self.adapter.move_node(self, parent)
        return self

    def remove_child(self, node: 'TreeNode') -> 'TreeNode':
        """Detach ``node`` from this node; it becomes a separate root."""
        self.adapter.remove_child(self, node)
        return self

    def add_from_nested_map(self, data: Any) -> 'TreeNode':
        """Build children and values from nested mappings and sequences.

        See ``treehelper.core.loader.load_nested``.
        """
        from .loader import load_nested
        load_nested(self, data)
        return self

    def copy(self) -> 'TreeNode':
        """Deep copy of this node and its subtree, detached from any parent."""
        clone = self._bare_copy()
        stack = [(self, clone)]
        while stack:
            source, target = stack.pop()
            for entry in source._entries:
                if is_node(entry):
                    child = entry._bare_copy()
                    self.adapter._link(target, child)
                    stack.append((entry, child))
                else:
                    target._entries.append(entry)
        return clone

    def _bare_copy(self) -> 'TreeNode':
        clone = type(self)(self._title, formats=self._formats)
        clone._max_depth = self._max_depth
        return clone

    def to_nested(self, include_root: bool = True) -> Any:
        """Inverse of ``add_from_nested_map``; see ``loader.dump_nested``."""
        from .loader import dump_nested
        return dump_nested(self, include_root=include_root)

    # Rendering

    def print_tree(self, writer: Any = None, **overrides) -> int:
        """Render this node as a tree to ``writer``.

        Args:
            writer: LineWriter, stream, callable or list; stdout when None
            **overrides: ``formats`` and/or ``max_depth`` for this call only

        Returns:
            Number of lines written
        """
        from ..render.renderer import TreeRenderer
        from ..render.writer import as_line_writer
        return TreeRenderer().render(self, as_line_writer(writer), **overrides)

    def render(self, **overrides) -> str:
        """Render this node as a tree and return the text."""
        from ..render.renderer import TreeRenderer
        return TreeRenderer().render_text(self, **overrides)

    def __repr__(self) -> str:
        return f"TreeNode(title={self._title!r}, values={len(self.get_values())}, children={len(self.get_nodes())})"
