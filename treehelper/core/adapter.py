"""NodeAdapter: navigation and topology changes for TreeHelper.

TreeNode is kept a data container. Everything that reads or changes how
nodes hang together (children, parent links, moving, attaching) goes
through the adapter, so the rules that keep the forest acyclic live in
one place.
"""

import logging
from typing import TYPE_CHECKING, Iterator, List, Optional

from ..errors import CircularReference, InvalidTitle

if TYPE_CHECKING:
    from .node import TreeNode

logger = logging.getLogger(__name__)


def is_node(entry) -> bool:
    """Tell child nodes apart from plain values in a node's entry list."""
    from .node import TreeNode
    return isinstance(entry, TreeNode)


class NodeAdapter:
    """Adapter for navigating and modifying TreeNode hierarchies.

    All comparisons are by identity: two nodes with the same title and
    values are still different nodes.
    """

    def get_children(self, node: 'TreeNode') -> Iterator['TreeNode']:
        """Get an iterator of child nodes in attachment order.

        Args:
            node: The parent node

        Returns:
            Iterator yielding child TreeNode instances
        """
        for entry in node._entries:
            if is_node(entry):
                yield entry

    def get_parent(self, node: 'TreeNode') -> Optional['TreeNode']:
        """Get the parent of ``node``, or None for a root."""
        return node._parent

    def get_root(self, node: 'TreeNode') -> 'TreeNode':
        root = node
        while True:
            parent = self.get_parent(root)
            if parent is None:
                return root
            root = parent

    def get_depth(self, node: 'TreeNode') -> int:
        """Calculate the depth of a node in the tree.

        Args:
            node: The node to get depth for

        Returns:
            Depth where root = 0
        """
        return len(self.get_trace(node)) - 1

    def get_trace(self, node: 'TreeNode') -> List['TreeNode']:
        """Trace ``node`` back to its root.

        Returns:
            ``[node, parent, grandparent, ..., root]``
        """
        trace = [node]
        current = self.get_parent(node)
        while current is not None:
            trace.append(current)
            current = self.get_parent(current)
        return trace

    def get_siblings(self, node: 'TreeNode') -> Iterator['TreeNode']:
        """Get siblings of the given node (excluding the node itself)."""
        parent = self.get_parent(node)
        if parent is None:
            return iter([])  # Root has no siblings
        return (child for child in self.get_children(parent) if child is not node)

    def nodes_from_parent(self, parent: 'TreeNode') -> List['TreeNode']:
        """Ordered list of nodes whose parent is exactly ``parent``."""
        return [child for child in self.get_children(parent)
                if self.get_parent(child) is parent]

    def is_descendant(self, node: 'TreeNode', ancestor: 'TreeNode') -> bool:
        """Check if ``ancestor`` is ``node`` itself or on its parent chain."""
        return any(step is ancestor for step in self.get_trace(node))

    # Tree modification

    def new_child(self, parent: 'TreeNode', title: str) -> 'TreeNode':
        """Create a node titled ``title`` and attach it under ``parent``.

        Raises:
            InvalidTitle: If ``title`` is empty or None
        """
        self._check_title(title)
        child = type(parent)(title)
        self._link(parent, child)
        return child

    def add_child(self, parent: 'TreeNode', child: 'TreeNode') -> 'TreeNode':
        """Attach a deep copy of ``child`` under ``parent``.

        The argument itself is never attached or modified, so the same
        node may be added at several places without aliasing.

        Args:
            parent: The receiving node
            child: Node (with its subtree) to copy in

        Returns:
            The attached copy

        Raises:
            InvalidTitle: If ``child`` has no title
        """
        self._check_title(child.get_title())
        attached = child.copy()
        self._link(parent, attached)
        logger.debug("Attached copy of %r under %r", child.get_title(), parent.get_title())
        return attached

    def move_node(self, node: 'TreeNode', new_parent: 'TreeNode') -> None:
        """Move a node (with its subtree) under a new parent.

        Raises:
            CircularReference: If ``new_parent`` is ``node`` or one of its
                descendants
            InvalidTitle: If ``node`` has no title

        Both are checked before anything is changed.
        """
        if self.is_descendant(new_parent, node):
            raise CircularReference()
        self._check_title(node.get_title())

        old_parent = self.get_parent(node)
        if old_parent is new_parent:
            return
        if old_parent is not None:
            self.remove_child(old_parent, node)
        self._link(new_parent, node)
        logger.debug("Moved %r under %r", node.get_title(), new_parent.get_title())

    def remove_child(self, parent: 'TreeNode', child: 'TreeNode') -> None:
        """Detach ``child`` from ``parent``; it becomes a root.

        Raises:
            ValueError: If ``child`` is not a child of ``parent``
        """
        for index, entry in enumerate(parent._entries):
            if entry is child:
                del parent._entries[index]
                child._parent = None
                return
        raise ValueError(f"{child!r} is not a child of {parent!r}")

    def transfer_entries(self, source: 'TreeNode', target: 'TreeNode') -> int:
        """Move every value and child of ``source`` to the end of ``target``.

        Returns:
            Number of entries moved
        """
        moved = source._entries
        source._entries = []
        for entry in moved:
            if is_node(entry):
                entry._parent = target
            target._entries.append(entry)
        return len(moved)

    def _link(self, parent: 'TreeNode', child: 'TreeNode') -> None:
        child._parent = parent
        parent._entries.append(child)

    @staticmethod
    def _check_title(title: Optional[str]) -> None:
        if not title:
            raise InvalidTitle("Cannot attach a node without a title")
