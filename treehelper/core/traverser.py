"""Tree traversal strategies for TreeHelper.

Traversers walk a node hierarchy through a NodeAdapter. Visited nodes are
tracked by identity, so nodes that share a title are still each visited
exactly once.
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import TYPE_CHECKING, Deque, Iterator, List, Optional, Set, Tuple

from .adapter import NodeAdapter

if TYPE_CHECKING:
    from .node import TreeNode


class TreeTraverser(ABC):
    """Abstract base class for tree traversal strategies."""

    def __init__(self, adapter: NodeAdapter):
        """Initialize traverser with an adapter.

        Args:
            adapter: NodeAdapter for navigating the tree
        """
        self.adapter = adapter

    @abstractmethod
    def traverse(self,
                 root: 'TreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['TreeNode', int]]:
        """Traverse the tree starting from root.

        Args:
            root: Starting node for traversal
            max_depth: Maximum depth to traverse (None = unlimited)
            min_depth: Minimum depth before yielding nodes

        Yields:
            Tuples of (node, depth) where depth is relative to root
        """
        pass

    def _should_yield(self, depth: int, min_depth: int, max_depth: Optional[int]) -> bool:
        if depth < min_depth:
            return False
        if max_depth is not None and depth > max_depth:
            return False
        return True

    def _should_explore(self, depth: int, max_depth: Optional[int]) -> bool:
        if max_depth is None:
            return True
        return depth < max_depth


class BreadthFirstTraverser(TreeTraverser):
    """Breadth-first (level-order) traversal strategy.

    Visits all nodes at depth N before visiting nodes at depth N+1.
    """

    def traverse(self,
                 root: 'TreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['TreeNode', int]]:
        queue: Deque[Tuple['TreeNode', int]] = deque([(root, 0)])
        visited: Set[int] = set()

        while queue:
            node, depth = queue.popleft()

            if id(node) in visited:
                continue
            visited.add(id(node))

            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                for child in self.adapter.get_children(node):
                    queue.append((child, depth + 1))


class DepthFirstPreOrderTraverser(TreeTraverser):
    """Depth-first pre-order traversal strategy.

    Visits parent before children, children in attachment order. This is
    the order nodes appear in a rendered tree.
    """

    def traverse(self,
                 root: 'TreeNode',
                 max_depth: Optional[int] = None,
                 min_depth: int = 0) -> Iterator[Tuple['TreeNode', int]]:
        stack: List[Tuple['TreeNode', int]] = [(root, 0)]
        visited: Set[int] = set()

        while stack:
            node, depth = stack.pop()

            if id(node) in visited:
                continue
            visited.add(id(node))

            # Parent before children (pre-order)
            if self._should_yield(depth, min_depth, max_depth):
                yield (node, depth)

            if self._should_explore(depth, max_depth):
                children = list(self.adapter.get_children(node))
                # Reversed so the first child is popped first
                for child in reversed(children):
                    stack.append((child, depth + 1))


def create_traverser(strategy: str, adapter: NodeAdapter) -> TreeTraverser:
    """Create a traverser instance by strategy name.

    Args:
        strategy: Name of traversal strategy (bfs, dfs_pre)
        adapter: NodeAdapter for the tree structure

    Returns:
        TreeTraverser instance

    Raises:
        ValueError: If strategy name is not recognized
    """
    strategies = {
        'bfs': BreadthFirstTraverser,
        'breadth_first': BreadthFirstTraverser,
        'dfs_pre': DepthFirstPreOrderTraverser,
        'depth_first_pre': DepthFirstPreOrderTraverser,
    }

    strategy_lower = strategy.lower()
    if strategy_lower not in strategies:
        raise ValueError(
            f"Unknown traversal strategy: {strategy}. "
            f"Choose from: {', '.join(strategies.keys())}"
        )

    return strategies[strategy_lower](adapter)
