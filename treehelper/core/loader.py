"""Bulk construction of trees from nested mappings and sequences.

Shape of the input accepted by ``load_nested``:

- mapping: each key whose value is a mapping or a sequence becomes a child
  titled ``str(key)`` built from that value; a key holding a scalar adds the
  scalar as a value of the current node (the key is not shown).
- sequence (list or tuple): scalars become values in order; mappings add
  their keys as children of the current node; nested sequences are
  flattened into the current node.

``dump_nested`` produces the same shape, with every child written as a
single-key mapping inside its parent's list so values and children keep
their interleaved order and repeated titles survive.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Tuple, Union

from ..errors import UnsupportedValueType
from .adapter import is_node

if TYPE_CHECKING:
    from .node import TreeNode

logger = logging.getLogger(__name__)

Nested = Union[Mapping, List[Any]]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def load_nested(node: 'TreeNode', data: Nested) -> 'TreeNode':
    """Add the content of ``data`` to ``node``.

    The tree is built on a detached scratch node first and only moved onto
    ``node`` once everything converted, so an error leaves ``node`` as it was.

    Args:
        node: Receiving node
        data: Mapping or sequence, see module docstring

    Returns:
        ``node``

    Raises:
        UnsupportedValueType: If ``data`` is not a container or holds a value
            that is not a supported scalar
        InvalidTitle: If a key converts to an empty title
    """
    if not isinstance(data, Mapping) and not _is_sequence(data):
        raise UnsupportedValueType(
            f"Nested input must be a mapping or a sequence, got {type(data).__name__}"
        )

    staging = type(node)()
    _populate(staging, data)
    moved = node.adapter.transfer_entries(staging, node)
    logger.debug("Loaded %d entries into %r", moved, node.get_title())
    return node


# Marks sequence items, which have no key and load into the current node
_NO_KEY = object()


def _pieces(data: Any) -> Iterator[Tuple[Any, Any]]:
    if isinstance(data, Mapping):
        return iter(data.items())
    return ((_NO_KEY, item) for item in data)


def _populate(node: 'TreeNode', data: Nested) -> None:
    stack = [(node, _pieces(data))]
    while stack:
        current, pieces = stack[-1]
        for key, value in pieces:
            if isinstance(value, Mapping) or _is_sequence(value):
                target = current if key is _NO_KEY else current.new_child(str(key))
                stack.append((target, _pieces(value)))
                break
            current.add_value(value)
        else:
            stack.pop()


def dump_nested(node: 'TreeNode', include_root: bool = True) -> Union[List[Any], Dict[str, Any]]:
    """Flatten ``node`` into nested lists and single-key mappings.

    Args:
        node: Node to dump
        include_root: Wrap the result in ``{title: [...]}`` when the node has
            a title

    Returns:
        A list of entries, or a one-key mapping when wrapped
    """
    entries: List[Any] = []
    stack = [(iter(node.entries()), entries)]
    while stack:
        pending, target = stack[-1]
        for entry in pending:
            if is_node(entry):
                child_entries: List[Any] = []
                target.append({entry.get_title(): child_entries})
                stack.append((iter(entry.entries()), child_entries))
                break
            target.append(entry)
        else:
            stack.pop()

    if include_root and node.get_title():
        return {node.get_title(): entries}
    return entries
