"""Shared fixtures for the TreeHelper test suite."""

import pytest

from treehelper import ListLineWriter, TreeNode


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: long-running tests (deselect with -m 'not slow')")


@pytest.fixture
def writer():
    """Fresh in-memory line writer."""
    return ListLineWriter()


@pytest.fixture
def foo_bar_tree():
    """Two root-level branches, one with a nested child between its values.

    Structure:
    .
    ├── foo
    │   ├── first foo
    │   ├── second foo
    │   ├── sub foo (6 values)
    │   └── third foo
    └── bar (3 values)
    """
    tree = TreeNode()
    (tree.new_child("foo")
            .add_value("first foo")
            .add_value("second foo")
            .new_child("sub foo")
                .add_value("1 sub foo")
                .add_value("2 sub foo")
                .add_value("3 sub foo")
                .add_value("4 sub foo")
                .add_value("5 sub foo")
                .add_value("6 sub foo")
            .end()
            .add_value("third foo")
        .end()
        .new_child("bar")
            .add_value("first bar")
            .add_value("second bar")
            .add_value("third bar")
        .end())
    return tree


@pytest.fixture
def chain_tree():
    """Linear chain a -> b -> c -> d under an anonymous root."""
    tree = TreeNode()
    tree.new_child("a").new_child("b").new_child("c").new_child("d")
    return tree


def snapshot(root):
    """Structural fingerprint: titles, values, identities and parent links."""
    result = []

    def _walk(node):
        parent = node.end()
        result.append((
            id(node),
            node.get_title(),
            tuple(node.get_values()),
            id(parent) if parent is not None else None,
            tuple(id(child) for child in node.get_nodes()),
        ))
        for child in node.get_nodes():
            _walk(child)

    _walk(root)
    return result


@pytest.fixture
def take_snapshot():
    return snapshot
