"""Tests for bulk construction from nested data and dumping back."""

import unittest

import pytest

from treehelper import (
    InvalidTitle,
    TreeNode,
    UnsupportedValueType,
    dump_nested,
    load_nested,
)


class TestLoadNested(unittest.TestCase):

    def test_mapping_builds_children(self):
        tree = TreeNode()
        tree.add_from_nested_map({
            "a": ["1", "2"],
            "b": {"x": ["x1"], "y": ["y1", "y2"]},
        })

        a, b = tree.get_nodes()
        self.assertEqual(a.get_title(), "a")
        self.assertEqual(a.get_values(), ["1", "2"])
        self.assertEqual([n.get_title() for n in b.get_nodes()], ["x", "y"])
        self.assertEqual(b.get_nodes()[1].get_values(), ["y1", "y2"])
        self.assertIs(b.get_nodes()[0].end(), b)
        self.assertIs(b.end(), tree)

    def test_scalar_under_key_is_value_of_current_node(self):
        tree = TreeNode()
        tree.add_from_nested_map({0: "no-symbols", "numbers": list(range(3))})
        self.assertEqual(tree.get_values(), ["no-symbols"])
        self.assertEqual(tree.get_nodes()[0].get_values(), ["0", "1", "2"])

    def test_non_string_keys_become_titles(self):
        tree = TreeNode().add_from_nested_map({2024: ["jan"]})
        self.assertEqual(tree.get_nodes()[0].get_title(), "2024")

    def test_sequence_of_mappings(self):
        tree = TreeNode().add_from_nested_map(["v", {"c": ["cv"]}, "w"])
        child = tree.get_nodes()[0]
        self.assertEqual(tree.entries(), ["v", child, "w"])

    def test_nested_sequences_flatten(self):
        tree = TreeNode().add_from_nested_map({"n": [["a", "b"], ("c",)]})
        self.assertEqual(tree.get_nodes()[0].get_values(), ["a", "b", "c"])

    def test_appends_after_existing_entries(self):
        tree = TreeNode().add_value("existing")
        tree.add_from_nested_map({"new": []})
        self.assertEqual(tree.get_values(), ["existing"])
        self.assertEqual(tree.get_nodes()[0].get_title(), "new")
        self.assertEqual(tree.get_nodes()[0].get_values(), [])

    def test_returns_receiver(self):
        tree = TreeNode()
        self.assertIs(tree.add_from_nested_map({}), tree)
        self.assertIs(load_nested(tree, []), tree)


class TestLoadNestedErrors:

    def test_bad_leaf_leaves_tree_unchanged(self, take_snapshot):
        tree = TreeNode()
        tree.new_child("keep").add_value("v")
        before = take_snapshot(tree)

        with pytest.raises(UnsupportedValueType):
            tree.add_from_nested_map({"a": ["ok"], "b": {"c": [object()]}})

        assert take_snapshot(tree) == before

    def test_empty_key_rejected(self):
        tree = TreeNode()
        with pytest.raises(InvalidTitle):
            tree.add_from_nested_map({"": ["x"]})
        assert tree.get_nodes() == []

    @pytest.mark.parametrize("data", ["text", 5, None, object()])
    def test_top_level_must_be_container(self, data):
        with pytest.raises(UnsupportedValueType):
            TreeNode().add_from_nested_map(data)


class TestDumpNested:

    def test_shape(self, foo_bar_tree):
        assert dump_nested(foo_bar_tree) == [
            {"foo": [
                "first foo",
                "second foo",
                {"sub foo": ["1 sub foo", "2 sub foo", "3 sub foo",
                             "4 sub foo", "5 sub foo", "6 sub foo"]},
                "third foo",
            ]},
            {"bar": ["first bar", "second bar", "third bar"]},
        ]

    def test_titled_root_is_wrapped(self):
        root = TreeNode("root").add_value("v")
        assert root.to_nested() == {"root": ["v"]}
        assert root.to_nested(include_root=False) == ["v"]

    def test_round_trip_keeps_structure(self, foo_bar_tree):
        rebuilt = TreeNode().add_from_nested_map(foo_bar_tree.to_nested())
        assert rebuilt.to_nested() == foo_bar_tree.to_nested()
        assert rebuilt.render() == foo_bar_tree.render()

    def test_repeated_titles_survive(self):
        tree = TreeNode()
        tree.new_child("dup").add_value("1")
        tree.new_child("dup").add_value("2")
        rebuilt = TreeNode().add_from_nested_map(tree.to_nested())
        assert [n.get_values() for n in rebuilt.find_node("dup")] == [["1"], ["2"]]
