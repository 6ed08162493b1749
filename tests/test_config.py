"""Tests for glyph sets and render configuration."""

import dataclasses

import pytest

from treehelper import DEFAULT_FORMAT, ConfigurationError, FormatKey, RenderConfig, TreeFormat


class TestFormatKey:

    @pytest.mark.parametrize("key", [FormatKey.TEXT_PREFIX, 3, "TEXT_PREFIX", "text_prefix", " Text_Prefix "])
    def test_coerce(self, key):
        assert FormatKey.coerce(key) is FormatKey.TEXT_PREFIX

    @pytest.mark.parametrize("key", [0, 5, "prefix", True, None, 2.0])
    def test_coerce_rejects(self, key):
        with pytest.raises(ConfigurationError):
            FormatKey.coerce(key)


class TestTreeFormat:

    def test_defaults_match_unix_tree(self):
        assert DEFAULT_FORMAT.as_dict() == {
            FormatKey.LINE_PREFIX_EMPTY: "    ",
            FormatKey.LINE_PREFIX: "│   ",
            FormatKey.TEXT_PREFIX: "├── ",
            FormatKey.TEXT_PREFIX_END: "└── ",
        }

    def test_compact(self):
        compact = TreeFormat.compact()
        assert compact.get(FormatKey.LINE_PREFIX_EMPTY) == "  "
        assert compact.get("line_prefix") == "│ "
        assert compact.get(3) == "├ "
        assert compact.continuation_bar == "│"

    def test_replace_glyphs_returns_new(self):
        changed = DEFAULT_FORMAT.replace_glyphs({FormatKey.TEXT_PREFIX_END: "`-- "})
        assert changed.text_prefix_end == "`-- "
        assert DEFAULT_FORMAT.text_prefix_end == "└── "

    def test_replace_glyphs_rejects_non_string(self):
        with pytest.raises(ConfigurationError, match="must be a string"):
            DEFAULT_FORMAT.replace_glyphs({FormatKey.TEXT_PREFIX: 3})

    def test_from_mapping(self):
        assert TreeFormat.from_mapping({"LINE_PREFIX": "|   "}).line_prefix == "|   "

    def test_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_FORMAT.text_prefix = "x"

    def test_validate(self):
        assert DEFAULT_FORMAT.validate() == []
        assert TreeFormat(line_prefix="").validate() == ["line_prefix cannot be empty"]


class TestRenderConfig:

    def test_default_is_valid(self):
        assert RenderConfig().validate() == []

    def test_compact(self):
        config = RenderConfig.compact(max_depth=3)
        assert config.formats == TreeFormat.compact()
        assert config.max_depth == 3

    @pytest.mark.parametrize("kwargs, message", [
        ({"max_depth": -1}, "max_depth cannot be negative"),
        ({"max_depth": "3"}, "max_depth must be an integer"),
        ({"max_depth": True}, "max_depth must be an integer"),
        ({"truncation_marker": ""}, "truncation_marker must be a non-empty string"),
        ({"formats": {"TEXT_PREFIX": "x"}}, "formats must be a TreeFormat"),
        ({"formats": TreeFormat(text_prefix="")}, "text_prefix cannot be empty"),
    ])
    def test_validate_reports(self, kwargs, message):
        assert message in RenderConfig(**kwargs).validate()

    def test_collects_every_problem(self):
        errors = RenderConfig(max_depth=-1, truncation_marker="").validate()
        assert len(errors) == 2
