"""Configuration system for TreeHelper.

This module defines the glyph set used to draw the tree (``TreeFormat``)
and the per-render options (``RenderConfig``). Both are plain dataclasses;
``validate()`` reports problems as a list instead of raising so callers can
decide how strict to be.
"""

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from .errors import ConfigurationError


class FormatKey(Enum):
    """Identifies one of the four glyphs used when drawing a tree.

    The numeric values are stable and may be used as mapping keys.
    """
    LINE_PREFIX_EMPTY = 1   # Carried below the last sibling (no bar)
    LINE_PREFIX = 2         # Carried below a non-last sibling (vertical bar)
    TEXT_PREFIX = 3         # Connector in front of a non-last entry
    TEXT_PREFIX_END = 4     # Connector in front of the last entry

    @classmethod
    def coerce(cls, key: Union['FormatKey', int, str]) -> 'FormatKey':
        """Resolve a member, its integer value or its (case-insensitive) name.

        Raises:
            ConfigurationError: If ``key`` does not name a glyph
        """
        if isinstance(key, cls):
            return key
        if isinstance(key, int) and not isinstance(key, bool):
            try:
                return cls(key)
            except ValueError:
                pass
        if isinstance(key, str):
            member = cls.__members__.get(key.strip().upper())
            if member is not None:
                return member
        raise ConfigurationError(
            f"Unknown format key: {key!r}. "
            f"Choose from: {', '.join(cls.__members__)}"
        )


_FIELD_BY_KEY = {
    FormatKey.LINE_PREFIX_EMPTY: 'line_prefix_empty',
    FormatKey.LINE_PREFIX: 'line_prefix',
    FormatKey.TEXT_PREFIX: 'text_prefix',
    FormatKey.TEXT_PREFIX_END: 'text_prefix_end',
}


@dataclass(frozen=True)
class TreeFormat:
    """The glyph set used to draw a tree.

    Defaults match the output of the Unix ``tree`` command. Instances are
    immutable; use ``replace_glyphs`` to derive a modified copy.
    """

    line_prefix_empty: str = "    "
    line_prefix: str = "│   "
    text_prefix: str = "├── "
    text_prefix_end: str = "└── "

    @classmethod
    def compact(cls) -> 'TreeFormat':
        """Two-character glyphs, half the width of the defaults."""
        return cls(
            line_prefix_empty="  ",
            line_prefix="│ ",
            text_prefix="├ ",
            text_prefix_end="└ ",
        )

    @classmethod
    def from_mapping(cls, glyphs: Mapping[Any, str]) -> 'TreeFormat':
        """Build a format from the defaults plus ``glyphs`` overrides."""
        return cls().replace_glyphs(glyphs)

    def get(self, key: Union[FormatKey, int, str]) -> str:
        return getattr(self, _FIELD_BY_KEY[FormatKey.coerce(key)])

    def replace_glyphs(self, glyphs: Mapping[Any, str]) -> 'TreeFormat':
        """Return a copy with some glyphs replaced.

        Args:
            glyphs: Mapping of ``FormatKey`` (or its value or name) to glyph

        Returns:
            New TreeFormat; ``self`` is not modified

        Raises:
            ConfigurationError: On an unknown key or a non-string glyph
        """
        changes: Dict[str, str] = {}
        for key, glyph in glyphs.items():
            member = FormatKey.coerce(key)
            if not isinstance(glyph, str):
                raise ConfigurationError(
                    f"Glyph for {member.name} must be a string, got {type(glyph).__name__}"
                )
            changes[_FIELD_BY_KEY[member]] = glyph
        return replace(self, **changes)

    def as_dict(self) -> Dict[FormatKey, str]:
        return {key: getattr(self, name) for key, name in _FIELD_BY_KEY.items()}

    @property
    def continuation_bar(self) -> str:
        """The bare bar drawn under the header line."""
        return self.line_prefix.rstrip()

    def validate(self) -> List[str]:
        errors = []
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, str):
                errors.append(f"{f.name} must be a string")
            elif value == "":
                errors.append(f"{f.name} cannot be empty")
        return errors


# Style inherited by every new node unless overridden on that node
DEFAULT_FORMAT = TreeFormat()


@dataclass
class RenderConfig:
    """Complete configuration for a render.

    Anything left as ``None`` falls back to the state of the rendering root:
    its own ``TreeFormat`` and, per node, its own ``max_depth``.
    """

    # Glyphs; None uses the rendering root's formats
    formats: Optional[TreeFormat] = None

    # Value cap for nodes that do not set their own max_depth
    max_depth: Optional[int] = None

    # Line substituted for the values dropped by a cap
    truncation_marker: str = "..."

    trailing_blank_line: bool = True

    @classmethod
    def compact(cls, **kwargs) -> 'RenderConfig':
        """Create config using the two-character glyph set.

        Args:
            **kwargs: Any other RenderConfig field

        Returns:
            RenderConfig with compact formats
        """
        return cls(formats=TreeFormat.compact(), **kwargs)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.max_depth is not None:
            if not isinstance(self.max_depth, int) or isinstance(self.max_depth, bool):
                errors.append("max_depth must be an integer")
            elif self.max_depth < 0:
                errors.append("max_depth cannot be negative")

        if self.formats is not None:
            if isinstance(self.formats, TreeFormat):
                errors.extend(self.formats.validate())
            else:
                errors.append("formats must be a TreeFormat")

        if not isinstance(self.truncation_marker, str) or not self.truncation_marker:
            errors.append("truncation_marker must be a non-empty string")

        return errors
