"""Rendering of TreeNode hierarchies as Unix ``tree``-style text.

Output layout for a rendering root::

    <root title, or "." when anonymous>
    │
    ├── <entry>
    │   └── <entry of a child>
    └── <last entry>
    <blank line>

The renderer walks the tree read-only and writes each line to the line
writer as soon as it is produced; nothing is buffered, so lines already
written stay written if a render fails half way.
"""

import logging
from typing import Any, List, Mapping, Optional, Tuple, Union

from ..config import RenderConfig, TreeFormat
from ..core.adapter import is_node
from ..core.node import TreeNode
from ..core.values import stringify_value
from ..errors import ConfigurationError
from .writer import LineWriter, ListLineWriter

logger = logging.getLogger(__name__)

_UNSET = object()


class TreeRenderer:
    """Renders a node (treated as root) and everything below it.

    Args:
        config: Render options; defaults to ``RenderConfig()``

    Raises:
        ConfigurationError: If ``config.validate()`` reports problems
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config if config is not None else RenderConfig()
        self._check(self.config)

    @staticmethod
    def _check(config: RenderConfig) -> None:
        errors = config.validate()
        if errors:
            raise ConfigurationError(f"Invalid configuration: {'; '.join(errors)}")

    def resolve_formats(self,
                        root: TreeNode,
                        formats: Union[TreeFormat, Mapping[Any, str], None] = None) -> TreeFormat:
        """Pick the glyphs for a render.

        The root's own formats, replaced by ``config.formats`` when set, then
        by ``formats`` for this call (a full TreeFormat or glyph overrides).
        """
        resolved = root.get_formats()
        if self.config.formats is not None:
            resolved = self.config.formats
        if isinstance(formats, TreeFormat):
            resolved = formats
        elif formats is not None:
            resolved = resolved.replace_glyphs(formats)

        errors = resolved.validate()
        if errors:
            raise ConfigurationError(f"Invalid formats: {'; '.join(errors)}")
        return resolved

    def render(self,
               root: TreeNode,
               writer: LineWriter,
               formats: Union[TreeFormat, Mapping[Any, str], None] = None,
               max_depth: Any = _UNSET) -> int:
        """Render ``root`` and its subtree to ``writer``.

        Args:
            root: Node to render as the top of the tree
            writer: Receives each line
            formats: Glyph overrides for this call only
            max_depth: Value cap for this call, for nodes without their own

        Returns:
            Number of lines written

        Raises:
            UnsupportedValueType: If a value that is not a supported scalar
                is found on a node
            ConfigurationError: On invalid overrides
        """
        default_cap = self.config.max_depth
        if max_depth is not _UNSET:
            self._check(RenderConfig(max_depth=max_depth))
            default_cap = max_depth
        glyphs = self.resolve_formats(root, formats)

        logger.debug("Rendering tree from %r", root.get_title())
        counter = _CountingWriter(writer)

        counter.writeln(root.get_title() or ".")
        counter.writeln(glyphs.continuation_bar)
        self._render_entries(root, "", glyphs, default_cap, counter)
        if self.config.trailing_blank_line:
            counter.writeln("")

        logger.debug("Rendered %d lines", counter.count)
        return counter.count

    def render_lines(self, root: TreeNode, **overrides) -> List[str]:
        writer = ListLineWriter()
        self.render(root, writer, **overrides)
        return writer.lines

    def render_text(self, root: TreeNode, **overrides) -> str:
        writer = ListLineWriter()
        self.render(root, writer, **overrides)
        return writer.getvalue()

    def _render_entries(self,
                        node: TreeNode,
                        prefix: str,
                        glyphs: TreeFormat,
                        default_cap: Optional[int],
                        writer: LineWriter) -> None:
        # Frames: (visible entries, prefix, next index)
        stack = [(self._visible_entries(node, default_cap), prefix, 0)]
        while stack:
            entries, prefix, index = stack.pop()
            if index >= len(entries):
                continue
            stack.append((entries, prefix, index + 1))

            child, text = entries[index]
            if index == len(entries) - 1:
                title_prefix = prefix + glyphs.text_prefix_end
                child_prefix = prefix + glyphs.line_prefix_empty
            else:
                title_prefix = prefix + glyphs.text_prefix
                child_prefix = prefix + glyphs.line_prefix

            writer.writeln(title_prefix + text)
            if child is not None:
                stack.append((self._visible_entries(child, default_cap), child_prefix, 0))

    def _visible_entries(self,
                         node: TreeNode,
                         default_cap: Optional[int]) -> List[Tuple[Optional[TreeNode], str]]:
        """Entries of ``node`` as ``(child or None, text)`` after applying the value cap."""
        cap = node.get_max_depth()
        if cap is None:
            cap = default_cap

        visible: List[Tuple[Optional[TreeNode], str]] = []
        shown = 0
        truncated = False
        for entry in node.entries():
            if is_node(entry):
                visible.append((entry, entry.get_title() or ""))
                continue
            text = stringify_value(entry)
            if cap is None or shown < cap:
                visible.append((None, text))
                shown += 1
            elif not truncated:
                visible.append((None, self.config.truncation_marker))
                truncated = True

        if truncated:
            logger.debug("Truncated values of %r to %d", node.get_title(), cap)
        return visible


class _CountingWriter(LineWriter):

    def __init__(self, inner: LineWriter):
        self.inner = inner
        self.count = 0

    def writeln(self, line: str) -> None:
        self.inner.writeln(line)
        self.count += 1
