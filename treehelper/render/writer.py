"""Line writers: where rendered lines go.

The renderer only needs one operation, ``writeln(line)``. The writers here
cover the common sinks; ``as_line_writer`` wraps whatever the caller hands
over into one of them.
"""

import logging
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, List, Optional, TextIO


class LineWriter(ABC):
    """Abstract sink receiving rendered lines one at a time."""

    @abstractmethod
    def writeln(self, line: str) -> None:
        """Write one line of text (without the line terminator)."""
        pass


class ListLineWriter(LineWriter):
    """Collects lines in memory."""

    def __init__(self, lines: Optional[List[str]] = None):
        self.lines = lines if lines is not None else []

    def writeln(self, line: str) -> None:
        self.lines.append(line)

    def getvalue(self) -> str:
        """All lines joined, each terminated by a newline."""
        return "".join(line + "\n" for line in self.lines)

    def clear(self) -> None:
        self.lines.clear()


class StreamLineWriter(LineWriter):
    """Writes lines to a text stream (stdout by default)."""

    def __init__(self, stream: Optional[TextIO] = None, newline: str = "\n"):
        self._stream = stream
        self.newline = newline

    @property
    def stream(self) -> TextIO:
        # Resolved late so pytest's capsys and redirect_stdout are honoured
        return self._stream if self._stream is not None else sys.stdout

    def writeln(self, line: str) -> None:
        self.stream.write(line + self.newline)


class CallableLineWriter(LineWriter):
    """Hands each line to a callable, e.g. ``print`` or ``output.writeln``."""

    def __init__(self, func: Callable[[str], Any]):
        self.func = func

    def writeln(self, line: str) -> None:
        self.func(line)


class LoggingLineWriter(LineWriter):
    """Emits each line as a log record."""

    def __init__(self, logger: Optional[logging.Logger] = None, level: int = logging.INFO):
        self.logger = logger if logger is not None else logging.getLogger("treehelper.output")
        self.level = level

    def writeln(self, line: str) -> None:
        self.logger.log(self.level, "%s", line)


def as_line_writer(target: Any = None) -> LineWriter:
    """Wrap ``target`` into a LineWriter.

    Args:
        target: A LineWriter (returned as-is), an object with ``writeln``, a
            text stream with ``write``, a list to append to, a callable, or
            None for stdout

    Returns:
        LineWriter instance

    Raises:
        TypeError: If ``target`` cannot receive lines
    """
    if isinstance(target, LineWriter):
        return target
    if target is None:
        return StreamLineWriter()
    if isinstance(target, list):
        return ListLineWriter(target)
    writeln = getattr(target, 'writeln', None)
    if callable(writeln):
        return CallableLineWriter(writeln)
    if callable(getattr(target, 'write', None)):
        return StreamLineWriter(target)
    if callable(target):
        return CallableLineWriter(target)
    raise TypeError(f"Cannot write lines to object of type {type(target).__name__}")
