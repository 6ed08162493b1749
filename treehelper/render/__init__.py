"""Text rendering of trees and the line writers it outputs to."""

from .renderer import TreeRenderer
from .writer import (
    LineWriter,
    ListLineWriter,
    StreamLineWriter,
    CallableLineWriter,
    LoggingLineWriter,
    as_line_writer,
)

__all__ = [
    "TreeRenderer",
    "LineWriter",
    "ListLineWriter",
    "StreamLineWriter",
    "CallableLineWriter",
    "LoggingLineWriter",
    "as_line_writer",
]
