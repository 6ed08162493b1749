"""Conversion of node values to display text.

Only a closed set of scalar types is accepted; richer objects must be
converted by the caller before they reach the tree.
"""

from typing import Any, Union

from ..errors import UnsupportedValueType

Value = Union[str, int, float, bool, None]

SUPPORTED_TYPES = (str, int, float, bool, type(None))


def is_supported_value(value: Any) -> bool:
    return isinstance(value, SUPPORTED_TYPES)


def stringify_value(value: Value) -> str:
    """Convert a scalar value to the text shown in the tree.

    Args:
        value: str, int, float, bool or None

    Returns:
        ``str`` unchanged, booleans as ``"true"``/``"false"``, ``None`` as
        an empty string, numbers via ``str()``

    Raises:
        UnsupportedValueType: For any other type
    """
    if isinstance(value, str):
        return value
    # bool first: it is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    if isinstance(value, (int, float)):
        return str(value)
    raise UnsupportedValueType(
        f'Invalid value given of type "{type(value).__name__}", '
        f'expecting str, int, float, bool or None'
    )
