"""Utility functions for conditree.

Helpers shared by the condition factories, mostly around the equality
contract leaf conditions rely on.
"""

from typing import Any


def is_comparable(value: Any) -> bool:
    """Check if a value can ever satisfy an equality condition.

    Equality conditions use the expected value's own ``==``, whatever that
    contract is: structural for records and containers, identity for enum
    members and plain objects. The only values rejected are those that do
    not even equal themselves, such as ``float("nan")``, since a condition
    expecting them could never match.

    Args:
        value: The value to check.

    Returns:
        True if the value equals itself, False otherwise.

    Examples:
        >>> is_comparable("John")
        True
        >>> is_comparable(Color.RED)  # enum member, identity equality
        True
        >>> is_comparable(float("nan"))
        False
    """
    try:
        return bool(value == value)
    except (TypeError, ValueError):
        # e.g. arrays whose == is elementwise and has no truth value
        return False


def format_value(value: Any) -> str:
    """Render a value the way it appears inside quotes in a description."""
    return str(value)
