"""User-facing factory functions for building conditions.

These functions are the main way to construct condition trees. They take
children as varargs so that trees read like the structure they check:

    >>> import conditree as ct
    >>>
    >>> customer = ct.nestable(
    ...     "customer",
    ...     ct.equals("first name", "John", "first_name"),
    ...     ct.nestable(
    ...         "address",
    ...         "address",
    ...         ct.equals("town", "London", "town"),
    ...     ),
    ... )

Every factory validates its arguments immediately and raises TypeError or
ValueError on malformed input, so a broken tree fails where it is built
rather than where it is first evaluated.
"""

from collections.abc import Callable
from typing import Any

from ..projection import FieldPath, Projection
from ..utils import format_value, is_comparable
from .base import Condition
from .collection_conditions import Contains, ElementAt
from .composite_conditions import AllOf, AnyOf, Nestable, Not
from .leaf_conditions import Predicate, VerboseCondition


def condition(test: Callable[[Any], bool], description: str) -> Predicate:
    """Create a leaf condition from a boolean function.

    Args:
        test: Pure function returning True when the value matches.
        description: Label shown in the description tree.

    Returns:
        A Predicate.
    """
    return Predicate(test, description)


def verbose_condition(
    test: Callable[[Any], bool],
    description: str,
    actual_renderer: Callable[[Any], Any],
) -> VerboseCondition:
    """Create a leaf condition that renders the actual value on failure.

    Args:
        test: Pure function returning True when the value matches.
        description: The expectation shown in the tree.
        actual_renderer: Function producing the failure detail.

    Returns:
        A VerboseCondition.
    """
    return VerboseCondition(test, description, actual_renderer)


def equals(
    description: str,
    expected: Any,
    project: "Callable[[Any], Any] | str | FieldPath",
) -> VerboseCondition:
    """Create a condition checking that a projected field equals a value.

    This is the single place "field X equals Y" is defined. Equality is the
    expected value's own ``==``, so dataclasses, pydantic models and other
    records compare by content while enum members compare by identity.

    Args:
        description: Name of the field, e.g. ``"first name"``.
        expected: The expected field value. Must equal itself.
        project: Callable or dotted attribute path extracting the field.

    Returns:
        A VerboseCondition labelled ``"<description>: '<expected>'"`` whose
        failure detail is ``"but was: '<actual>'"``.

    Raises:
        TypeError: If project is neither callable nor a path.
        ValueError: If expected does not equal itself (NaN), or project is a
            malformed path.

    Examples:
        >>> town = equals("town", "London", "address.town")
        >>> print(town.evaluate(john_in_manchester).render())
        [✗] town: 'London' but was: 'Manchester'
    """
    if not is_comparable(expected):
        raise ValueError(f"expected must equal itself, got {expected!r}")
    projection = Projection(project)
    label = f"{description}: '{format_value(expected)}'"

    def test(value: Any) -> bool:
        return bool(expected == projection.apply(value, label))

    def actual_renderer(value: Any) -> str:
        return f"but was: '{format_value(projection.apply(value, label))}'"

    return VerboseCondition(test, label, actual_renderer)


def all_of(label: str, *conditions: Condition) -> AllOf:
    """Create a labelled group matching when every condition matches.

    Args:
        label: Group label.
        *conditions: Child conditions, rendered in this order.

    Returns:
        An AllOf condition. With no conditions it always matches.
    """
    return AllOf(conditions, label=label)


def any_of(label: str, *conditions: Condition) -> AnyOf:
    """Create a labelled group matching when at least one condition matches."""
    return AnyOf(conditions, label=label)


def not_(condition: Condition) -> Not:
    """Negate a condition."""
    return Not(condition)


def nestable(label: str, *args: Any) -> Nestable:
    """Create a labelled group, optionally over a projection of the value.

    Two call forms are accepted:

        nestable(label, *conditions)
        nestable(label, project, *conditions)

    where `project` is a callable or dotted attribute path. The first form
    only adds a named node; the second evaluates the conditions against
    ``project(value)``.

    Args:
        label: Group label.
        *args: An optional projection followed by the nested conditions.

    Returns:
        A Nestable condition.

    Raises:
        TypeError: If the projection is invalid or a child is not a Condition.
        ValueError: If label is empty, or a projection is given without any
            nested conditions.
    """
    if args and not isinstance(args[0], Condition):
        if len(args) == 1:
            # Most likely a condition factory passed without being called
            raise ValueError(
                f"nestable {label!r} got a projection ({args[0]!r}) but no "
                "conditions to evaluate against it"
            )
        return Nestable(label, args[1:], project=args[0])
    return Nestable(label, args)


def contains(condition: Condition) -> Contains:
    """Create a condition matching iterables with a matching element."""
    return Contains(condition)


def element_at(index: int, *conditions: Condition) -> ElementAt:
    """Create a group of conditions on the element at `index`.

    Raises:
        TypeError: If index is not an int.
        ValueError: If index is negative.
    """
    return ElementAt(index, conditions)
