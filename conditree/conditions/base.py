"""Base class for conditions.

This module defines the abstract base class every condition implements.
A condition pairs a pure predicate with a human readable description and,
when evaluated, produces both the boolean outcome and a description tree
annotated with the outcome of every node.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from ..description import DescriptionNode, EvaluationResult

T = TypeVar("T")


class Condition(ABC, Generic[T]):
    """Abstract base class for all conditions.

    A Condition is an immutable, named predicate over values of type ``T``.
    Conditions hold no per-evaluation state: the same instance can be
    evaluated any number of times, from any number of threads, and
    composing conditions never mutates them.

    There are three families of conditions:
    - Leaf conditions (Predicate, VerboseCondition): test the value directly
    - Group conditions (AllOf, AnyOf, Not, Nestable): combine other conditions
    - Collection conditions (Contains, ElementAt): lift element conditions to
      iterables and sequences

    Subclasses must implement:
    - description: the static label of the condition
    - evaluate(value): outcome plus annotated description tree
    - describe(): the description tree without any outcome
    - __repr__()
    """

    @property
    @abstractmethod
    def description(self) -> str:
        """The static label of this condition, e.g. ``"first name: 'John'"``."""
        pass

    @abstractmethod
    def evaluate(self, value: T) -> EvaluationResult:
        """Evaluate the condition on a value.

        Every child of a group is evaluated, whatever the outcome of its
        siblings, so the returned tree is always complete.

        Args:
            value: The actual value under test.

        Returns:
            The outcome and its description tree.

        Raises:
            ProjectionError: If a projection cannot produce a value, e.g. an
                index past the end of a sequence.
        """
        pass

    @abstractmethod
    def describe(self) -> DescriptionNode:
        """Return the description tree of this condition with UNKNOWN status."""
        pass

    def matches(self, value: T) -> bool:
        """Return whether `value` satisfies this condition."""
        return self.evaluate(value).matched

    def __call__(self, value: T) -> bool:
        return self.matches(value)

    @abstractmethod
    def __repr__(self) -> str:
        pass


def check_label(label: Any) -> str:
    """Validate a group label.

    Raises:
        TypeError: If `label` is not a string.
        ValueError: If `label` is empty or only whitespace.
    """
    if not isinstance(label, str):
        raise TypeError(f"label must be str, got {type(label).__name__}")
    if label.strip() == "":
        raise ValueError("label cannot be empty")
    return label


def check_conditions(conditions: Any) -> tuple[Condition, ...]:
    """Validate and freeze an iterable of child conditions.

    Raises:
        TypeError: If `conditions` is not iterable or contains anything
            other than Condition instances.
    """
    if isinstance(conditions, (str, bytes)):
        raise TypeError(
            f"conditions must be iterable, got {type(conditions).__name__}"
        )
    try:
        conditions_tuple = tuple(conditions)
    except TypeError:
        raise TypeError(
            f"conditions must be iterable, got {type(conditions).__name__}"
        ) from None

    for i, cond in enumerate(conditions_tuple):
        if not isinstance(cond, Condition):
            raise TypeError(
                f"All conditions must be Condition instances, "
                f"got {type(cond).__name__} at index {i}"
            )

    return conditions_tuple
