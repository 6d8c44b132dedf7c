"""Leaf conditions that test a value directly.

Predicate is the plain building block: a callable plus a label. On failure
it only says *that* the value did not match.

VerboseCondition also renders the actual value on failure, so the message
reads ``first name: 'Mike' but was: 'John'`` without the caller having to
print the whole enclosing object.
"""

from collections.abc import Callable
import inspect
from typing import Any

from ..description import DescriptionNode, EvaluationResult, Status
from .base import Condition, T, check_label


class Predicate(Condition[T]):
    """Condition defined by a boolean function and a description.

    Examples:
        >>> adult = Predicate(lambda c: c.age >= 18, "adult")
        >>> adult(customer)
        True
    """

    def __init__(self, test: Callable[[T], bool], description: str) -> None:
        """Initialize a Predicate.

        Args:
            test: Pure function returning True when the value matches.
            description: Label shown in the description tree.

        Raises:
            TypeError: If `test` is not callable or `description` is not a str.
            ValueError: If `description` is empty.
        """
        if not callable(test):
            raise TypeError(f"test must be callable, got {type(test).__name__}")
        self._test = test
        self._description = check_label(description)

    @property
    def description(self) -> str:
        return self._description

    @property
    def test(self) -> Callable[[T], bool]:
        """The user-provided test function."""
        return self._test

    def _run_test(self, value: T) -> bool:
        result = self._test(value)
        if not isinstance(result, bool):
            raise TypeError(
                f"Condition {self._description!r} must return bool, "
                f"got {type(result).__name__}"
            )
        return result

    def evaluate(self, value: T) -> EvaluationResult:
        matched = self._run_test(value)
        node = DescriptionNode(label=self._description, status=Status.of(matched))
        return EvaluationResult(matched=matched, node=node)

    def describe(self) -> DescriptionNode:
        return DescriptionNode(label=self._description)

    def __repr__(self) -> str:
        try:
            func_name = getattr(self._test, "__name__", "<lambda>")
            sig = inspect.signature(self._test)
            return f"Predicate({self._description!r}, test={func_name}{sig})"
        except (ValueError, TypeError):
            return f"Predicate({self._description!r})"


class VerboseCondition(Predicate[T]):
    """Predicate that also renders the actual value when it fails.

    The actual renderer is only called for failing evaluations; its output
    becomes the node's ``detail`` and is appended to the label when rendered.

    Examples:
        >>> cond = VerboseCondition(
        ...     lambda c: c.first_name == "Mike",
        ...     "first name: 'Mike'",
        ...     lambda c: f"but was: '{c.first_name}'",
        ... )
        >>> print(cond.evaluate(john).render())
        [✗] first name: 'Mike' but was: 'John'
    """

    def __init__(
        self,
        test: Callable[[T], bool],
        description: str,
        actual_renderer: Callable[[T], Any],
    ) -> None:
        """Initialize a VerboseCondition.

        Args:
            test: Pure function returning True when the value matches.
            description: The expectation, e.g. ``"town: 'London'"``.
            actual_renderer: Function producing the failure detail from the
                actual value. Its result is converted with str().

        Raises:
            TypeError: If `test` or `actual_renderer` is not callable.
            ValueError: If `description` is empty.
        """
        super().__init__(test, description)
        if not callable(actual_renderer):
            raise TypeError(
                "actual_renderer must be callable, "
                f"got {type(actual_renderer).__name__}"
            )
        self._actual_renderer = actual_renderer

    @property
    def actual_renderer(self) -> Callable[[T], Any]:
        """The function rendering the actual value on failure."""
        return self._actual_renderer

    def evaluate(self, value: T) -> EvaluationResult:
        matched = self._run_test(value)
        detail = None if matched else str(self._actual_renderer(value))
        node = DescriptionNode(
            label=self._description, status=Status.of(matched), detail=detail
        )
        return EvaluationResult(matched=matched, node=node)

    def __repr__(self) -> str:
        return f"VerboseCondition({self._description!r})"
