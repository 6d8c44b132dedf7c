"""Conditions over collections.

These lift a condition on an element type to a condition on a container
of that element type:

- Contains: at least one element satisfies the element condition.
- ElementAt: the element at a fixed index satisfies a group of conditions.
"""

from collections.abc import Iterable, Sequence
from typing import Any

from ..description import DescriptionNode, EvaluationResult, Status
from ..errors import ProjectionError
from .base import Condition, T
from .composite_conditions import Nestable


class Contains(Condition[Iterable[T]]):
    """Condition matching iterables with at least one matching element.

    The search is existential, so the description tree does not list every
    element's outcome. It shows the sought condition, unevaluated, as the
    single requirement under a ``contains`` node. An empty iterable never
    matches.

    Examples:
        >>> cond = Contains(equals("first name", "Mike", "first_name"))
        >>> cond([john, mike])
        True
        >>> print(cond.evaluate([john]).render())
        [✗] contains:[
           first name: 'Mike'
        ]
    """

    label = "contains"

    def __init__(self, condition: Condition[T]) -> None:
        """Initialize a Contains condition.

        Args:
            condition: The condition at least one element must satisfy.

        Raises:
            TypeError: If condition is not a Condition instance.
        """
        if not isinstance(condition, Condition):
            raise TypeError(
                f"condition must be a Condition instance, "
                f"got {type(condition).__name__}"
            )
        self._condition = condition

    @property
    def condition(self) -> Condition[T]:
        """The condition sought among the elements."""
        return self._condition

    @property
    def description(self) -> str:
        return self.label

    def evaluate(self, value: Iterable[T]) -> EvaluationResult:
        if not isinstance(value, Iterable) or isinstance(value, (str, bytes)):
            raise ProjectionError(
                self.label, f"expected an iterable, got {type(value).__name__}"
            )

        matched = any(self._condition.matches(element) for element in value)
        node = DescriptionNode(
            label=self.label,
            status=Status.of(matched),
            children=(self._condition.describe(),),
            group=True,
        )
        return EvaluationResult(matched=matched, node=node)

    def describe(self) -> DescriptionNode:
        return DescriptionNode(
            label=self.label,
            children=(self._condition.describe(),),
            group=True,
        )

    def __repr__(self) -> str:
        return f"Contains({self._condition!r})"


class ElementAt(Nestable[Sequence[T], T]):
    """Group of conditions on the element at a fixed index of a sequence.

    Indexing is 0-based. A negative index is rejected at construction; an
    index past the end of the actual sequence raises a ProjectionError on
    evaluation, since the assertion is malformed rather than unmet.

    Examples:
        >>> cond = ElementAt(1, [equals("first name", "Mike", "first_name")])
        >>> print(cond.evaluate([john, mike]).render())
        [✓] element at 1:[
           [✓] first name: 'Mike'
        ]
    """

    def __init__(self, index: int, conditions: Iterable[Condition[T]]) -> None:
        """Initialize an ElementAt condition.

        Args:
            index: 0-based position of the element.
            conditions: Conditions the element must satisfy.

        Raises:
            TypeError: If index is not an int or conditions are invalid.
            ValueError: If index is negative.
        """
        if not isinstance(index, int) or isinstance(index, bool):
            raise TypeError(f"index must be int, got {type(index).__name__}")
        if index < 0:
            raise ValueError(f"index must be non-negative, got {index}")

        self._index = index
        super().__init__(f"element at {index}", conditions, project=self._element)

    @property
    def index(self) -> int:
        """The position of the element under test."""
        return self._index

    def _element(self, elements: Sequence[T]) -> Any:
        if not isinstance(elements, Sequence) or isinstance(elements, (str, bytes)):
            raise TypeError(f"expected a sequence, got {type(elements).__name__}")
        if self._index >= len(elements):
            raise IndexError(
                f"index {self._index} out of range for sequence of "
                f"length {len(elements)}"
            )
        return elements[self._index]

    def __repr__(self) -> str:
        return f"ElementAt({self._index}, {self.conditions!r})"
