"""Group conditions combining other conditions.

This module provides the conditions that give description trees their
shape: AllOf and AnyOf combine same-typed children under a label, Not
negates a child, and Nestable projects the actual value to one of its parts
before evaluating a nested group against it.

Key Design:
----------
- Every child is evaluated on every evaluation. There is no short-circuit,
  so a failing first child still leaves the full tree in the diagnostics.
- Children keep their construction order in the rendered tree.
- Conditions are never mutated; the child tuple is frozen at construction.

Examples:
    >>> address = nestable(
    ...     "address",
    ...     "address",
    ...     equals("town", "London", "town"),
    ...     equals("line 1", "12 Chestnut close", "line1"),
    ... )
    >>> customer = nestable(
    ...     "customer",
    ...     equals("first name", "John", "first_name"),
    ...     address,
    ... )
    >>> print(customer.evaluate(john_in_manchester).render())
    [✗] customer:[
       [✓] first name: 'John',
       [✗] address:[
          [✗] town: 'London' but was: 'Manchester',
          [✓] line 1: '12 Chestnut close'
       ]
    ]
"""

from abc import abstractmethod
from collections.abc import Callable, Iterable
from typing import Any, Generic

from ..description import DescriptionNode, EvaluationResult, Status
from ..projection import FieldPath, Projection, U
from .base import Condition, T, check_conditions, check_label


class Join(Condition[T]):
    """Base class for labelled groups of same-typed conditions.

    Subclasses only decide how the children's outcomes combine.
    """

    default_label = "join"

    def __init__(
        self, conditions: Iterable[Condition[T]], label: str | None = None
    ) -> None:
        """Initialize a group.

        Args:
            conditions: Child conditions, evaluated in this order.
            label: Group label. Defaults to the class's default_label.

        Raises:
            TypeError: If conditions is not iterable or contains non-Conditions.
            ValueError: If label is empty.
        """
        self._label = check_label(self.default_label if label is None else label)
        self._conditions = check_conditions(conditions)

    @property
    def description(self) -> str:
        return self._label

    @property
    def conditions(self) -> list[Condition[T]]:
        """Get a copy of the child conditions."""
        return list(self._conditions)

    @abstractmethod
    def combine(self, outcomes: list[bool]) -> bool:
        """Combine the children's outcomes into the group's outcome."""
        pass

    def evaluate(self, value: T) -> EvaluationResult:
        # A list, not a generator: every child must run
        results = [condition.evaluate(value) for condition in self._conditions]
        matched = self.combine([result.matched for result in results])
        node = DescriptionNode(
            label=self._label,
            status=Status.of(matched),
            children=tuple(result.node for result in results),
            group=True,
        )
        return EvaluationResult(matched=matched, node=node)

    def describe(self) -> DescriptionNode:
        return DescriptionNode(
            label=self._label,
            children=tuple(condition.describe() for condition in self._conditions),
            group=True,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._label!r}, {list(self._conditions)!r})"


class AllOf(Join[T]):
    """Logical AND of a group of conditions.

    Matches only if every child matches. An empty group matches.

    Examples:
        >>> cond = AllOf(
        ...     [equals("first name", "John", "first_name"),
        ...      equals("last name", "Doe", "last_name")],
        ...     label="name",
        ... )
    """

    default_label = "all of"

    def combine(self, outcomes: list[bool]) -> bool:
        return all(outcomes)


class AnyOf(Join[T]):
    """Logical OR of a group of conditions.

    Matches if at least one child matches. An empty group never matches.
    All children are still evaluated and shown.
    """

    default_label = "any of"

    def combine(self, outcomes: list[bool]) -> bool:
        return any(outcomes)


class Not(Condition[T]):
    """Logical NOT (negation) of a condition.

    The node is labelled ``not <child label>`` and keeps the child's node so
    the reader can see what the child made of the value.
    """

    def __init__(self, condition: Condition[T]) -> None:
        """Initialize a Not condition.

        Args:
            condition: The Condition instance to negate.

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
        """Get the child condition being negated."""
        return self._condition

    @property
    def description(self) -> str:
        return f"not {self._condition.description}"

    def evaluate(self, value: T) -> EvaluationResult:
        inner = self._condition.evaluate(value)
        matched = not inner.matched
        node = DescriptionNode(
            label=self.description,
            status=Status.of(matched),
            children=(inner.node,),
            group=True,
        )
        return EvaluationResult(matched=matched, node=node)

    def describe(self) -> DescriptionNode:
        return DescriptionNode(
            label=self.description,
            children=(self._condition.describe(),),
            group=True,
        )

    def __repr__(self) -> str:
        return f"Not({self._condition!r})"


class Nestable(Condition[T], Generic[T, U]):
    """Labelled group evaluated against a projection of the actual value.

    ``Nestable("address", conditions, project="address")`` evaluates every
    address condition against ``customer.address`` and renders them as one
    sub-tree. Since a nested condition can itself be Nestable, trees can go
    arbitrarily deep.

    Without a projection the group is evaluated against the value itself,
    which is useful to wrap a whole top-level group under one named node.

    The projection is applied exactly once per evaluation. It is not
    special-cased for None: if the projected part can be absent, compose an
    explicit presence condition.
    """

    def __init__(
        self,
        label: str,
        conditions: Iterable[Condition[U]],
        project: "Callable[[T], U] | str | FieldPath | None" = None,
    ) -> None:
        """Initialize a Nestable condition.

        Args:
            label: Label of the group node.
            conditions: Conditions evaluated against the projected value.
            project: Callable or dotted attribute path producing the nested
                value. None evaluates the conditions against the value itself.

        Raises:
            TypeError: If project is neither callable nor a path, or the
                conditions are not Condition instances.
            ValueError: If label is empty or project is a malformed path.
        """
        self._group: AllOf[U] = AllOf(conditions, label=label)
        self._projection: Projection[T, U] | None = (
            None if project is None else Projection(project)
        )

    @property
    def description(self) -> str:
        return self._group.description

    @property
    def conditions(self) -> list[Condition[U]]:
        """Get a copy of the nested conditions."""
        return self._group.conditions

    @property
    def projection(self) -> Projection[T, U] | None:
        """The projection applied before evaluation, if any."""
        return self._projection

    def project(self, value: T) -> Any:
        """Return the value the nested conditions are evaluated against.

        Raises:
            ProjectionError: If the projection cannot produce a value.
        """
        if self._projection is None:
            return value
        return self._projection.apply(value, self.description)

    def evaluate(self, value: T) -> EvaluationResult:
        return self._group.evaluate(self.project(value))

    def describe(self) -> DescriptionNode:
        return self._group.describe()

    def __repr__(self) -> str:
        return (
            f"Nestable({self.description!r}, {self.conditions!r}, "
            f"project={self._projection!r})"
        )
