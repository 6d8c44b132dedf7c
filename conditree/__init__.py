"""conditree: composable, self-describing conditions for test assertions.

conditree builds boolean predicates ("conditions") over structured values
and composes them into trees. Evaluating a tree yields both the outcome and
a description tree in which every node is marked passed or failed, so a
failing assertion reads like the structure it checks.

Core Components:
---------------
- Conditions: Predicate, VerboseCondition and the ``equals`` factory
- Groups: AllOf, AnyOf, Not, Nestable
- Collections: Contains, ElementAt
- Descriptions: DescriptionNode, EvaluationResult, RenderSettings
- Assertions: assert_that, SoftAssertions, soft_assertions

Quick Start:
-----------
    >>> import conditree as ct
    >>>
    >>> def first_name(expected):
    ...     return ct.equals("first name", expected, "first_name")
    >>>
    >>> def address(*conditions):
    ...     return ct.nestable("address", "address", *conditions)
    >>>
    >>> def town(expected):
    ...     return ct.equals("town", expected, "town")
    >>>
    >>> ct.assert_that(
    ...     customer,
    ...     ct.nestable("customer", first_name("John"), address(town("London"))),
    ... )
    Traceback (most recent call last):
    ...
    conditree.errors.ConditionNotMetError: Expecting actual:
      Customer(first_name='John', ...)
    to have:
    [✗] customer:[
       [✓] first name: 'John',
       [✗] address:[
          [✗] town: 'London' but was: 'Manchester'
       ]
    ]
"""

from .assertions import (
    Failure,
    SoftAssertions,
    assert_that,
    failure_message,
    soft_assertions,
)
from .conditions import (
    AllOf,
    AnyOf,
    Condition,
    Contains,
    ElementAt,
    Join,
    Nestable,
    Not,
    Predicate,
    VerboseCondition,
    all_of,
    any_of,
    condition,
    contains,
    element_at,
    equals,
    nestable,
    not_,
    verbose_condition,
)
from .description import (
    DEFAULT_RENDER_SETTINGS,
    DescriptionNode,
    EvaluationResult,
    RenderSettings,
    Status,
)
from .errors import (
    ConditionNotMetError,
    ConditreeError,
    ProjectionError,
    SoftAssertionError,
)
from .projection import FieldPath, Projection

__version__ = "0.1.0"

__all__ = [
    # Conditions - Base class
    "Condition",
    # Conditions - Leaves
    "Predicate",
    "VerboseCondition",
    # Conditions - Groups
    "Join",
    "AllOf",
    "AnyOf",
    "Not",
    "Nestable",
    # Conditions - Collections
    "Contains",
    "ElementAt",
    # Factories
    "condition",
    "verbose_condition",
    "equals",
    "all_of",
    "any_of",
    "not_",
    "nestable",
    "contains",
    "element_at",
    # Projections
    "FieldPath",
    "Projection",
    # Descriptions
    "Status",
    "DescriptionNode",
    "EvaluationResult",
    "RenderSettings",
    "DEFAULT_RENDER_SETTINGS",
    # Assertions
    "assert_that",
    "failure_message",
    "Failure",
    "SoftAssertions",
    "soft_assertions",
    # Errors
    "ConditreeError",
    "ProjectionError",
    "ConditionNotMetError",
    "SoftAssertionError",
    # Version
    "__version__",
]
