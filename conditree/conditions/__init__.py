"""Conditions and combinators.

Condition Types:
---------------
1. Leaf conditions: test the value directly
   - Predicate: boolean function plus a label
   - VerboseCondition: also renders the actual value on failure

2. Group conditions: combine other conditions
   - AllOf: every child must match
   - AnyOf: at least one child must match
   - Not: negates a child
   - Nestable: evaluates a group against a projection of the value

3. Collection conditions: lift element conditions to containers
   - Contains: some element matches
   - ElementAt: the element at an index matches a group

Factory functions (condition, verbose_condition, equals, all_of, any_of,
not_, nestable, contains, element_at) are the usual way to build trees.
"""

from .base import Condition
from .collection_conditions import Contains, ElementAt
from .composite_conditions import AllOf, AnyOf, Join, Nestable, Not
from .factory import (
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
from .leaf_conditions import Predicate, VerboseCondition

__all__ = [
    # Base class
    "Condition",
    # Leaf conditions
    "Predicate",
    "VerboseCondition",
    # Group conditions
    "Join",
    "AllOf",
    "AnyOf",
    "Not",
    "Nestable",
    # Collection conditions
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
]
