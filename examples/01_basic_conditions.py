"""Example 01: Basic Conditions

This example shows the leaf building blocks and how a failing evaluation
reports both the expectation and the actual value.

Topics Covered:
--------------
- Predicate and VerboseCondition
- The equals factory with attribute paths and callables
- Evaluating, rendering and asserting
"""

from datetime import date

from pydantic import BaseModel

import conditree as ct

# =============================================================================
# Domain Model
# =============================================================================


class Customer(BaseModel):
    """A customer record."""

    first_name: str
    last_name: str
    date_of_birth: date


john = Customer(first_name="John", last_name="Doe", date_of_birth=date(1980, 12, 11))

# =============================================================================
# Leaf Conditions
# =============================================================================

# A Predicate only knows whether it matched
born_in_the_eighties = ct.condition(
    lambda c: 1980 <= c.date_of_birth.year < 1990, "born in the eighties"
)

# equals() renders the actual value on failure
first_name_is_mike = ct.equals("first name", "Mike", "first_name")
last_name_is_doe = ct.equals("last name", "Doe", lambda c: c.last_name)


def main() -> None:
    print("=" * 80)
    print("Leaf conditions")
    print("=" * 80)

    for cond in (born_in_the_eighties, first_name_is_mike, last_name_is_doe):
        print(cond.evaluate(john).render())

    print()
    print("Assertion failure message:")
    try:
        ct.assert_that(john, first_name_is_mike)
    except ct.ConditionNotMetError as e:
        print(e)


if __name__ == "__main__":
    main()
