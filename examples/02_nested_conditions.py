"""Example 02: Nested Conditions

This example builds a small vocabulary of field conditions and composes
them into a customer tree with a nested address group.

Topics Covered:
--------------
- nestable() with and without a projection
- Reusing condition factories across trees
- Reading a nested failure tree
- Dumping the description tree to JSON
"""

from datetime import date

from pydantic import BaseModel

import conditree as ct

# =============================================================================
# Domain Model
# =============================================================================


class Postcode(BaseModel):
    value: str


class Address(BaseModel):
    line1: str
    town: str
    postcode: Postcode


class Customer(BaseModel):
    first_name: str
    last_name: str
    date_of_birth: date
    address: Address


# =============================================================================
# Condition Vocabulary
# =============================================================================


def first_name(expected: str) -> ct.Condition[Customer]:
    return ct.equals("first name", expected, "first_name")


def last_name(expected: str) -> ct.Condition[Customer]:
    return ct.equals("last name", expected, "last_name")


def line1(expected: str) -> ct.Condition[Address]:
    return ct.equals("line 1", expected, "line1")


def town(expected: str) -> ct.Condition[Address]:
    return ct.equals("town", expected, "town")


def postcode(expected: str) -> ct.Condition[Address]:
    return ct.equals("postcode", expected, "postcode.value")


def address(*conditions: ct.Condition[Address]) -> ct.Condition[Customer]:
    # Projected: the nested conditions see customer.address
    return ct.nestable("address", "address", *conditions)


def customer(*conditions: ct.Condition[Customer]) -> ct.Condition[Customer]:
    # Not projected: only adds a named node around the group
    return ct.nestable("customer", *conditions)


def main() -> None:
    john = Customer(
        first_name="John",
        last_name="Doe",
        date_of_birth=date(1980, 12, 11),
        address=Address(
            line1="12 Chestnut close",
            town="Manchester",
            postcode=Postcode(value="M15 5HT"),
        ),
    )

    expected = customer(
        first_name("John"),
        last_name("Tilbury"),
        address(
            line1("12 Chestnut close"),
            town("London"),
            postcode("M15 5HT"),
        ),
    )

    result = expected.evaluate(john)

    print("=" * 80)
    print("Nested failure tree")
    print("=" * 80)
    print(result.render())

    print()
    print("Failed leaves:")
    for node in result.node.failed_leaves():
        print(f"  {node.label} {node.detail}")

    print()
    print("As JSON:")
    print(result.node.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
