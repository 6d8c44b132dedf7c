"""Example 03: Collections and Soft Assertions

This example asserts on a list of customers and collects several failures
before reporting them together.

Topics Covered:
--------------
- contains() for existential checks
- element_at() for positional checks
- SoftAssertions and the soft_assertions() context manager
"""

from pydantic import BaseModel

import conditree as ct


class Customer(BaseModel):
    name: str
    town: str


def name(expected: str) -> ct.Condition[Customer]:
    return ct.equals("name", expected, "name")


def town(expected: str) -> ct.Condition[Customer]:
    return ct.equals("town", expected, "town")


def main() -> None:
    customers = [
        Customer(name="John", town="Manchester"),
        Customer(name="Mike", town="Glasgow"),
    ]

    print("=" * 80)
    print("contains")
    print("=" * 80)
    print(ct.contains(name("Mike")).evaluate(customers).render())
    print(ct.contains(name("Bob")).evaluate(customers).render())

    print()
    print("=" * 80)
    print("element_at")
    print("=" * 80)
    print(ct.element_at(1, name("Mike"), town("London")).evaluate(customers).render())

    print()
    print("=" * 80)
    print("Soft assertions")
    print("=" * 80)
    try:
        with ct.soft_assertions() as softly:
            softly.check(customers, ct.contains(name("Bob"))).check(
                customers, ct.element_at(0, town("Leeds"))
            )
    except ct.SoftAssertionError as e:
        print(e)


if __name__ == "__main__":
    main()
