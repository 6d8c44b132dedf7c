"""Exceptions raised by conditree."""

from typing import Any


class ConditreeError(Exception):
    """Base class for all conditree errors."""


class ProjectionError(ConditreeError):
    """A projection could not produce a value from the actual value.

    This signals a malformed assertion (a missing attribute, an index past
    the end of a sequence) as opposed to a condition that simply did not
    match.
    """

    def __init__(self, label: str, reason: str) -> None:
        self.label = label
        self.reason = reason
        super().__init__(f"Cannot evaluate {label!r}: {reason}")


class ConditionNotMetError(ConditreeError, AssertionError):
    """Raised by :func:`conditree.assert_that` when a condition fails."""

    def __init__(self, actual: Any, result: Any, message: str) -> None:
        self.actual = actual
        self.result = result
        super().__init__(message)


class SoftAssertionError(ConditreeError, AssertionError):
    """Aggregate of every failure recorded by a SoftAssertions collector."""

    def __init__(self, failures: list[Any], message: str) -> None:
        self.failures = failures
        super().__init__(message)
