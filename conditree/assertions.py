"""Running conditions as test assertions.

Two ways of turning an evaluation into a test outcome:

- assert_that(actual, condition) raises ConditionNotMetError immediately.
- SoftAssertions records any number of evaluations and raises a single
  SoftAssertionError listing every failure when assert_all() is called.

Examples:
    >>> import conditree as ct
    >>>
    >>> ct.assert_that(customer, ct.equals("first name", "John", "first_name"))
    >>>
    >>> with ct.soft_assertions() as softly:
    ...     softly.check(customer, first_name("John")).check(
    ...         customer, town("London")
    ...     )
"""

from collections.abc import Iterator
from contextlib import contextmanager
import logging
import threading
from typing import Any, NamedTuple, Self

from .conditions import Condition
from .description import EvaluationResult, RenderSettings
from .errors import ConditionNotMetError, SoftAssertionError

logger = logging.getLogger(__name__)


def _indent(text: str, prefix: str) -> str:
    return "\n".join(f"{prefix}{line}" for line in text.splitlines())


def failure_message(
    actual: Any, result: EvaluationResult, settings: RenderSettings | None = None
) -> str:
    """Format the message shown when `actual` does not satisfy a condition."""
    return (
        "Expecting actual:\n"
        f"{_indent(repr(actual), '  ')}\n"
        "to have:\n"
        f"{result.render(settings)}"
    )


def assert_that(
    actual: Any, condition: Condition, settings: RenderSettings | None = None
) -> EvaluationResult:
    """Assert that `actual` satisfies `condition`.

    Args:
        actual: The value under test.
        condition: The condition to evaluate.
        settings: Rendering options for the failure message.

    Returns:
        The evaluation result, for callers that want to inspect it.

    Raises:
        TypeError: If condition is not a Condition instance.
        ConditionNotMetError: If the condition does not match.
        ProjectionError: If the condition tree is malformed for `actual`.
    """
    if not isinstance(condition, Condition):
        raise TypeError(
            f"condition must be a Condition instance, got {type(condition).__name__}"
        )

    result = condition.evaluate(actual)
    if not result.matched:
        logger.debug("Condition %r not met by %r", condition.description, actual)
        raise ConditionNotMetError(
            actual, result, failure_message(actual, result, settings)
        )
    return result


class Failure(NamedTuple):
    """A failed evaluation recorded by SoftAssertions."""

    actual: Any
    result: EvaluationResult


class SoftAssertions:
    """Caller-owned accumulator of evaluation results.

    Each call to check() evaluates a condition and records the outcome;
    nothing is raised until assert_all(). Recording is serialised with a
    lock, so one collector can be shared between threads.

    Examples:
        >>> softly = SoftAssertions()
        >>> softly.check(john, first_name("Mike")).check(john, town("Leeds"))
        >>> softly.assert_all()  # raises, listing both failures
    """

    def __init__(self, settings: RenderSettings | None = None) -> None:
        self._settings = settings
        self._lock = threading.Lock()
        self._results: list[tuple[Any, EvaluationResult]] = []

    def check(self, actual: Any, condition: Condition) -> Self:
        """Evaluate `condition` against `actual` and record the result.

        Returns:
            This collector, for chaining.

        Raises:
            TypeError: If condition is not a Condition instance.
            ProjectionError: If the condition tree is malformed for `actual`.
        """
        if not isinstance(condition, Condition):
            raise TypeError(
                f"condition must be a Condition instance, "
                f"got {type(condition).__name__}"
            )

        result = condition.evaluate(actual)
        with self._lock:
            self._results.append((actual, result))
        if not result.matched:
            logger.debug("Recorded soft failure for %r", condition.description)
        return self

    @property
    def results(self) -> list[EvaluationResult]:
        """Every recorded result, in recording order."""
        with self._lock:
            return [result for _, result in self._results]

    @property
    def failures(self) -> list[Failure]:
        """The failed evaluations, in recording order."""
        with self._lock:
            return [
                Failure(actual, result)
                for actual, result in self._results
                if not result.matched
            ]

    @property
    def has_failures(self) -> bool:
        return bool(self.failures)

    def assert_all(self) -> None:
        """Raise one SoftAssertionError if any recorded evaluation failed.

        Raises:
            SoftAssertionError: Listing every failure in recording order.
        """
        failures = self.failures
        if not failures:
            return

        logger.debug("Raising %d soft assertion failure(s)", len(failures))
        sections = [f"Multiple Failures ({len(failures)} failure(s))"]
        for i, failure in enumerate(failures, start=1):
            message = failure_message(failure.actual, failure.result, self._settings)
            sections.append(f"-- failure {i} --\n{message}")
        raise SoftAssertionError(failures, "\n".join(sections))


@contextmanager
def soft_assertions(
    settings: RenderSettings | None = None,
) -> Iterator[SoftAssertions]:
    """Yield a SoftAssertions collector and assert on it when the block exits.

    If the block itself raises, that exception propagates unchanged and the
    collected failures are not reported.
    """
    softly = SoftAssertions(settings)
    yield softly
    softly.assert_all()
