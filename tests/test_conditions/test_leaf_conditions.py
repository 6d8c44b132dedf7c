"""Tests for leaf conditions."""

import pytest

from conditree import (
    Predicate,
    Status,
    VerboseCondition,
    condition,
    verbose_condition,
)


class TestPredicate:
    """Test Predicate condition."""

    def test_matches(self):
        """Test basic matching."""
        cond = Predicate(lambda x: x > 5, "larger than 5")
        assert cond.matches(7) is True
        assert cond.matches(3) is False

    def test_callable(self):
        """Test that conditions are callable like predicates."""
        cond = Predicate(lambda x: x > 5, "larger than 5")
        assert cond(7) is True
        assert cond(3) is False

    def test_evaluate_passed(self):
        """Test the node of a passing evaluation."""
        result = Predicate(lambda x: x > 5, "larger than 5").evaluate(7)
        assert result.matched is True
        assert result.node.label == "larger than 5"
        assert result.node.status is Status.PASSED
        assert result.node.detail is None
        assert result.node.children == ()

    def test_evaluate_failed(self):
        """Test the node of a failing evaluation."""
        result = Predicate(lambda x: x > 5, "larger than 5").evaluate(3)
        assert result.matched is False
        assert result.node.status is Status.FAILED
        assert result.node.detail is None

    def test_describe(self):
        """Test the static description has no status."""
        node = Predicate(lambda x: x > 5, "larger than 5").describe()
        assert node.label == "larger than 5"
        assert node.status is Status.UNKNOWN

    def test_description(self):
        """Test the description property."""
        assert Predicate(lambda x: True, "anything").description == "anything"

    def test_non_bool_return_error(self):
        """Test error when the test function does not return a bool."""
        cond = Predicate(lambda x: x, "identity")
        with pytest.raises(TypeError, match="must return bool"):
            cond.evaluate(1)

    def test_non_callable_error(self):
        """Test error with a non-callable test."""
        with pytest.raises(TypeError, match="must be callable"):
            Predicate("not callable", "label")

    def test_empty_description_error(self):
        """Test error with an empty description."""
        with pytest.raises(ValueError, match="cannot be empty"):
            Predicate(lambda x: True, "  ")

    def test_non_string_description_error(self):
        """Test error with a non-string description."""
        with pytest.raises(TypeError, match="must be str"):
            Predicate(lambda x: True, 42)

    def test_repr(self):
        """Test string representation."""

        def is_positive(x):
            return x > 0

        cond = Predicate(is_positive, "positive")
        assert repr(cond) == "Predicate('positive', test=is_positive(x))"

    def test_factory(self):
        """Test the condition factory."""
        cond = condition(lambda s: s.startswith("J"), "starts with J")
        assert isinstance(cond, Predicate)
        assert cond("John") is True


class TestVerboseCondition:
    """Test VerboseCondition."""

    @pytest.fixture
    def cond(self):
        return VerboseCondition(
            lambda name: name == "Mike",
            "first name: 'Mike'",
            lambda name: f"but was: '{name}'",
        )

    def test_detail_on_failure(self, cond):
        """Test that the actual value is rendered on failure."""
        result = cond.evaluate("John")
        assert result.matched is False
        assert result.node.detail == "but was: 'John'"

    def test_no_detail_on_success(self, cond):
        """Test that nothing is rendered on success."""
        result = cond.evaluate("Mike")
        assert result.matched is True
        assert result.node.detail is None

    def test_renderer_only_called_on_failure(self):
        """Test that the actual renderer is not invoked for passing values."""
        calls = []

        def renderer(value):
            calls.append(value)
            return str(value)

        cond = VerboseCondition(lambda x: x == 1, "one", renderer)
        cond.evaluate(1)
        assert calls == []
        cond.evaluate(2)
        assert calls == [2]

    def test_renderer_result_is_stringified(self):
        """Test that a non-string renderer result is converted."""
        cond = VerboseCondition(lambda x: False, "never", lambda x: x * 2)
        assert cond.evaluate(21).node.detail == "42"

    def test_render(self, cond):
        """Test the rendered text of a failing evaluation."""
        assert cond.evaluate("John").render() == "[✗] first name: 'Mike' but was: 'John'"
        assert cond.evaluate("Mike").render() == "[✓] first name: 'Mike'"

    def test_repeated_evaluation(self, cond):
        """Test that evaluating twice yields identical results."""
        first = cond.evaluate("John")
        second = cond.evaluate("John")
        assert first == second
        assert first.render() == second.render()

    def test_non_callable_renderer_error(self):
        """Test error with a non-callable actual renderer."""
        with pytest.raises(TypeError, match="actual_renderer must be callable"):
            VerboseCondition(lambda x: True, "label", "nope")

    def test_repr(self, cond):
        """Test string representation."""
        assert repr(cond) == "VerboseCondition(\"first name: 'Mike'\")"

    def test_factory(self):
        """Test the verbose_condition factory."""
        cond = verbose_condition(lambda x: x > 0, "positive", lambda x: f"got {x}")
        assert isinstance(cond, VerboseCondition)
        assert cond.evaluate(-1).node.detail == "got -1"
