"""Tests for group conditions."""

import pytest

from conditree import (
    AllOf,
    AnyOf,
    Not,
    Predicate,
    Status,
    all_of,
    any_of,
    not_,
)


def larger_than(n):
    return Predicate(lambda x: x > n, f"larger than {n}")


def smaller_than(n):
    return Predicate(lambda x: x < n, f"smaller than {n}")


def counting(log, name, outcome):
    """Predicate recording each call in `log`."""

    def test(value):
        log.append(name)
        return outcome

    return Predicate(test, name)


class TestAllOf:
    """Test AllOf composition."""

    def test_all_true(self):
        """Test AllOf when all conditions are true."""
        cond = all_of("range", larger_than(5), smaller_than(10))
        assert cond(7) is True

    def test_one_false(self):
        """Test AllOf when one condition is false."""
        cond = all_of("range", larger_than(5), smaller_than(10))
        assert cond(3) is False
        assert cond(12) is False

    def test_empty_matches(self):
        """Test that an empty group matches vacuously."""
        result = all_of("nothing").evaluate(42)
        assert result.matched is True
        assert result.node.children == ()
        assert result.node.status is Status.PASSED

    def test_single_condition(self):
        """Test AllOf with a single condition."""
        assert all_of("one", larger_than(0))(1) is True

    def test_children_in_construction_order(self):
        """Test that child nodes keep construction order."""
        cond = all_of("range", smaller_than(10), larger_than(5), larger_than(0))
        result = cond.evaluate(3)
        labels = [child.label for child in result.node.children]
        assert labels == ["smaller than 10", "larger than 5", "larger than 0"]
        statuses = [child.status for child in result.node.children]
        assert statuses == [Status.PASSED, Status.FAILED, Status.PASSED]

    def test_no_short_circuit(self):
        """Test that every child is evaluated after an early failure."""
        log = []
        cond = all_of(
            "group",
            counting(log, "a", False),
            counting(log, "b", True),
            counting(log, "c", False),
        )
        result = cond.evaluate(None)
        assert result.matched is False
        assert log == ["a", "b", "c"]
        assert len(result.node.children) == 3

    def test_each_child_evaluated_once(self):
        """Test that each child runs exactly once per evaluation."""
        log = []
        cond = all_of("group", counting(log, "a", True), counting(log, "b", True))
        cond.evaluate(None)
        assert log == ["a", "b"]

    @pytest.mark.parametrize("value", [-5, 0, 3, 7, 10, 15])
    def test_equals_conjunction(self, value):
        """Test that the outcome is the AND of the children's outcomes."""
        children = [larger_than(0), smaller_than(10), larger_than(2)]
        cond = AllOf(children, label="group")
        assert cond(value) == all(child(value) for child in children)

    def test_label(self):
        """Test the group label."""
        assert all_of("customer").description == "customer"
        assert AllOf([]).description == "all of"

    def test_render(self):
        """Test rendering of a mixed group."""
        cond = all_of("range", larger_than(5), smaller_than(10))
        assert cond.evaluate(12).render() == (
            "[✗] range:[\n"
            "   [✓] larger than 5,\n"
            "   [✗] smaller than 10\n"
            "]"
        )

    def test_conditions_is_copy(self):
        """Test that the conditions property returns a copy."""
        cond = all_of("range", larger_than(5))
        cond.conditions.append(smaller_than(10))
        assert len(cond.conditions) == 1

    def test_input_list_not_shared(self):
        """Test that mutating the input list does not affect the group."""
        children = [larger_than(5)]
        cond = AllOf(children, label="range")
        children.append(smaller_than(0))
        assert cond(7) is True

    def test_empty_label_error(self):
        """Test error with an empty label."""
        with pytest.raises(ValueError, match="label cannot be empty"):
            all_of("", larger_than(5))

    def test_non_condition_error(self):
        """Test error with non-Condition object."""
        with pytest.raises(TypeError, match="Condition instances"):
            all_of("range", larger_than(5), "not a condition")

    def test_non_iterable_error(self):
        """Test error with non-iterable."""
        with pytest.raises(TypeError, match="iterable"):
            AllOf(5)

    def test_string_is_not_conditions(self):
        """Test that a string is not accepted as a list of conditions."""
        with pytest.raises(TypeError, match="iterable"):
            AllOf("abc")

    def test_describe(self):
        """Test the static description tree."""
        node = all_of("range", larger_than(5), smaller_than(10)).describe()
        assert node.status is Status.UNKNOWN
        assert [child.label for child in node.children] == [
            "larger than 5",
            "smaller than 10",
        ]
        assert all(child.status is Status.UNKNOWN for child in node.children)

    def test_repr(self):
        """Test string representation."""
        assert repr(all_of("empty")) == "AllOf('empty', [])"


class TestAnyOf:
    """Test AnyOf composition."""

    def test_one_true(self):
        """Test AnyOf when one condition is true."""
        cond = any_of("outside", smaller_than(0), larger_than(100))
        assert cond(-5) is True
        assert cond(105) is True

    def test_all_false(self):
        """Test AnyOf when all conditions are false."""
        cond = any_of("outside", smaller_than(0), larger_than(100))
        assert cond(50) is False

    def test_empty_never_matches(self):
        """Test that an empty AnyOf does not match."""
        assert any_of("nothing")(1) is False

    def test_no_short_circuit(self):
        """Test that every child is evaluated after an early match."""
        log = []
        cond = any_of("group", counting(log, "a", True), counting(log, "b", False))
        result = cond.evaluate(None)
        assert result.matched is True
        assert log == ["a", "b"]
        assert [c.status for c in result.node.children] == [
            Status.PASSED,
            Status.FAILED,
        ]

    def test_default_label(self):
        """Test the default label."""
        assert AnyOf([larger_than(1)]).description == "any of"


class TestNot:
    """Test Not negation."""

    def test_basic(self):
        """Test basic negation."""
        cond = not_(larger_than(5))
        assert cond(3) is True
        assert cond(10) is False

    def test_double_negation(self):
        """Test double negation."""
        cond = Not(Not(larger_than(5)))
        assert cond(10) is True
        assert cond(3) is False

    def test_with_group(self):
        """Test Not with a group."""
        cond = not_(all_of("range", larger_than(5), smaller_than(10)))
        assert cond(7) is False
        assert cond(3) is True

    def test_node(self):
        """Test that the child's node is kept under the negation."""
        result = not_(larger_than(5)).evaluate(10)
        assert result.matched is False
        assert result.node.label == "not larger than 5"
        assert result.node.status is Status.FAILED
        assert result.node.children[0].status is Status.PASSED

    def test_render(self):
        """Test rendering of a negation."""
        assert not_(larger_than(5)).evaluate(3).render() == (
            "[✓] not larger than 5:[\n"
            "   [✗] larger than 5\n"
            "]"
        )

    def test_non_condition_error(self):
        """Test error with non-Condition object."""
        with pytest.raises(TypeError, match="Condition instance"):
            Not("not a condition")

    def test_repr(self):
        """Test string representation."""
        inner = all_of("empty")
        assert repr(Not(inner)) == "Not(AllOf('empty', []))"
