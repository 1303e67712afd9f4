"""Tests for condition primitives, structural and boolean combinators."""

from __future__ import annotations

import pytest

from a11yscan.conditions import (
    FALSE,
    TRUE,
    AndCondition,
    Condition,
    DelegateCondition,
    Equals,
    EqualsIgnoreCase,
    HasFlags,
    InRange,
    IsTrue,
    NotCondition,
    NotEmpty,
    OrCondition,
    all_of,
    ancestor,
    any_of,
    child,
    control_type,
    descendant,
    evaluate,
    not_,
    property_equals,
    property_equals_ignore_case,
    property_has_flags,
    property_in_range,
    property_not_empty,
    sibling,
)
from a11yscan.elements.fixture import FixtureElement
from a11yscan.types import ControlType, PropertyId


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _element(ct: ControlType = ControlType.BUTTON, **props) -> FixtureElement:
    return FixtureElement(ct, {PropertyId[k.upper()]: v for k, v in props.items()})


class _Marker:
    """Delegate condition that records every call."""

    def __init__(self, result: bool) -> None:
        self.result = result
        self.calls = 0

    def __call__(self, element) -> bool:
        self.calls += 1
        return self.result

    def condition(self) -> DelegateCondition:
        return DelegateCondition(self, "marker")


@pytest.fixture
def window() -> FixtureElement:
    """window > pane > (edit, button > text)."""
    root = _element(ControlType.WINDOW, name="Main")
    pane = root.add_child(_element(ControlType.PANE, name="Body"))
    pane.add_child(_element(ControlType.EDIT, name="Input"))
    button = pane.add_child(_element(ControlType.BUTTON, name="OK"))
    button.add_child(_element(ControlType.TEXT, name="OK"))
    return root


# ---------------------------------------------------------------------------
# Value predicates
# ---------------------------------------------------------------------------


class TestPredicates:
    def test_equals(self) -> None:
        assert Equals(3)(3)
        assert not Equals(3)("3")

    def test_equals_ignore_case(self) -> None:
        assert EqualsIgnoreCase("Submit")("SUBMIT")
        assert not EqualsIgnoreCase("Submit")(5)

    def test_in_range_inclusive(self) -> None:
        r = InRange(1, 5)
        assert r(1) and r(5) and r("3")
        assert not r(6)

    def test_in_range_rejects_uninterpretable(self) -> None:
        r = InRange(0, 10)
        assert not r("abc")
        assert not r([1])
        assert not r(True)

    def test_has_flags(self) -> None:
        assert HasFlags(0b0101)(0b1101)
        assert not HasFlags(0b0101)(0b0100)
        assert not HasFlags(1)("1")

    def test_not_empty(self) -> None:
        p = NotEmpty()
        assert p("x")
        assert not p("   ")
        assert not p([])
        assert p(0)

    def test_is_true(self) -> None:
        assert IsTrue()(True)
        assert not IsTrue()(1)


# ---------------------------------------------------------------------------
# Primitives
# ---------------------------------------------------------------------------


class TestPrimitives:
    def test_property_match(self) -> None:
        e = _element(name="Save")
        assert property_equals(PropertyId.NAME, "Save").matches(e)
        assert property_equals_ignore_case(PropertyId.NAME, "save").matches(e)
        assert not property_equals(PropertyId.NAME, "Open").matches(e)

    def test_absent_property_is_false_not_error(self) -> None:
        e = _element()
        assert not property_equals(PropertyId.NAME, None).matches(e)
        assert not property_not_empty(PropertyId.HELP_TEXT).matches(e)
        assert not property_in_range(PropertyId.HEADING_LEVEL, 0, 100).matches(e)

    def test_absent_property_negated_is_true(self) -> None:
        e = _element()
        assert (~property_not_empty(PropertyId.NAME)).matches(e)

    def test_bit_flags(self) -> None:
        e = _element(item_status=0b110)
        assert property_has_flags(PropertyId.ITEM_STATUS, 0b010).matches(e)
        assert not property_has_flags(PropertyId.ITEM_STATUS, 0b001).matches(e)

    def test_control_type_identity_and_membership(self) -> None:
        e = _element(ControlType.EDIT)
        assert control_type(ControlType.EDIT).matches(e)
        assert control_type(ControlType.BUTTON, ControlType.EDIT).matches(e)
        assert not control_type(ControlType.BUTTON).matches(e)

    def test_control_type_accepts_unknown_ids(self) -> None:
        e = FixtureElement(99999)
        assert control_type(99999).matches(e)

    def test_port_failures_propagate(self) -> None:
        class Broken(FixtureElement):
            def get_property(self, property_id):
                raise RuntimeError("provider gone")

        with pytest.raises(RuntimeError):
            property_equals(PropertyId.NAME, "x").matches(Broken(ControlType.BUTTON))


# ---------------------------------------------------------------------------
# Structural combinators
# ---------------------------------------------------------------------------


class TestStructural:
    def test_child(self, window: FixtureElement) -> None:
        pane = window.children()[0]
        assert child(control_type(ControlType.EDIT)).matches(pane)
        assert not child(control_type(ControlType.TEXT)).matches(pane)
        assert not child(control_type(ControlType.EDIT)).matches(window)

    def test_child_of_leaf(self) -> None:
        assert not child(TRUE).matches(_element())

    def test_descendant(self, window: FixtureElement) -> None:
        assert descendant(control_type(ControlType.TEXT)).matches(window)
        assert not descendant(control_type(ControlType.LIST)).matches(window)

    def test_descendant_depth_bound(self, window: FixtureElement) -> None:
        text = control_type(ControlType.TEXT)
        assert not descendant(text, max_depth=2).matches(window)
        assert descendant(text, max_depth=3).matches(window)

    def test_descendant_excludes_self(self) -> None:
        e = _element(ControlType.EDIT)
        assert not descendant(control_type(ControlType.EDIT)).matches(e)

    def test_sibling(self, window: FixtureElement) -> None:
        edit = window.children()[0].children()[0]
        assert sibling(control_type(ControlType.BUTTON)).matches(edit)
        assert not sibling(control_type(ControlType.EDIT)).matches(edit)

    def test_sibling_of_root_is_false(self, window: FixtureElement) -> None:
        assert not sibling(TRUE).matches(window)

    def test_ancestor(self, window: FixtureElement) -> None:
        text = window.children()[0].children()[1].children()[0]
        assert ancestor(control_type(ControlType.WINDOW)).matches(text)
        assert not ancestor(control_type(ControlType.WINDOW), max_depth=2).matches(text)
        assert not ancestor(control_type(ControlType.TEXT)).matches(text)


class TestCycles:
    """Corrupted providers can report an ancestor as a child."""

    def test_descendant_terminates_on_cycle(self) -> None:
        a = _element(ControlType.PANE)
        b = a.add_child(_element(ControlType.GROUP))
        c = b.add_child(_element(ControlType.GROUP))
        c.attach_child(a)
        assert descendant(control_type(ControlType.LIST)).matches(a) is False
        assert descendant(control_type(ControlType.PANE)).matches(b) is True

    def test_descendant_terminates_on_self_loop(self) -> None:
        a = _element(ControlType.PANE)
        a.attach_child(a)
        assert descendant(control_type(ControlType.EDIT)).matches(a) is False

    def test_ancestor_terminates_on_cycle(self) -> None:
        a = _element(ControlType.PANE)
        b = a.add_child(_element(ControlType.GROUP))
        a.set_parent(b)
        assert ancestor(control_type(ControlType.WINDOW)).matches(b) is False
        assert ancestor(control_type(ControlType.PANE)).matches(b) is True

    def test_descendant_terminates_on_shared_keys(self) -> None:
        # Distinct handles for the same logical node are visited once
        a = FixtureElement(ControlType.PANE, key="a")
        alias = FixtureElement(ControlType.PANE, key="a")
        a.attach_child(alias)
        alias.attach_child(a)
        assert descendant(control_type(ControlType.EDIT)).matches(a) is False

    def test_zero_depth_bound_matches_nothing(self) -> None:
        root = _element(ControlType.PANE)
        kid = root.add_child(_element(ControlType.EDIT))
        assert not descendant(control_type(ControlType.EDIT), max_depth=0).matches(root)
        assert not ancestor(control_type(ControlType.PANE), max_depth=0).matches(kid)
        assert descendant(control_type(ControlType.EDIT), max_depth=1).matches(root)
        assert ancestor(control_type(ControlType.PANE), max_depth=1).matches(kid)

    def test_deep_chain_is_bounded(self) -> None:
        root = _element(ControlType.PANE)
        node = root
        for _ in range(500):
            node = node.add_child(_element(ControlType.GROUP))
        node.add_child(_element(ControlType.EDIT))
        assert descendant(control_type(ControlType.EDIT)).matches(root) is False
        assert descendant(control_type(ControlType.EDIT), max_depth=1000).matches(root)


# ---------------------------------------------------------------------------
# Boolean combinators
# ---------------------------------------------------------------------------


class TestBoolean:
    def test_and_short_circuits(self) -> None:
        marker = _Marker(True)
        assert not all_of(FALSE, marker.condition()).matches(_element())
        assert marker.calls == 0

    def test_or_short_circuits(self) -> None:
        marker = _Marker(False)
        assert any_of(TRUE, marker.condition()).matches(_element())
        assert marker.calls == 0

    def test_and_evaluates_in_order(self) -> None:
        first, second = _Marker(True), _Marker(False)
        assert not all_of(first.condition(), second.condition()).matches(_element())
        assert (first.calls, second.calls) == (1, 1)

    def test_empty_operands(self) -> None:
        assert AndCondition(()).matches(_element())
        assert not OrCondition(()).matches(_element())

    @pytest.mark.parametrize("a", [TRUE, FALSE])
    @pytest.mark.parametrize("b", [TRUE, FALSE])
    def test_and_or_commute(self, a: Condition, b: Condition) -> None:
        e = _element()
        assert all_of(a, b).matches(e) == all_of(b, a).matches(e)
        assert any_of(a, b).matches(e) == any_of(b, a).matches(e)

    @pytest.mark.parametrize("a", [TRUE, FALSE, control_type(ControlType.BUTTON)])
    def test_double_negation(self, a: Condition) -> None:
        e = _element()
        assert not_(not_(a)).matches(e) == a.matches(e)

    def test_operators(self) -> None:
        e = _element(ControlType.EDIT, name="x")
        is_edit = control_type(ControlType.EDIT)
        named = property_not_empty(PropertyId.NAME)
        assert isinstance(is_edit & named, AndCondition)
        assert isinstance(is_edit | named, OrCondition)
        assert isinstance(~is_edit, NotCondition)
        assert (is_edit & named).matches(e)
        assert not (is_edit & ~named).matches(e)


# ---------------------------------------------------------------------------
# Evaluator and descriptions
# ---------------------------------------------------------------------------


class TestEvaluator:
    def test_unknown_condition_kind(self) -> None:
        class Unknown(Condition):
            def describe(self) -> str:
                return "unknown"

        with pytest.raises(TypeError):
            evaluate(Unknown(), _element())

    def test_conditions_are_reusable(self, window: FixtureElement) -> None:
        cond = descendant(control_type(ControlType.EDIT))
        results = [cond.matches(window) for _ in range(3)]
        results += [cond.matches(window.children()[0].children()[1])]
        assert results == [True, True, True, False]

    def test_conditions_are_hashable_values(self) -> None:
        a = child(control_type(ControlType.EDIT))
        b = child(control_type(ControlType.EDIT))
        assert a == b
        assert len({a, b}) == 1

    def test_delegates_compare_by_callable(self) -> None:
        def yes(e):
            return True

        def no(e):
            return False

        assert DelegateCondition(yes) != DelegateCondition(no)
        assert DelegateCondition(yes) == DelegateCondition(yes)
        assert len({DelegateCondition(yes), DelegateCondition(no)}) == 2

    def test_describe(self) -> None:
        cond = child(control_type(ControlType.EDIT) & ~property_not_empty(PropertyId.NAME))
        assert str(cond) == "any child ((ControlType == Edit and not (Name is not empty)))"

    def test_describe_membership_and_unknown_ids(self) -> None:
        assert control_type(ControlType.EDIT, ControlType.LIST).describe() == (
            "ControlType in (Edit, List)"
        )
        assert property_equals(12345, 1).describe() == "Property(12345) == 1"
