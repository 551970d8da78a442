"""Tests for FilterRegistry."""
import pytest

from tick_glide import FILTERS, FilterRegistry
from tick_glide.filters import AFTER_TWEEN, BEFORE_TWEEN, TWEEN_CREATED


def test_apply_calls_named_filter_with_triple():
    registry = FilterRegistry()
    received = []
    registry.add("g", before_tween=lambda c, o, t: received.append((c, o, t)))

    current, original, to = {"x": 1}, {"x": 0}, {"x": 10}
    registry.apply(BEFORE_TWEEN, current, original, to)

    assert len(received) == 1
    assert received[0][0] is current
    assert received[0][1] is original
    assert received[0][2] is to


def test_apply_only_matching_name():
    registry = FilterRegistry()
    calls = []
    registry.add("g", after_tween=lambda c, o, t: calls.append("after"))

    registry.apply(BEFORE_TWEEN, {}, {}, {})
    registry.apply(TWEEN_CREATED, {}, {}, {})
    assert calls == []

    registry.apply(AFTER_TWEEN, {}, {}, {})
    assert calls == ["after"]


def test_groups_applied_in_registration_order():
    registry = FilterRegistry()
    calls = []
    registry.add("first", before_tween=lambda c, o, t: calls.append("first"))
    registry.add("second", before_tween=lambda c, o, t: calls.append("second"))

    registry.apply(BEFORE_TWEEN, {}, {}, {})

    assert calls == ["first", "second"]
    assert registry.groups() == ["first", "second"]


def test_add_merges_into_existing_group():
    registry = FilterRegistry()

    def created(c, o, t):
        pass

    def before(c, o, t):
        pass

    registry.add("g", tween_created=created)
    registry.add("g", before_tween=before)

    assert registry.get("g") == {TWEEN_CREATED: created, BEFORE_TWEEN: before}


def test_remove_and_clear():
    registry = FilterRegistry()
    registry.add("a", before_tween=lambda c, o, t: None)
    registry.add("b", before_tween=lambda c, o, t: None)

    registry.remove("a")
    registry.remove("missing")  # Should not raise
    assert registry.groups() == ["b"]

    registry.clear()
    assert registry.groups() == []


def test_unknown_filter_name_raises():
    registry = FilterRegistry()
    with pytest.raises(ValueError):
        registry.apply("during_tween", {}, {}, {})


def test_filter_can_mutate_current():
    """Filters receive the live current mapping."""
    registry = FilterRegistry()
    registry.add("round", after_tween=lambda c, o, t: c.update(x=round(c["x"])))

    current = {"x": 1.6}
    registry.apply(AFTER_TWEEN, current, {}, {})

    assert current == {"x": 2}


def test_process_wide_registry_exists():
    assert isinstance(FILTERS, FilterRegistry)
