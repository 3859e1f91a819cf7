"""Tests for group-synced parameters."""

import pytest

from svgfixture.params import BooleanParameter, BoundedParameter, DiscreteParameter, SyncParameter


def _spacing(value=1.0):
    return BoundedParameter("Spacing", value, 0.1, 1000)


def test_add_child_pushes_lead_value():
    sync = SyncParameter(_spacing(5.0))
    child = _spacing()
    sync.add_child(child)
    assert child.value == 5.0
    assert sync.enabled.is_on


def test_lead_change_propagates_to_all_children():
    sync = SyncParameter(_spacing())
    children = [_spacing() for _ in range(3)]
    for child in children:
        sync.add_child(child)
    sync.parameter.set_value(12.0)
    assert [c.value for c in children] == [12.0, 12.0, 12.0]
    assert sync.enabled.is_on


def test_independent_child_change_disables_sync():
    sync = SyncParameter(_spacing())
    a, b = _spacing(), _spacing()
    sync.add_child(a)
    sync.add_child(b)

    a.set_value(3.0)
    assert not sync.enabled.is_on

    # Out of sync: lead changes no longer reach children
    sync.parameter.set_value(9.0)
    assert a.value == 3.0
    assert b.value == 1.0


def test_reenabling_resyncs_children():
    sync = SyncParameter(_spacing())
    a = _spacing()
    sync.add_child(a)
    a.set_value(3.0)
    sync.parameter.set_value(7.0)

    sync.enabled.set_value(True)
    assert a.value == 7.0


def test_disabled_sync_does_not_push_on_add():
    sync = SyncParameter(_spacing(4.0), enabled=False)
    child = _spacing(2.0)
    sync.add_child(child)
    assert child.value == 2.0


def test_duplicate_child_rejected():
    sync = SyncParameter(_spacing())
    child = _spacing()
    sync.add_child(child)
    with pytest.raises(ValueError):
        sync.add_child(child)


def test_mismatched_kind_rejected():
    sync = SyncParameter(_spacing())
    with pytest.raises(TypeError):
        sync.add_child(DiscreteParameter("Num Points", 10, 1, 100))
    with pytest.raises(TypeError):
        sync.add_child(BooleanParameter("Reverse"))


def test_removed_child_is_left_alone():
    sync = SyncParameter(_spacing())
    child = _spacing()
    sync.add_child(child)
    assert sync.remove_child(child)
    assert not sync.remove_child(child)

    sync.parameter.set_value(50.0)
    assert child.value == 1.0
    child.set_value(2.0)
    assert sync.enabled.is_on


def test_dispose_detaches_everything():
    sync = SyncParameter(_spacing())
    child = _spacing()
    sync.add_child(child)
    sync.dispose()
    assert sync.children == ()
    sync.parameter.set_value(30.0)
    assert child.value == 1.0


def test_label_comes_from_lead():
    assert SyncParameter(_spacing()).label == "Spacing"
