"""Tests for mixin() property copying."""

import pytest

from soak import Constructor, ProtoObject, create, mixin


def test_mixin_copies_second_into_first():
    assert mixin({"a": 1}, {"b": 2}) == {"a": 1, "b": 2}


def test_mixin_accepts_n_sources():
    result = mixin({"a": 1}, {"b": 2, "c": 3}, {"d": 4}, {"e": 5})
    assert result == {"a": 1, "b": 2, "c": 3, "d": 4, "e": 5}


def test_mixin_returns_first_argument():
    first = {}
    assert mixin(first, {"b": 2}) is first


def test_mixin_only_modifies_first_argument():
    a, b, c = {"a": 1}, {"b": 2}, {"c": 3}
    mixin(a, b, c)
    assert a == {"a": 1, "b": 2, "c": 3}
    assert b == {"b": 2}
    assert c == {"c": 3}


def test_mixin_later_sources_win():
    result = mixin({"type": "person"}, {"name": "bill", "age": 20}, {"age": 21})
    assert result == {"type": "person", "name": "bill", "age": 21}


def test_mixin_without_sources_is_noop():
    target = {"x": 1}
    assert mixin(target) is target
    assert target == {"x": 1}


def test_mixin_skips_none_sources():
    assert mixin({"a": 1}, None, {"b": 2}, None) == {"a": 1, "b": 2}


def test_mixin_copies_only_own_entries():
    parent = ProtoObject({"inherited": 1})
    child = create(parent)
    child.own = 2
    assert mixin({}, child) == {"own": 2}


def test_mixin_onto_proto_object():
    obj = ProtoObject({"a": 1})
    assert mixin(obj, {"b": 2}, ProtoObject({"a": 3})) is obj
    assert vars(obj) == {"a": 3, "b": 2}


def test_mixin_onto_plain_object():
    class Bag:
        pass

    bag = mixin(Bag(), {"colour": "red"})
    assert bag.colour == "red"


def test_mixin_source_with_itself_as_target():
    target = {"a": 1}
    assert mixin(target, target) == {"a": 1}


def test_mixin_onto_constructor_keeps_slots():
    ctor = Constructor()
    methods = ctor.methods
    mixin(ctor, {"methods": "shadow", "flag": True})
    assert ctor.methods is methods
    assert vars(ctor)["methods"] == "shadow"
    assert ctor.flag is True


@pytest.mark.parametrize("target", [1, "text", (1, 2), None])
def test_mixin_rejects_targets_without_storage(target):
    with pytest.raises(TypeError, match="mixin\\(\\) target must be a container"):
        mixin(target, {"a": 1})
