"""Tests for create() prototype links."""

import pytest

from soak import Constructor, ProtoObject, create, get_proto, has_own, own_keys


def test_create_uses_argument_as_prototype():
    parent = {"a": 1, "b": 2, "c": 3}
    instance = create(parent)
    assert instance.a == parent["a"]
    assert instance["b"] == parent["b"]
    assert instance.c == parent["c"]
    assert get_proto(instance) is parent


def test_create_result_has_no_own_entries():
    apple = ProtoObject({"color": "green"})
    instance = create(apple)
    assert own_keys(instance) == []
    assert not has_own(instance, "color")
    assert instance.color == apple.color
    assert instance is not apple


def test_create_reads_through_the_whole_chain():
    root = ProtoObject({"depth": "root"})
    middle = create(root)
    leaf = create(middle)
    assert leaf.depth == "root"
    assert "depth" in leaf


def test_create_writes_stay_on_the_new_object():
    parent = {"a": 1}
    instance = create(parent)
    instance.a = 5
    instance["b"] = 6
    assert parent == {"a": 1}
    assert has_own(instance, "a")
    assert vars(instance) == {"a": 5, "b": 6}


def test_create_missing_entries():
    instance = create({"a": 1})
    assert "missing" not in instance
    with pytest.raises(AttributeError):
        instance.missing
    with pytest.raises(KeyError):
        instance["missing"]


@pytest.mark.parametrize("value", [None, 1, "text", 3.5, Constructor()])
def test_create_with_non_container_returns_empty_object(value):
    result = create(value)
    assert isinstance(result, ProtoObject)
    assert own_keys(result) == []
    assert get_proto(result) is None
    assert result is not value


def test_create_returns_distinct_objects():
    assert create(1) is not create(1)
    parent = {"a": 1}
    assert create(parent) is not create(parent)
