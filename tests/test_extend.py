"""Tests for extend() chains built from the default constructor factory."""

import pytest

from soak import (
    Base,
    Constructor,
    Root,
    extendable_constructor,
    get_default_factory,
    set_default_factory,
)


def test_base_extend_matches_inherit():
    Child = Base.extend({"name": lambda this: "child"}, {"kind": "static"})
    instance = Child()
    assert isinstance(instance, Base)
    assert isinstance(instance, Root)
    assert instance.name() == "child"
    assert Child.kind == "static"
    assert Child.__super__ is Base.methods


def test_multi_level_chain_is_delegated_from_every_ancestor():
    A = Base.extend({"level": lambda this: "A"})
    B = A.extend()
    C = B.extend({"level": lambda this: "C"})
    D = C.extend()
    d = D()
    for ancestor in (Root, Base, A, B, C, D):
        assert isinstance(d, ancestor)
    assert d.level() == "C"
    assert not isinstance(A(), B)


def test_super_chain_terminates_at_root():
    A = Base.extend()
    B = A.extend()
    C = B.extend()
    chain = []
    node = C.methods
    while "__super__" in vars(node):
        node = vars(node)["__super__"]
        chain.append(node)
    assert chain == [B.methods, A.methods, Base.methods, Root.methods]


def test_default_constructors_forward_through_levels():
    def init_labelled(this, label):
        this.label = label

    Labelled = Base.extend({"constructor": init_labelled})
    Deep = Labelled.extend().extend().extend()
    assert Deep("deep").label == "deep"


def test_extend_is_inherited_by_explicit_constructors():
    def init_point(this, x=0, y=0):
        this.x, this.y = x, y

    Point = Base.extend({"constructor": init_point, "total": lambda this: this.x + this.y})
    Point3 = Point.extend({"total": lambda this: this.__super__["total"](this) + this.z})

    def init_point3(this, x=0, y=0, z=0):
        Point.init(this, x, y)
        this.z = z

    Point3D = Point.extend({"constructor": init_point3, "total": Point3.methods["total"]})
    assert Point3D(1, 2, 3).total() == 6
    assert isinstance(Point3D(), Point)


def test_extend_forwards_options():
    Isolated = Base.extend(None, {"kind": "isolated"}, statics="own")
    assert vars(Isolated) == {"kind": "isolated"}
    assert not hasattr(Isolated, "extend")


def test_extendable_constructor_from_plain_parent():
    Plain = Constructor(lambda this, value=None: setattr(this, "value", value))
    Extendable = extendable_constructor(Plain)
    assert Extendable(5).value == 5
    Child = Extendable.extend()
    assert Child(7).value == 7
    assert isinstance(Child(), Extendable)
    assert not isinstance(Extendable(), Plain)


def test_default_factory_can_be_replaced_globally():
    built = []

    def tracing_factory(parent):
        built.append(parent)
        return extendable_constructor(parent)

    set_default_factory(tracing_factory)
    try:
        A = Base.extend()
        B = A.extend(None, None, statics="own")
        A.extend({"constructor": lambda this: None})
    finally:
        set_default_factory(None)

    assert built == [Base, A]
    assert get_default_factory() is None
    assert hasattr(B, "extend")
    assert isinstance(B(), A)
    Base.extend()
    assert built == [Base, A]


def test_set_default_factory_rejects_non_callables():
    with pytest.raises(TypeError, match="must be callable"):
        set_default_factory("simple")
    assert get_default_factory() is None
