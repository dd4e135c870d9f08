"""Tests for the Pydantic plugin."""

import pytest
from pydantic import ValidationError

from soak import ProtoObject, Root, inherit
from soak.core.inherit import ENTRY_ATTR_NAME
from soak.plugins.pydantic import PydanticPlugin


def concat(this, text: str, number: int = 1) -> str:
    this.calls = getattr(this, "calls", 0) + 1
    return f"{text}:{number}"


def plain(this, value):
    return value


def make_service(plugin=None):
    plugin = plugin or PydanticPlugin()
    return plugin, inherit(Root, {"concat": concat, "plain": plain}, plugins=[plugin])


def test_pydantic_plugin_accepts_valid_input():
    _, Service = make_service()
    svc = Service()
    assert svc.concat("hello", 3) == "hello:3"
    assert svc.concat("hi") == "hi:1"
    assert svc.calls == 2


def test_pydantic_plugin_passes_validated_values():
    _, Service = make_service()
    assert Service().concat("a", "5") == "a:5"
    assert Service().concat(text="b", number="7") == "b:7"


def test_pydantic_plugin_rejects_invalid_input():
    _, Service = make_service()
    with pytest.raises(ValidationError):
        Service().concat(123, "oops")


def test_pydantic_plugin_disabled_at_runtime():
    plugin, Service = make_service()
    with pytest.raises(ValidationError):
        Service().concat(123, "oops")
    plugin.set_config(disabled=True)
    assert Service().concat(123, "oops") == "123:oops"


def test_pydantic_plugin_disabled_per_method():
    plugin, Service = make_service()
    plugin.set_method_config("concat", disabled=True)
    assert Service().concat(1, "x") == "1:x"


def test_pydantic_plugin_model_metadata():
    _, Service = make_service()
    entry = getattr(Service.methods["concat"], ENTRY_ATTR_NAME)
    meta = entry.metadata["pydantic"]
    assert set(meta["hints"]) == {"text", "number"}
    assert meta["model"](text="x").number == 1


def scale(this: ProtoObject, factor: float) -> float:
    return this.unit * factor


def test_pydantic_plugin_never_validates_the_receiver():
    Meter = inherit(Root, {"scale": scale, "unit": 2}, plugins=["pydantic"])
    assert Meter().scale("1.5") == 3.0
    entry = getattr(Meter.methods["scale"], ENTRY_ATTR_NAME)
    assert set(entry.metadata["pydantic"]["hints"]) == {"factor"}


def test_pydantic_plugin_disabled_with_string_switch():
    plugin, Service = make_service()
    plugin.set_config(disabled="on")
    assert plugin.get_config()["disabled"] is True
    assert Service().concat(1, "x") == "1:x"
    with pytest.raises(ValidationError):
        plugin.set_config(disable=True)


def test_pydantic_plugin_passthrough_without_hints():
    _, Service = make_service()
    assert Service.methods["plain"] is plain
    assert Service().plain(object) is object
