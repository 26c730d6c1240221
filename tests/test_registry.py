import pytest

from soapykit.registry import DeviceRegistry
from soapykit.version import ABI_VERSION


class _Device:
    def __init__(self, args):
        self.args = args


def _find_my_device(args):
    return [{"driver": "my_device", "label": "first"}]


def _make_my_device(args):
    return _Device(args)


def _find_none(args):
    return []


def _make_none(args):
    raise RuntimeError("no device")


@pytest.fixture
def registry():
    reg = DeviceRegistry()
    reg.register("my_device", _find_my_device, _make_my_device, ABI_VERSION)
    return reg


def test_register_lists_functions(registry):
    assert registry.find_functions() == {"my_device": _find_my_device}
    assert registry.make_functions() == {"my_device": _make_my_device}


def test_find_and_make_through_registry(registry):
    found = registry.find_functions()["my_device"]({})
    assert found == [{"driver": "my_device", "label": "first"}]
    device = registry.make_functions()["my_device"](found[0])
    assert device.args == found[0]


def test_default_abi_accepted():
    reg = DeviceRegistry()
    reg.register("other", _find_none, _make_none)
    assert list(reg.find_functions()) == ["other"]


def test_names_are_ordered(registry):
    registry.register("alpha", _find_none, _make_none, ABI_VERSION)
    assert list(registry.find_functions()) == ["alpha", "my_device"]
    assert list(registry.make_functions()) == ["alpha", "my_device"]


def test_abi_mismatch_rejected():
    reg = DeviceRegistry()
    with pytest.raises(ValueError):
        reg.register("stale", _find_none, _make_none, ABI_VERSION + "-old")
    assert reg.find_functions() == {}


def test_duplicate_name_rejected(registry):
    with pytest.raises(ValueError):
        registry.register("my_device", _find_none, _make_none, ABI_VERSION)
    assert registry.find_functions()["my_device"] is _find_my_device


def test_non_callable_rejected():
    reg = DeviceRegistry()
    with pytest.raises(TypeError):
        reg.register("broken", None, _make_none, ABI_VERSION)
    assert reg.make_functions() == {}


def test_unregister(registry):
    registry.unregister("my_device")
    assert registry.find_functions() == {}
    assert registry.make_functions() == {}


def test_unregister_unknown_raises(registry):
    with pytest.raises(KeyError):
        registry.unregister("missing")


def test_returned_maps_are_copies(registry):
    registry.find_functions().clear()
    assert "my_device" in registry.find_functions()