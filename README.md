# soapykit

Building blocks for software-defined radio device APIs, in pure Python with
no third-party dependencies:

- stream directions, stream flags and error codes (`soapykit.constants`)
- key/value argument markup, ranges, argument info and setting conversion (`soapykit.types`)
- tick and nanosecond time conversion (`soapykit.timeconv`)
- API, ABI and library version strings (`soapykit.version`)
- a registry of device find/make functions keyed by driver name (`soapykit.registry`)

## Installation

```
pip install soapykit
```

Run the test suite with the `test` extra installed:

```
pip install "soapykit[test]"
pytest
```

## Constants and error codes

```python
from soapykit.constants import Direction, ErrorCode, StreamFlag, err_to_str

assert Direction.RX == 1
flags = StreamFlag.END_BURST | StreamFlag.HAS_TIME
assert StreamFlag.HAS_TIME in flags
assert err_to_str(ErrorCode.OVERFLOW) == "OVERFLOW"
assert err_to_str(-99) == "UNKNOWN"
```

## Argument markup

`kwargs_from_string` parses `"key0=value0, key1=value1"`. Keys and values are
stripped of whitespace, an entry without `=` gets an empty value, and entries
with an empty key are dropped. `kwargs_to_string` writes the entries sorted by key.

```python
from soapykit.types import kwargs_from_string, kwargs_to_string

args = kwargs_from_string("serial=0000, driver=demo")
assert args == {"driver": "demo", "serial": "0000"}
assert kwargs_to_string(args) == "driver=demo, serial=0000"
assert kwargs_from_string("Baz ,Foo = Bar") == {"Baz": "", "Foo": "Bar"}
```

## Settings as strings

`string_to_setting(s, type_)` accepts `bool`, `int`, `float` and `str`.
For booleans, an empty string or `"false"` is false, `"true"` is true, a
leading number is true when non-zero, and any other text is true. Numbers are
read from the start of the string; `ValueError` is raised when there is none.
`setting_to_string` writes booleans as `"true"`/`"false"` and floats with six
digits after the decimal point.

```python
from soapykit.types import setting_to_string, string_to_setting

assert string_to_setting("0.2", bool) is True
assert string_to_setting("0e12", bool) is False
assert string_to_setting("-1", int) == -1
assert setting_to_string(True) == "true"
assert setting_to_string(1.5) == "1.500000"
```

`Range` (minimum, maximum, step) and `ArgInfo` (key, value, name,
description, units, `ArgType`, range, options, option names) are plain
dataclasses describing device arguments.

## Time and ticks

Conversions are exact and round to the nearest integer, halves away from zero.
The rate must be a positive finite number, otherwise `ValueError` is raised.

```python
from soapykit.timeconv import ticks_to_time_ns, time_ns_to_ticks

assert time_ns_to_ticks(1_000_000, 52e6) == 52_000
assert ticks_to_time_ns(52_000, 52e6) == 1_000_000
```

## Versions

```python
from soapykit.version import get_abi_version, get_api_version, get_lib_version

assert get_api_version() == "0.8.0"
assert get_abi_version() == "0.8"
print(get_lib_version())
```

## Device registry

`DeviceRegistry.register` takes a name, a find function, a make function and
the ABI version (defaulting to the library's). It raises `ValueError` for a
different ABI or a name already in use and `TypeError` when find or make is
not callable. `unregister` raises `KeyError` for an unknown name.
`find_functions` and `make_functions` return dictionaries in name order.

```python
from soapykit.registry import DeviceRegistry
from soapykit.version import get_abi_version

devices = DeviceRegistry()
devices.register("demo", lambda args: [{"driver": "demo"}], lambda args: object(), get_abi_version())
assert devices.find_functions()["demo"]({}) == [{"driver": "demo"}]
devices.unregister("demo")
```

## What this package does not do

It has no stream format tables or element sizes, no sample or buffer
converters, and no logger. It does not load driver modules from disk, talk to
any radio hardware, or provide a command-line tool: device drivers are plain
callables that an application registers itself.