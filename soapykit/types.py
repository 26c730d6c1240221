"""Key/value argument maps, setting conversions, ranges and argument info."""

from __future__ import annotations

import numbers
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping

__all__ = [
    "TRUE",
    "FALSE",
    "Kwargs",
    "KwargsList",
    "Range",
    "RangeList",
    "ArgType",
    "ArgInfo",
    "ArgInfoList",
    "kwargs_from_string",
    "kwargs_to_string",
    "string_to_setting",
    "setting_to_string",
]

TRUE = "true"
"""String used for boolean true in settings."""

FALSE = "false"
"""String used for boolean false in settings."""

Kwargs = Dict[str, str]
KwargsList = List[Kwargs]

_INT64_MIN = -(1 << 63)
_UINT64_MAX = (1 << 64) - 1

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Range:
    """A numeric min/max range with an optional step size."""

    minimum: float = 0.0
    maximum: float = 0.0
    step: float = 0.0


RangeList = List[Range]


class ArgType(Enum):
    """Data type of an argument."""

    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"


@dataclass
class ArgInfo:
    """Description of a key/value argument."""

    key: str = ""
    value: str = ""
    name: str = ""
    description: str = ""
    units: str = ""
    type: ArgType = ArgType.STRING
    range: Range = field(default_factory=Range)
    options: List[str] = field(default_factory=list)
    option_names: List[str] = field(default_factory=list)


ArgInfoList = List[ArgInfo]


def kwargs_from_string(markup: str) -> Kwargs:
    """Parse ``"key0=value0, key1=value1"`` markup into a dictionary.

    Keys and values are stripped of surrounding whitespace; an entry with no
    ``=`` gets an empty value and entries with an empty key are dropped.
    """
    kwargs: Kwargs = {}
    for entry in markup.split(","):
        key, _, value = entry.partition("=")
        key = key.strip()
        if key:
            kwargs[key] = value.strip()
    return kwargs


def kwargs_to_string(args: Mapping[str, str]) -> str:
    """Format a mapping as ``"key0=value0, key1=value1"`` in key order."""
    return ", ".join(f"{key}={value}" for key, value in sorted(args.items()))


def _parse_float_prefix(s: str) -> float | None:
    match = _FLOAT_PREFIX.match(s)
    if match is None:
        return None
    return float(match.group(1))


def _parse_int_prefix(s: str) -> int:
    match = _INT_PREFIX.match(s)
    if match is None:
        raise ValueError(f"no integer in setting string: {s!r}")
    value = int(match.group(1))
    if not _INT64_MIN <= value <= _UINT64_MAX:
        raise OverflowError(f"integer setting out of range: {s!r}")
    return value


def string_to_setting(s: str, type_: type) -> Any:
    """Convert a setting string to ``bool``, ``int``, ``float`` or ``str``.

    Booleans: empty or ``"false"`` is false, ``"true"`` is true, a leading
    number is true when non-zero, and any other text is true. Numbers are
    read from the start of the string; ``ValueError`` is raised when there is
    none.
    """
    if type_ is bool:
        if not s or s == FALSE:
            return False
        if s == TRUE:
            return True
        number = _parse_float_prefix(s)
        if number is None:
            return True
        return bool(number)
    if type_ is int:
        return _parse_int_prefix(s)
    if type_ is float:
        number = _parse_float_prefix(s)
        if number is None:
            raise ValueError(f"no number in setting string: {s!r}")
        return number
    if type_ is str:
        return s
    raise TypeError(f"unsupported setting type: {type_!r}")


def setting_to_string(value: Any) -> str:
    """Convert a bool, integer, float or string setting to its string form.

    Floats use six digits after the decimal point.
    """
    if isinstance(value, bool):
        return TRUE if value else FALSE
    if isinstance(value, str):
        return value
    if isinstance(value, numbers.Integral):
        return str(int(value))
    if isinstance(value, numbers.Real):
        return f"{float(value):f}"
    raise TypeError(f"unsupported setting value: {value!r}")