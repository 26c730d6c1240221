"""Registry of device find and make functions keyed by driver name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict

from .types import Kwargs, KwargsList
from .version import ABI_VERSION

__all__ = ["FindFunction", "MakeFunction", "DeviceRegistry"]

FindFunction = Callable[[Kwargs], KwargsList]
"""Enumerates devices: takes filter arguments, returns one argument map per device."""

MakeFunction = Callable[[Kwargs], Any]
"""Creates a device instance from its identifying arguments."""


@dataclass(frozen=True)
class _Entry:
    find: FindFunction
    make: MakeFunction


class DeviceRegistry:
    """Named pairs of device find and make functions."""

    def __init__(self) -> None:
        self._entries: Dict[str, _Entry] = {}

    def register(
        self,
        name: str,
        find: FindFunction,
        make: MakeFunction,
        abi: str = ABI_VERSION,
    ) -> None:
        """Add a driver entry.

        Raises ``ValueError`` if ``abi`` differs from the library ABI version
        or the name is already taken, and ``TypeError`` for non-callables.
        """
        if abi != ABI_VERSION:
            raise ValueError(
                f"{name!r} was built against ABI {abi!r}, but this library is ABI {ABI_VERSION!r}"
            )
        if not callable(find) or not callable(make):
            raise TypeError(f"find and make for {name!r} must be callable")
        if name in self._entries:
            raise ValueError(f"a driver named {name!r} is already registered")
        self._entries[name] = _Entry(find, make)

    def unregister(self, name: str) -> None:
        """Remove a driver entry; raises ``KeyError`` if it is not registered."""
        try:
            del self._entries[name]
        except KeyError:
            raise KeyError(f"no driver named {name!r} is registered") from None

    def find_functions(self) -> Dict[str, FindFunction]:
        """Find functions by driver name, in name order."""
        return {name: entry.find for name, entry in sorted(self._entries.items())}

    def make_functions(self) -> Dict[str, MakeFunction]:
        """Make functions by driver name, in name order."""
        return {name: entry.make for name, entry in sorted(self._entries.items())}