"""Library API, ABI and release version information."""

from __future__ import annotations

__all__ = [
    "API_VERSION",
    "ABI_VERSION",
    "LIB_VERSION",
    "get_api_version",
    "get_abi_version",
    "get_lib_version",
]

API_VERSION = 0x00080000
"""API version encoded as ``(major << 24) | (minor << 16) | increment``."""

ABI_VERSION = "0.8"
"""ABI version string, ``major.minor[-extra]``."""

LIB_VERSION = "0.8.0"
"""Library release version, ``major.minor.patch[-buildInfo]``."""


def get_api_version() -> str:
    """Return the API version as ``major.minor.increment``."""
    major = (API_VERSION >> 24) & 0xFF
    minor = (API_VERSION >> 16) & 0xFF
    increment = API_VERSION & 0xFFFF
    return f"{major}.{minor}.{increment}"


def get_abi_version() -> str:
    """Return the ABI version string the library was built against."""
    return ABI_VERSION


def get_lib_version() -> str:
    """Return the library version and build information string."""
    return LIB_VERSION