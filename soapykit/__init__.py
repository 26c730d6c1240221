"""Constants, argument types, time conversion, versions and a device registry for SDR device APIs."""

__version__ = "0.8.0"

__all__ = [
    "constants",
    "registry",
    "timeconv",
    "types",
    "version",
]