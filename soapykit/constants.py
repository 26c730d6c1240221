"""Stream directions, stream flags and error codes used by the device API."""

from __future__ import annotations

from enum import IntEnum, IntFlag

__all__ = ["Direction", "StreamFlag", "ErrorCode", "err_to_str"]


class Direction(IntEnum):
    """Direction of a stream or channel."""

    TX = 0
    RX = 1


class StreamFlag(IntFlag):
    """Flags passed to and returned from stream calls."""

    END_BURST = 1 << 1
    """End of burst: set by the caller on write, by the driver on read."""

    HAS_TIME = 1 << 2
    """The accompanying time stamp is valid."""

    END_ABRUPT = 1 << 3
    """The stream terminated prematurely (flag form of an overflow)."""

    ONE_PACKET = 1 << 4
    """Transmit or receive only a single packet."""

    MORE_FRAGMENTS = 1 << 5
    """This read and the next one form a fragment of one packet."""

    WAIT_TRIGGER = 1 << 6
    """Wait for an external, hardware-specific trigger event."""


class ErrorCode(IntEnum):
    """Negative status codes reported by stream operations."""

    TIMEOUT = -1
    STREAM_ERROR = -2
    CORRUPTION = -3
    OVERFLOW = -4
    NOT_SUPPORTED = -5
    TIME_ERROR = -6
    UNDERFLOW = -7


def err_to_str(error_code: int) -> str:
    """Return a printable name for an error code, or ``"UNKNOWN"``."""
    try:
        return ErrorCode(error_code).name
    except ValueError:
        return "UNKNOWN"