"""Exception hierarchy for uribeacon.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from UribeaconError for easy catching of any uribeacon-specific error.

Input errors raised by the codec carry an ErrorKind so callers can tell an
empty advertisement ("nothing to broadcast") apart from a malformed one.
"""

from __future__ import annotations

import enum


class ErrorKind(enum.Enum):
    """Reason an encode or decode call rejected its input."""

    EMPTY = "empty"
    UNKNOWN_SCHEME = "unknown_scheme"
    MALFORMED_UUID = "malformed_uuid"
    INVALID_LENGTH = "invalid_length"
    INVALID_CHARACTER = "invalid_character"


class UribeaconError(Exception):
    """Base exception for all uribeacon errors."""

    pass


class ConfigError(UribeaconError):
    """Raised when a scheme or expansion table violates its invariants.

    This is a programming error, detected when the table is built rather
    than when a URL is encoded.

    Examples:
        - Two entries share a code
        - Two entries share a string
        - A scheme prefix is shadowed by an earlier, shorter prefix
        - Code outside the one-byte range
    """

    pass


class _InputError(UribeaconError):
    """Input-shape error tagged with an ErrorKind."""

    def __init__(self, message: str, *, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class EncodeError(_InputError):
    """Raised when a URL cannot be encoded.

    Examples:
        - Empty URL (ErrorKind.EMPTY)
        - No known scheme prefix (ErrorKind.UNKNOWN_SCHEME)
        - ``urn:uuid:`` followed by something that is not a UUID (ErrorKind.MALFORMED_UUID)
        - Character that cannot travel as a single literal byte (ErrorKind.INVALID_CHARACTER)
    """


class DecodeError(_InputError):
    """Raised when an encoded payload cannot be decoded.

    Examples:
        - Empty payload (ErrorKind.EMPTY)
        - Scheme code not in the table (ErrorKind.UNKNOWN_SCHEME)
        - UUID payload that is not exactly 16 bytes (ErrorKind.INVALID_LENGTH)
        - Byte above 0x7F that is not an expansion code (ErrorKind.INVALID_CHARACTER)
    """


class FramingError(UribeaconError):
    """Raised when service-data framing operations fail.

    Examples:
        - Frame shorter than its header
        - Unexpected frame type byte
        - Encoded URL larger than the advertisement budget
    """

    pass
