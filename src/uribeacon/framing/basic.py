"""Service-data framing for URL advertisements.

This module wraps an encoded URL in the advertisement service-data frame and
unwraps received frames.

The frame structure is:
- [Frame type (1 byte, 0x10)] [TX power at 0 m (1 byte, signed)] [Encoded URL]

The frame is carried as service data under the 16-bit service UUID 0xFEAA.
"""

from __future__ import annotations

import struct

from ..exceptions import FramingError

SERVICE_UUID = 0xFEAA
SERVICE_UUID_128 = "0000feaa-0000-1000-8000-00805f9b34fb"

URL_FRAME_TYPE = 0x10
DEFAULT_TX_POWER = -70  # 0xBA
MIN_TX_POWER = -100
MAX_TX_POWER = 20

MAX_URL_BYTES = 18
HEADER_SIZE = 2


def frame_url(
    payload: bytes,
    *,
    tx_power: int = DEFAULT_TX_POWER,
    max_bytes: int = MAX_URL_BYTES,
) -> bytes:
    """Frame an encoded URL as advertisement service data.

    Args:
        payload: Encoded URL (output of :func:`uribeacon.encode`)
        tx_power: Calibrated TX power at 0 m in dBm (-100 to 20)
        max_bytes: Largest encoded URL the frame may carry

    Returns:
        Service-data frame

    Raises:
        ValueError: If tx_power is out of range
        FramingError: If payload is empty or exceeds max_bytes

    Example:
        >>> frame_url(b"\\x00eff\\x08")
        b'\\x10\\xba\\x00eff\\x08'
    """
    if not MIN_TX_POWER <= tx_power <= MAX_TX_POWER:
        raise ValueError(
            f"tx_power must be {MIN_TX_POWER} to {MAX_TX_POWER} dBm, got {tx_power}"
        )

    if not payload:
        raise FramingError("Cannot frame empty URL payload")

    if len(payload) > max_bytes:
        raise FramingError(
            f"Encoded URL is {len(payload)} bytes, frame allows at most {max_bytes}"
        )

    return struct.pack(">Bb", URL_FRAME_TYPE, tx_power) + bytes(payload)


def unframe_url(frame: bytes, *, max_bytes: int = MAX_URL_BYTES) -> tuple[int, bytes]:
    """Unframe advertisement service data.

    Args:
        frame: Service-data frame received over the air
        max_bytes: Largest encoded URL the frame may carry

    Returns:
        Tuple of (tx_power, encoded URL)

    Raises:
        FramingError: If the frame is truncated, has the wrong type, or is oversized

    Example:
        >>> unframe_url(b"\\x10\\xba\\x00eff\\x08")
        (-70, b'\\x00eff\\x08')
    """
    if len(frame) < HEADER_SIZE + 1:
        raise FramingError(
            f"Frame too short: need at least {HEADER_SIZE + 1} bytes, got {len(frame)} bytes"
        )

    frame_type, tx_power = struct.unpack(">Bb", frame[:HEADER_SIZE])
    if frame_type != URL_FRAME_TYPE:
        raise FramingError(
            f"Unexpected frame type 0x{frame_type:02x}, expected 0x{URL_FRAME_TYPE:02x}"
        )

    payload = bytes(frame[HEADER_SIZE:])
    if len(payload) > max_bytes:
        raise FramingError(
            f"Encoded URL is {len(payload)} bytes, frame allows at most {max_bytes}"
        )

    return tx_power, payload
