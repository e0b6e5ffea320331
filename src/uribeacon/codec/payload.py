"""Byte-level payload writing and reading.

This module provides the owned byte buffers the codec assembles payloads in.
Multi-byte values are big-endian (most significant byte first), matching the
way UUIDs are laid out on the wire.
"""

from __future__ import annotations


class PayloadWriter:
    """Accumulates payload bytes.

    Example:
        >>> writer = PayloadWriter()
        >>> writer.write_byte(0x00)
        >>> writer.write_uint64(1)
        >>> writer.to_bytes()
        b'\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01'
    """

    def __init__(self) -> None:
        """Initialize an empty payload."""
        self._buffer = bytearray()

    def write_byte(self, value: int) -> None:
        """Write a single unsigned byte.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value doesn't fit in one byte
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value must be 0-255, got {value}")
        self._buffer.append(value)

    def write_uint64(self, value: int) -> None:
        """Write an unsigned 64-bit integer, big-endian.

        Args:
            value: Unsigned integer value (0 to 2**64 - 1)

        Raises:
            ValueError: If value is negative or doesn't fit in 64 bits
        """
        if value < 0:
            raise ValueError(f"write_uint64 requires non-negative value, got {value}")
        if value >> 64:
            raise ValueError(f"Value {value} requires more than 64 bits")
        self._buffer.extend(value.to_bytes(8, "big"))

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the accumulated payload."""
        return bytes(self._buffer)


class PayloadReader:
    """Reads bytes sequentially from a payload.

    Example:
        >>> reader = PayloadReader(b"\\x04" + bytes(16))
        >>> reader.read_byte()
        4
        >>> reader.read_uint64()
        0
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Payload to read (bytes-like)
        """
        self._data = bytes(data)
        self._position = 0

    def read_byte(self) -> int:
        """Read one unsigned byte.

        Raises:
            IndexError: If no more bytes are available
        """
        if self._position >= len(self._data):
            raise IndexError("Attempted to read past end of payload")
        value = self._data[self._position]
        self._position += 1
        return value

    def read_uint64(self) -> int:
        """Read an unsigned 64-bit big-endian integer.

        Raises:
            IndexError: If fewer than 8 bytes remain
        """
        if self.bytes_remaining() < 8:
            raise IndexError(f"Not enough bytes: need 8, have {self.bytes_remaining()}")
        chunk = self._data[self._position : self._position + 8]
        self._position += 8
        return int.from_bytes(chunk, "big")

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current byte position."""
        return self._position
