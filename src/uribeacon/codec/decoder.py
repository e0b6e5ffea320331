"""Compact URL decoder.

This module provides the decode() function that converts a beacon payload back
to the exact URL string it was encoded from.
"""

from __future__ import annotations

import logging
import uuid
from typing import Union

from ..exceptions import DecodeError, ErrorKind
from .payload import PayloadReader
from .tables import EXPANSIONS, MAX_LITERAL, SCHEMES, URN_UUID_PREFIX, CodeTable

logger = logging.getLogger(__name__)

UUID_LENGTH = 16


def decode(
    data: Union[bytes, bytearray, memoryview],
    *,
    schemes: CodeTable = SCHEMES,
    expansions: CodeTable = EXPANSIONS,
) -> str:
    """Decode a compact beacon payload to a URL.

    Bytes after the scheme byte that match an expansion code expand to their
    suffix; every other ASCII byte is taken as the character with that code.
    The format has no tag bit separating the two, so a literal control byte in
    the expansion-code range would be read as an expansion. The encoder never
    writes such bytes, nor bytes above 0x7F, which are rejected here.

    Args:
        data: Encoded payload
        schemes: Scheme table (defaults to the standard table)
        expansions: Expansion table for http/https URLs

    Returns:
        Decoded URL

    Raises:
        DecodeError: With kind EMPTY, UNKNOWN_SCHEME, INVALID_LENGTH or
            INVALID_CHARACTER

    Examples:
        ```python
        from uribeacon import decode

        decode(b"\\x00eff\\x08")
        # 'http://www.eff.org'
        ```
    """
    if data is None or len(data) == 0:
        raise DecodeError("Cannot decode empty payload", kind=ErrorKind.EMPTY)

    reader = PayloadReader(data)
    scheme_code = reader.read_byte()
    prefix = schemes.lookup(scheme_code)
    if prefix is None:
        raise DecodeError(
            f"Unknown scheme code 0x{scheme_code:02x}", kind=ErrorKind.UNKNOWN_SCHEME
        )

    if prefix.lower() == URN_UUID_PREFIX:
        result = prefix + _decode_urn_uuid(reader)
    else:
        result = prefix + _decode_url(reader, expansions)

    logger.debug("Decoded %d bytes into %r", len(data), result)
    return result


def _decode_urn_uuid(reader: PayloadReader) -> str:
    """Read exactly 16 bytes as a lowercase hyphenated UUID."""
    remaining = reader.bytes_remaining()
    if remaining != UUID_LENGTH:
        raise DecodeError(
            f"urn:uuid payload must carry {UUID_LENGTH} bytes, got {remaining}",
            kind=ErrorKind.INVALID_LENGTH,
        )

    most_significant = reader.read_uint64()
    least_significant = reader.read_uint64()
    return str(uuid.UUID(int=(most_significant << 64) | least_significant))


def _decode_url(reader: PayloadReader, expansions: CodeTable) -> str:
    """Expand codes and copy literal bytes until the payload ends."""
    parts = []
    while reader.bytes_remaining():
        byte = reader.read_byte()
        expansion = expansions.lookup(byte)
        if expansion is not None:
            parts.append(expansion)
        elif byte > MAX_LITERAL:
            raise DecodeError(
                f"Byte 0x{byte:02x} at position {reader.position() - 1} "
                f"is not an ASCII character",
                kind=ErrorKind.INVALID_CHARACTER,
            )
        else:
            parts.append(chr(byte))
    return "".join(parts)
