"""Compact URL encoder.

This module provides the encode() function that converts a URL or ``urn:uuid:``
URN into the compact beacon payload: one scheme-code byte followed by either
the 16 UUID bytes or a mix of literal bytes and expansion codes.
"""

from __future__ import annotations

import logging
import re
import uuid
from typing import Optional, Tuple

from ..exceptions import EncodeError, ErrorKind
from .payload import PayloadWriter
from .tables import EXPANSIONS, MAX_LITERAL, SCHEMES, URN_UUID_PREFIX, CodeTable

logger = logging.getLogger(__name__)

_CANONICAL_UUID = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def encode(
    uri: Optional[str],
    *,
    schemes: CodeTable = SCHEMES,
    expansions: CodeTable = EXPANSIONS,
) -> bytes:
    """Encode a URL to the compact beacon payload.

    The scheme is matched case-insensitively, but every byte written after it
    keeps the casing of the original string.

    Args:
        uri: URL or ``urn:uuid:`` URN to encode
        schemes: Scheme table (defaults to the standard table)
        expansions: Expansion table for http/https URLs

    Returns:
        Encoded payload

    Raises:
        EncodeError: With kind EMPTY, UNKNOWN_SCHEME, MALFORMED_UUID or
            INVALID_CHARACTER

    Examples:
        ```python
        from uribeacon import encode

        encode("http://www.eff.org")
        # b'\\x00eff\\x08'

        encode("urn:uuid:12345678-1234-5678-1234-567812345678")
        # b'\\x04\\x124Vx\\x124Vx\\x124Vx\\x124Vx'
        ```
    """
    if not uri:
        raise EncodeError("Cannot encode empty URI", kind=ErrorKind.EMPTY)

    scheme_code, prefix = _match_scheme(uri, schemes)
    logger.debug("Matched scheme %r (code %d) for %r", prefix, scheme_code, uri)

    writer = PayloadWriter()
    writer.write_byte(scheme_code)
    position = len(prefix)

    if prefix.lower() == URN_UUID_PREFIX:
        _encode_urn_uuid(writer, uri[position:])
    else:
        _encode_url(writer, uri, position, expansions)

    encoded = writer.to_bytes()
    logger.debug("Encoded %d characters into %d bytes", len(uri), len(encoded))
    return encoded


def find_longest_expansion(
    text: str, position: int, table: CodeTable = EXPANSIONS
) -> Optional[Tuple[int, int]]:
    """Find the longest expansion that matches ``text`` at ``position``.

    When two entries of the same length both match, the smaller code wins.

    Args:
        text: String being encoded
        position: Index to match at
        table: Expansion table to search

    Returns:
        ``(code, matched_length)`` or None if nothing matches

    Example:
        >>> find_longest_expansion("eff.org/about", 3)
        (1, 5)
        >>> find_longest_expansion("eff.org", 3)
        (8, 4)
    """
    best: Optional[Tuple[int, int]] = None
    for code, value in table:
        if not text.startswith(value, position):
            continue
        if best is None or len(value) > best[1] or (len(value) == best[1] and code < best[0]):
            best = (code, len(value))
    return best


def _match_scheme(uri: str, schemes: CodeTable) -> Tuple[int, str]:
    """Return the first scheme whose prefix matches ``uri`` ignoring case."""
    for code, prefix in schemes:
        if uri[: len(prefix)].lower() == prefix.lower():
            return code, prefix
    raise EncodeError(f"No known scheme prefix in {uri!r}", kind=ErrorKind.UNKNOWN_SCHEME)


def _encode_urn_uuid(writer: PayloadWriter, tail: str) -> None:
    """Write a canonical UUID as two big-endian 64-bit words."""
    if not _CANONICAL_UUID.fullmatch(tail):
        raise EncodeError(
            f"Invalid urn:uuid format: {tail!r} is not a canonical UUID",
            kind=ErrorKind.MALFORMED_UUID,
        )

    value = uuid.UUID(tail).int
    writer.write_uint64(value >> 64)
    writer.write_uint64(value & 0xFFFFFFFFFFFFFFFF)


def _encode_url(writer: PayloadWriter, url: str, position: int, expansions: CodeTable) -> None:
    """Run the greedy longest-match loop over the rest of ``url``."""
    while position < len(url):
        match = find_longest_expansion(url, position, expansions)
        if match is not None:
            code, length = match
            writer.write_byte(code)
            position += length
            continue

        char = url[position]
        codepoint = ord(char)
        if codepoint > MAX_LITERAL or codepoint in expansions:
            raise EncodeError(
                f"Character {char!r} at index {position} cannot be sent as a literal byte",
                kind=ErrorKind.INVALID_CHARACTER,
            )
        writer.write_byte(codepoint)
        position += 1
