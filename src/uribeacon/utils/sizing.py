"""Encoded size calculation utilities.

This module provides functions to inspect how a URL is segmented by the codec
and whether it fits the advertisement budget.
"""

from __future__ import annotations

from typing import List, NamedTuple, Optional

from ..codec import encode
from ..codec.encoder import find_longest_expansion
from ..codec.tables import EXPANSIONS, SCHEMES, URN_UUID_PREFIX
from ..framing.basic import MAX_URL_BYTES


class Segment(NamedTuple):
    """One piece of an encoded URL.

    Attributes:
        text: Characters of the original URL covered by this segment
        code: Scheme or expansion code, or None for literal characters
        size: Bytes the segment occupies in the payload
    """

    text: str
    code: Optional[int]
    size: int


def encoded_size(uri: str) -> int:
    """Calculate the encoded size of a URL in bytes.

    Raises:
        EncodeError: If the URL cannot be encoded

    Example:
        >>> encoded_size("http://www.eff.org")
        5
    """
    return len(encode(uri))


def segments(uri: str) -> List[Segment]:
    """Break a URL into the segments the encoder emits.

    Consecutive literal characters are grouped into one segment.

    Raises:
        EncodeError: If the URL cannot be encoded

    Example:
        >>> segments("http://www.eff.org")
        [Segment(text='http://www.', code=0, size=1), Segment(text='eff', code=None, size=3), Segment(text='.org', code=8, size=1)]
    """
    # Validates the whole URL (scheme, UUID, characters) up front
    payload = encode(uri)

    scheme_code = payload[0]
    prefix = SCHEMES.lookup(scheme_code) or ""
    result = [Segment(uri[: len(prefix)], scheme_code, 1)]
    position = len(prefix)

    if prefix == URN_UUID_PREFIX:
        result.append(Segment(uri[position:], None, len(payload) - 1))
        return result

    literal_start = position
    while position < len(uri):
        match = find_longest_expansion(uri, position, EXPANSIONS)
        if match is None:
            position += 1
            continue
        if literal_start < position:
            result.append(Segment(uri[literal_start:position], None, position - literal_start))
        code, length = match
        result.append(Segment(uri[position : position + length], code, 1))
        position += length
        literal_start = position

    if literal_start < position:
        result.append(Segment(uri[literal_start:position], None, position - literal_start))

    return result


def fits_advertisement(uri: str, max_bytes: int = MAX_URL_BYTES) -> bool:
    """Return True if the encoded URL fits the advertisement budget.

    Raises:
        EncodeError: If the URL cannot be encoded
    """
    return encoded_size(uri) <= max_bytes
