"""uribeacon: URL Beacon Codec

A Python library for the compact URL encoding used by URL-broadcasting
Bluetooth beacons. A URL has to fit in an advertisement payload of at most
18 bytes, so common prefixes ("http://www.", "https://") and top-level-domain
suffixes (".com/", ".org", ...) are replaced by single-byte codes while every
other character is sent verbatim.

Key Features:
- Lossless, bit-exact URL and ``urn:uuid:`` encoding
- Greedy longest-match TLD expansion
- Advertisement service-data framing
- Time-rotating URLs derived from a shared secret

Quick Start:
    >>> from uribeacon import encode, decode
    >>>
    >>> data = encode("http://www.eff.org")
    >>> data
    b'\\x00eff\\x08'
    >>> decode(data)
    'http://www.eff.org'
"""

from __future__ import annotations

from .codec import EXPANSIONS, SCHEMES, CodeTable, UrlCodec, decode, encode, find_longest_expansion
from .exceptions import (
    ConfigError,
    DecodeError,
    EncodeError,
    ErrorKind,
    FramingError,
    UribeaconError,
)
from .framing import (
    DEFAULT_TX_POWER,
    MAX_URL_BYTES,
    SERVICE_UUID,
    SERVICE_UUID_128,
    URL_FRAME_TYPE,
    frame_url,
    unframe_url,
)
from .models import UrlFrame
from .rotation import RotationConfig, rotating_token, rotating_url
from .utils import Segment, encoded_size, fits_advertisement, segments

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "UrlCodec",
    "find_longest_expansion",
    # Tables
    "CodeTable",
    "SCHEMES",
    "EXPANSIONS",
    # Exceptions
    "UribeaconError",
    "ConfigError",
    "EncodeError",
    "DecodeError",
    "ErrorKind",
    "FramingError",
    # Framing
    "frame_url",
    "unframe_url",
    "UrlFrame",
    "SERVICE_UUID",
    "SERVICE_UUID_128",
    "URL_FRAME_TYPE",
    "DEFAULT_TX_POWER",
    "MAX_URL_BYTES",
    # Rotation
    "RotationConfig",
    "rotating_token",
    "rotating_url",
    # Sizing
    "Segment",
    "encoded_size",
    "fits_advertisement",
    "segments",
    # Version
    "__version__",
]
