"""Compact URL codec for uribeacon.

This module provides encoding and decoding of URLs into the compact beacon
payload format using scheme codes and TLD expansion codes.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode, find_longest_expansion
from .tables import EXPANSIONS, SCHEMES, CodeTable
from .urlcodec import UrlCodec

__all__ = [
    "encode",
    "decode",
    "find_longest_expansion",
    "UrlCodec",
    "CodeTable",
    "SCHEMES",
    "EXPANSIONS",
]
