"""Advertisement framing utilities for uribeacon.

This module provides utilities for wrapping encoded URLs in the service-data
frame carried by the advertisement.
"""

from __future__ import annotations

from .basic import (
    DEFAULT_TX_POWER,
    MAX_URL_BYTES,
    SERVICE_UUID,
    SERVICE_UUID_128,
    URL_FRAME_TYPE,
    frame_url,
    unframe_url,
)

__all__ = [
    "frame_url",
    "unframe_url",
    "SERVICE_UUID",
    "SERVICE_UUID_128",
    "URL_FRAME_TYPE",
    "DEFAULT_TX_POWER",
    "MAX_URL_BYTES",
]
