"""Utility functions for uribeacon.

This module provides size calculation and segmentation helpers.
"""

from __future__ import annotations

from .sizing import Segment, encoded_size, fits_advertisement, segments

__all__ = [
    "Segment",
    "encoded_size",
    "fits_advertisement",
    "segments",
]
