"""Pydantic models for uribeacon.

This module provides the UrlFrame model for advertisement frames.
"""

from __future__ import annotations

from .base import UrlFrame

__all__ = [
    "UrlFrame",
]
