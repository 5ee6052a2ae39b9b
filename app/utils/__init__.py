"""Utility helpers for reusable functionality."""

from .datetime import ensure_utc, format_timestamp

__all__ = [
    "ensure_utc",
    "format_timestamp",
]
