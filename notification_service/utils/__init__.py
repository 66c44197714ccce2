"""Utility helpers for reusable functionality."""

from .datetime import ensure_utc, ensure_utc_naive, format_timestamp, now_utc

__all__ = [
    "ensure_utc",
    "ensure_utc_naive",
    "format_timestamp",
    "now_utc",
]
