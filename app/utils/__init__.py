"""Utility helpers for reusable functionality."""

from .datetime import get_app_timezone, today_in_app_timezone, utc_now_naive

__all__ = [
    "get_app_timezone",
    "today_in_app_timezone",
    "utc_now_naive",
]
