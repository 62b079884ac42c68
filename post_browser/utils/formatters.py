"""
Formatting utility functions
"""

import re
from datetime import datetime
from typing import Any


def format_date(date_value: Any, format_str: str = "%Y-%m-%d") -> str:
    """
    Format a date value as a string

    Args:
        date_value: Date value to format (string, datetime, or other)
        format_str: Format string for strftime

    Returns:
        Formatted date string or empty string if invalid
    """
    if not date_value:
        return ""

    if isinstance(date_value, str):
        try:
            dt = datetime.fromisoformat(date_value.replace('Z', '+00:00'))
            return dt.strftime(format_str)
        except ValueError:
            return date_value

    if isinstance(date_value, datetime):
        return date_value.strftime(format_str)

    return str(date_value)


def truncate_text(text: str, max_length: int = 50, ellipsis: str = "...") -> str:
    """
    Truncate text to a maximum length, collapsing whitespace first

    Args:
        text: Text to truncate
        max_length: Maximum length
        ellipsis: Ellipsis string to append

    Returns:
        Truncated text
    """
    if not text:
        return ""

    text = " ".join(text.split())
    if len(text) <= max_length:
        return text

    return text[:max_length-len(ellipsis)] + ellipsis


def slugify(text: str) -> str:
    """Lower-case, hyphen separated form of `text`."""
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-")
