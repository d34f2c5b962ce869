"""
Name: Keyword Extraction

Responsibilities:
  - Turn a recognition message into analytics keywords
  - Render calendar month keys for the monthly volume table

Notes:
  - Lower-cases the text and splits on anything that is not a letter
  - Tokens shorter than the minimum length are dropped
"""

from __future__ import annotations

import calendar
import re
from datetime import datetime
from typing import List

DEFAULT_MIN_KEYWORD_LENGTH = 4

# R: Letters only (unicode aware); digits, underscores and emoji split tokens.
_TOKEN_SPLIT = re.compile(r"[^\W\d_]+")


def extract_keywords(
    message: str, *, min_length: int = DEFAULT_MIN_KEYWORD_LENGTH
) -> List[str]:
    """
    R: Tokenize a message into keywords, preserving order and duplicates.

    Example:
        >>> extract_keywords("Great job on the launch!")
        ['great', 'launch']
    """
    if not message:
        return []
    return [
        token
        for token in _TOKEN_SPLIT.findall(message.lower())
        if len(token) >= min_length
    ]


def month_key(moment: datetime) -> str:
    """R: Calendar month key ("YYYY-MM"), sorts chronologically as text."""
    return f"{moment.year:04d}-{moment.month:02d}"


def month_label(key: str) -> str:
    """R: Long month label for a "YYYY-MM" key (e.g. "October 2026")."""
    year, month = key.split("-")
    return f"{calendar.month_name[int(month)]} {int(year)}"
