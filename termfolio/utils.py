"""
Utility functions for the slot renderer.
"""

from __future__ import annotations
import logging
from typing import Any, List, Mapping

from termfolio.config import FALLBACK_ICON

logger = logging.getLogger(__name__)

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
LEVEL_MARKS = 5


def format_date(value: str | None) -> str:
    """'2020-03' → 'Mar 2020', '2019' → '2019', missing → 'Present'."""
    if not value:
        return "Present"
    parts = str(value).split("-")
    if len(parts) == 1 or not parts[1]:
        return parts[0]
    try:
        month = int(parts[1])
    except ValueError:
        return str(value)
    if not 1 <= month <= 12:
        return str(value)
    return f"{MONTHS[month - 1]} {parts[0]}"


def format_date_range(start: str | None, end: str | None) -> str:
    return f"{format_date(start)} - {format_date(end)}"


def filled_marks(level: Any) -> int:
    """Number of filled marks for a 1–5 skill level, clamped to [0, 5]."""
    if level is None or level == "":
        return 0
    try:
        n = int(level)
    except (TypeError, ValueError):
        logger.warning("Skill level %r is not a number, rendering as 0", level)
        return 0
    if n < 0 or n > LEVEL_MARKS:
        logger.warning("Skill level %d outside 0-%d, clamping", n, LEVEL_MARKS)
    return max(0, min(n, LEVEL_MARKS))


def level_marks(level: Any) -> List[bool]:
    """Exactly five marks, the first ``level`` of them filled."""
    n = filled_marks(level)
    return [i < n for i in range(LEVEL_MARKS)]


def social_icon(icons: Any, network: str) -> str:
    if isinstance(icons, Mapping):
        return icons.get(network) or FALLBACK_ICON
    return FALLBACK_ICON
