# This project was developed with assistance from AI tools.
"""Timestamp rendering for applicant-facing output.

Pure helper used by the route layer; the resolver itself never formats.
Output is always ``DD.MM.YYYY HH:MM`` (zero padded, 24 hour clock) or the
placeholder ``"-"`` -- it never raises.
"""

import logging
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..core.config import settings

logger = logging.getLogger(__name__)

PLACEHOLDER = "-"


def _display_zone() -> tzinfo | None:
    """Configured display zone, or None for the process-local zone."""
    if not settings.DISPLAY_TIMEZONE:
        return None
    try:
        return ZoneInfo(settings.DISPLAY_TIMEZONE)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(
            "Unknown DISPLAY_TIMEZONE '%s', falling back to local time",
            settings.DISPLAY_TIMEZONE,
        )
        return None


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO-8601 string (trailing ``Z`` allowed) into a datetime.

    Returns None for empty or unparseable input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return None


def format_for_display(value: str | datetime | None, tz: tzinfo | None = None) -> str:
    """Render a timestamp as ``DD.MM.YYYY HH:MM`` in the display zone.

    Args:
        value: ISO-8601 string or datetime. Naive values are taken as
            already being in the display zone.
        tz: Zone to render in. Defaults to ``settings.DISPLAY_TIMEZONE``,
            then the server's local zone.

    Returns:
        The formatted string, or ``"-"`` for missing/unparseable input.
    """
    parsed = parse_timestamp(value)
    if parsed is None:
        return PLACEHOLDER

    zone = tz if tz is not None else _display_zone()
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(zone)
        except (OverflowError, ValueError):
            return PLACEHOLDER

    return (
        f"{parsed.day:02d}.{parsed.month:02d}.{parsed.year:04d} "
        f"{parsed.hour:02d}:{parsed.minute:02d}"
    )
