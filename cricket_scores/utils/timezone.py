"""Timezone conversion utilities"""
from datetime import datetime, timedelta
from typing import Optional
import pytz

from .logger import setup_logger

logger = setup_logger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=pytz.UTC)
DISPLAY_FORMAT = "%Y-%m-%d %I:%M %p"


def from_epoch_millis(value: Optional[str], tz: Optional[str] = None) -> datetime:
    """
    Convert an epoch-milliseconds string to an aware datetime.

    Args:
        value: Epoch milliseconds as sent by the API (e.g. '1729252800000')
        tz: Optional timezone name (e.g. 'Asia/Kolkata').
            If omitted, the process's local timezone is used

    Returns:
        Timezone-aware datetime. Missing or unparseable values map to the epoch.
    """
    zone = pytz.timezone(tz) if tz else None

    try:
        utc = EPOCH + timedelta(milliseconds=int(value))
        # Dates near year 1 or 9999 can overflow when shifted into the display zone
        return utc.astimezone(zone)
    except (TypeError, ValueError, OverflowError):
        logger.debug(f"Unparseable epoch value {value!r}, using epoch zero")
        return EPOCH.astimezone(zone)


def format_local_time(value: Optional[str], tz: Optional[str] = None) -> str:
    """Render an epoch-milliseconds string as 'YYYY-MM-DD hh:mm AM/PM'"""
    return from_epoch_millis(value, tz).strftime(DISPLAY_FORMAT)
