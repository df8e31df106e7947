"""Calendar-date helpers shared by extraction and projection."""

from __future__ import annotations

import re
from datetime import date, datetime

import pandas as pd

_ISO_DATE_RE = re.compile(r'^[0-9]{4}-[0-9]{2}-[0-9]{2}$')


def is_iso_date_text(value: str) -> bool:
    """True when text has the exact YYYY-MM-DD shape (range not checked)."""
    return bool(_ISO_DATE_RE.match(value))


def to_calendar_date(value: pd.Timestamp | datetime | date | str) -> date:
    """Convert an input value to a plain calendar date."""
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    ts = pd.Timestamp(value)
    if ts.tz is not None:
        ts = ts.tz_convert(None)
    return ts.date()


def format_iso_date(value: date) -> str:
    return value.isoformat()
