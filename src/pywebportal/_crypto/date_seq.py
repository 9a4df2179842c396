"""Calendar-day digest used as key and LocalName material."""

from __future__ import annotations

from datetime import date as _date
from datetime import datetime


def portal_weekday(day: _date) -> int:
    """Weekday number as the portal computes it (0 = Sunday ... 6 = Saturday)."""
    return (day.weekday() + 1) % 7


def encode_date_sequence(date: _date | None = None) -> str:
    """Build the 7-character digest of a calendar day.

    Day, month and two-digit year are zero-padded to two characters each and
    interleaved around the weekday digit::

        D0 M0 Y0 W D1 M1 Y1

    so 2024-03-15 (a Friday) becomes ``"1025534"``.

    Parameters
    ----------
    date : datetime.date or datetime.datetime, optional
        Day to encode.  Defaults to the local current day.

    Returns
    -------
    str
        The 7-character digest.
    """
    if date is None:
        date = datetime.now()
    day = f"{date.day:02d}"
    month = f"{date.month:02d}"
    year = f"{date.year:04d}"[2:]
    weekday = str(portal_weekday(date))
    return day[0] + month[0] + year[0] + weekday + day[1] + month[1] + year[1]
