"""
Day granularity helpers.

Every date the system compares or groups by is first truncated to its calendar
day. Stored records may carry either a bare ISO date (``2025-06-01``) or a full
ISO datetime (``2025-06-01T00:00:00.000Z``); both resolve to the same day.
"""

from datetime import date, datetime


DAY_FORMAT = '%Y-%m-%d'
MONTH_FORMAT = '%Y-%m'


def to_day(value: date | datetime | str) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if len(text) == 10:
        return date.fromisoformat(text)
    # Python < 3.11 rejects the trailing 'Z' that JavaScript clients emit
    return datetime.fromisoformat(text.replace('Z', '+00:00')).date()


def day_key(value: date | datetime | str) -> str:
    return to_day(value).strftime(DAY_FORMAT)


def month_key(value: date | datetime | str) -> str:
    return to_day(value).strftime(MONTH_FORMAT)


def parse_month_key(key: str) -> tuple[int, int]:
    year, month = key.split('-')
    return int(year), int(month)
