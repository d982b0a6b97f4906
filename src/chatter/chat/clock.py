# ABOUTME: Time source for chat logs in a configurable time zone
# ABOUTME: Provides the current zoned time and long-form calendar date rendering

from datetime import date, datetime
from zoneinfo import ZoneInfo


def format_long_date(day: date) -> str:
    """
    Render a date as "Tuesday, May 9, 2023".

    Weekday and month names come from the current locale.
    """
    return f"{day:%A}, {day:%B} {day.day}, {day.year}"


class Clock:
    """Supplies the current time in a fixed IANA time zone."""

    def __init__(self, timezone: str = "UTC"):
        self.timezone = timezone
        self._zone = ZoneInfo(timezone)

    def now(self) -> datetime:
        return datetime.now(self._zone)

    def format_long_date(self, day: date) -> str:
        return format_long_date(day)
