from datetime import date, datetime, time, timezone, tzinfo
from typing import Protocol, Tuple
from zoneinfo import ZoneInfo


class Clock(Protocol):
    def now(self) -> datetime:
        """Current time as a timezone-aware datetime."""
        ...


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


def get_clock() -> Clock:
    return SystemClock()


def resolve_timezone(name: str) -> tzinfo:
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def to_storage_time(moment: datetime) -> datetime:
    """Naive UTC, the form timestamps are stored in."""
    return moment.astimezone(timezone.utc).replace(tzinfo=None)


def day_window(moment: datetime, day_tz: tzinfo) -> Tuple[date, datetime]:
    """Return the calendar day of ``moment`` in ``day_tz`` and that day's
    midnight as a naive UTC datetime."""
    local_day = moment.astimezone(day_tz).date()
    midnight = datetime.combine(local_day, time.min, tzinfo=day_tz)
    return local_day, to_storage_time(midnight)
