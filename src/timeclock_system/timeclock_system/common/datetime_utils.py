from __future__ import annotations

from datetime import date, datetime, timedelta


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    return naive_local(datetime.fromisoformat(value))


def naive_local(value: datetime) -> datetime:
    """Entries are stored as naive local wall-clock time; offsets are converted away."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated toward zero."""
    return int((end - start).total_seconds() / 60)


def iter_days(start: date, end: date):
    """Yield every date in [start, end]."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def format_minutes(minutes: int, *, signed: bool = False) -> str:
    """Format minutes as HH:MM (optionally +HH:MM / -HH:MM)."""
    sign = ""
    if signed:
        sign = "-" if minutes < 0 else "+"
    elif minutes < 0:
        sign = "-"
    total = abs(int(minutes))
    return f"{sign}{total // 60:02d}:{total % 60:02d}"
