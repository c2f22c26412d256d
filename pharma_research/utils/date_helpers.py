from datetime import datetime, date, timezone
from typing import Optional


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in DateTime columns"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def days_until_expiry(expiry_date: Optional[date]) -> Optional[int]:
    if not expiry_date:
        return None

    delta = expiry_date - date.today()
    return delta.days


def is_expired(expiry_date: Optional[date]) -> bool:
    if not expiry_date:
        return False

    return expiry_date < date.today()


def format_long_date(value: date) -> str:
    return f"{value:%B} {value.day}, {value.year}"


def format_timestamp(dt: datetime) -> str:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)

    return dt.isoformat()
