# app/helpers/time.py
from datetime import date, datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def today() -> date:
    """Current calendar date used for registration dates and date checks."""
    return date.today()
