# tests/helpers.py
from datetime import timedelta

from app.helpers.time import today


def future_date(days: int = 7) -> str:
    return (today() + timedelta(days=days)).isoformat()


def past_date(days: int = 7) -> str:
    return (today() - timedelta(days=days)).isoformat()
