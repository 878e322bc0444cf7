"""Date display helpers (pt-BR)"""
from datetime import date, datetime, timedelta, timezone
from typing import Optional, Union

# Brasília time (UTC-3), no DST since 2019
BRT = timezone(timedelta(hours=-3))

DateLike = Union[date, str]


def _to_date(value: DateLike) -> date:
    """Normalize ISO strings and datetimes to a date"""
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    if isinstance(value, datetime):
        return value.date()
    return value


def today_brt() -> date:
    return datetime.now(timezone.utc).astimezone(BRT).date()


def format_date_br(value: DateLike) -> str:
    """
    Format a date for display in pt-BR.

    Returns:
        str: "19/10/2026" style string
    """
    return _to_date(value).strftime("%d/%m/%Y")


def days_until(value: DateLike, today: Optional[date] = None) -> int:
    """Calendar days from today until `value` (negative once past)"""
    if today is None:
        today = today_brt()
    return (_to_date(value) - today).days


def is_overdue(value: DateLike, today: Optional[date] = None) -> bool:
    return days_until(value, today) < 0
