"""Weekend detection and business-day adjustment (no holiday calendar)"""
from datetime import date, timedelta

# date.weekday(): 5=Saturday, 6=Sunday
WEEKEND_DAYS = (5, 6)


def is_weekend(value: date) -> bool:
    return value.weekday() in WEEKEND_DAYS


def next_business_day(value: date) -> date:
    """Return `value` if it is a weekday, otherwise the following Monday"""
    result = value
    while is_weekend(result):
        result += timedelta(days=1)
    return result
