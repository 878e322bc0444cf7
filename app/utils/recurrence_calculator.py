"""Due-date and recurrence calculator for task templates"""
import calendar
from datetime import date
from typing import Dict, List

from app.models.competence import CompetencePeriod
from app.models.task_template import RecurrenceCadence
from app.utils.business_days import next_business_day
from app.utils.competence import parse_competence


# Competence months generated per cadence within a year
RECURRENCE_MONTHS: Dict[RecurrenceCadence, List[int]] = {
    RecurrenceCadence.MONTHLY: list(range(1, 13)),
    RecurrenceCadence.QUARTERLY: [1, 4, 7, 10],
    RecurrenceCadence.YEARLY: [1],
}


def calculate_due_date(competence: str, day_of_month: int, adjust_to_business_day: bool) -> date:
    """
    Calculate the due date of an obligation for a competence period.

    Obligations fall due in the month after the competence they cover.

    Args:
        competence: Competence string "MM/YYYY"
        day_of_month: Target day (1-31); clamped to the due month's last day
        adjust_to_business_day: Move weekend due dates to the next Monday

    Returns:
        The due date

    Raises:
        ValueError: Invalid competence string or day_of_month below 1
    """
    period = parse_competence(competence)

    # Advance one month, rolling the year after December
    year = period.year
    month = period.month + 1
    if month > 12:
        month = 1
        year += 1

    last_day = calendar.monthrange(year, month)[1]
    due_date = date(year, month, min(day_of_month, last_day))

    if adjust_to_business_day:
        return next_business_day(due_date)
    return due_date


def months_for_recurrence(year: int, cadence: RecurrenceCadence) -> List[CompetencePeriod]:
    """
    List the competence periods of a year on which a cadence recurs.

    Args:
        year: Calendar year
        cadence: monthly (12), quarterly (Jan/Apr/Jul/Oct) or yearly (Jan)

    Returns:
        Competence periods in chronological order
    """
    # Raises ValueError for unknown cadences
    months = RECURRENCE_MONTHS[RecurrenceCadence(cadence)]
    return [CompetencePeriod(month=month, year=year) for month in months]
