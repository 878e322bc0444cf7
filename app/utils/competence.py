"""Competence period codec ("MM/YYYY" <-> CompetencePeriod)"""
from datetime import date

from app.models.competence import CompetencePeriod


def format_competence(value: date) -> str:
    """
    Format a date's month and year as a competence string.

    Args:
        value: Any date inside the competence month

    Returns:
        str: "MM/YYYY", month zero-padded
    """
    return str(CompetencePeriod.from_date(value))


def parse_competence(competence: str) -> CompetencePeriod:
    """
    Parse a competence string into month and year.

    Args:
        competence: String like "03/2025"

    Returns:
        CompetencePeriod with the parsed month and year

    Raises:
        ValueError: If the string does not have exactly two integer parts
            or the month/year are out of range
    """
    parts = competence.split("/")
    if len(parts) != 2:
        raise ValueError(f"Invalid competence '{competence}': expected MM/YYYY")

    month, year = (part.strip() for part in parts)
    if not month.isdigit() or not year.isdigit():
        raise ValueError(f"Invalid competence '{competence}': month and year must be numeric")

    return CompetencePeriod(month=int(month), year=int(year))
