"""Competence period value type and validation"""
import re
from datetime import date
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field

# Exactly two digits, slash, four digits (e.g. "01/2025")
COMPETENCE_PATTERN = re.compile(r"^\d{2}/\d{4}$")


class CompetencePeriod(BaseModel):
    """Calendar month/year an obligation covers"""
    model_config = ConfigDict(frozen=True)

    month: int = Field(ge=1, le=12)
    year: int = Field(ge=1)

    @classmethod
    def from_date(cls, value: date) -> "CompetencePeriod":
        return cls(month=value.month, year=value.year)

    def __str__(self) -> str:
        return f"{self.month:02d}/{self.year}"


def validate_competence_format(value: str) -> str:
    """
    Validate the textual "MM/YYYY" form accepted by the API.

    Args:
        value: Competence string like "01/2025"

    Returns:
        The validated competence string

    Raises:
        ValueError: If the string does not match the pattern
    """
    if not COMPETENCE_PATTERN.match(value):
        raise ValueError(
            f"Invalid competence: '{value}'. Expected format MM/YYYY (e.g. 01/2025)"
        )
    return value


# Pydantic annotated type for request models
CompetenceString = Annotated[str, AfterValidator(validate_competence_format)]
