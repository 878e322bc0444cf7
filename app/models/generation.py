"""Task generation report models"""
from datetime import date
from typing import List

from pydantic import BaseModel, Field

DEFAULT_ERROR_DISPLAY_LIMIT = 5


class GenerationOutcome(BaseModel):
    """Result of one generation run: successes and every per-client failure"""
    success_count: int = 0
    errors: List[str] = Field(default_factory=list)

    def display_errors(self, limit: int = DEFAULT_ERROR_DISPLAY_LIMIT) -> List[str]:
        """First `limit` errors plus a summary line for the rest"""
        shown = self.errors[:limit]
        hidden = len(self.errors) - len(shown)
        if hidden > 0:
            shown.append(f"... and {hidden} more error(s)")
        return shown


class ScheduledOccurrence(BaseModel):
    """One competence of a template's yearly schedule"""
    competence: str
    due_date: date
    due_date_display: str
    days_until: int
    overdue: bool
