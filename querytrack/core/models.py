from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogFormat(str, Enum):
    """Backing file formats for the query log."""

    CSV = "csv"
    MARKDOWN = "md"

    @property
    def extension(self) -> str:
        return ".csv" if self is LogFormat.CSV else ".md"


class QueryRecord(BaseModel):
    """One logged query event. Immutable once built."""

    model_config = ConfigDict(frozen=True)

    timestamp: str = Field(..., description="ISO-8601 instant, used for ordering and day-bucketing")
    display_date: str = Field(default="", description="Human-readable date stored in the `date` column")
    model: str = Field(..., description="Name of the queried model")
    category: str = Field(default="", description="Open-vocabulary category, may be empty")
    query_summary: str = Field(..., description="Short description of the query")
    notes: str = Field(default="", description="Optional free text")

    @field_validator("category", "notes", "display_date", mode="before")
    @classmethod
    def none_to_empty(cls, v: str | None) -> str:
        return "" if v is None else v

    def fields(self) -> list[str]:
        """Positional values in file column order."""
        return [
            self.timestamp,
            self.display_date,
            self.model,
            self.category,
            self.query_summary,
            self.notes,
        ]


class BreakdownEntry(BaseModel):
    """Single (label, count, percent) row of a breakdown."""

    label: str
    count: int = Field(..., ge=0)
    percent: float = Field(..., ge=0.0, le=100.0)


class DailyCount(BaseModel):
    """Number of records on one local calendar day."""

    day: date
    count: int = Field(..., gt=0)


class AggregateReport(BaseModel):
    """Statistics derived from the full record set; rebuilt on every render."""

    total: int = Field(..., gt=0)
    today_count: int = Field(..., ge=0, description="Records on the most recent day present")
    avg_per_day: float = Field(..., ge=0.0)
    category_breakdown: list[BreakdownEntry] = Field(default_factory=list)
    model_breakdown: list[BreakdownEntry] = Field(default_factory=list)
    daily_series: list[DailyCount] = Field(default_factory=list)

    @property
    def distinct_categories(self) -> int:
        return len(self.category_breakdown)

    @property
    def max_daily_count(self) -> int:
        return max((d.count for d in self.daily_series), default=0)
