#!/usr/bin/env python3
"""
Reporting Period Primitive Type

A reporting period is one calendar month. It decides the date range sent
to the ledger API and the name of the CSV file written for it.
"""

import calendar
from dataclasses import dataclass
from datetime import date, datetime


@dataclass(frozen=True)
class ReportingPeriod:
    """Immutable calendar month used as the export window."""

    year: int
    month: int

    def __post_init__(self) -> None:
        if not 1 <= self.month <= 12:
            raise ValueError(f"Month must be 1-12, got {self.month}")

    @classmethod
    def from_string(cls, month_str: str) -> "ReportingPeriod":
        """
        Parse a period from a "YYYY-MM" string.

        Raises:
            ValueError: If the string is not a valid year and month
        """
        parsed = datetime.strptime(month_str, "%Y-%m")
        return cls(year=parsed.year, month=parsed.month)

    @classmethod
    def containing(cls, day: date) -> "ReportingPeriod":
        """Get the period that contains the given day."""
        return cls(year=day.year, month=day.month)

    @classmethod
    def current(cls) -> "ReportingPeriod":
        """Get the period for today's local date."""
        return cls.containing(date.today())

    @property
    def first_day(self) -> date:
        return date(self.year, self.month, 1)

    @property
    def last_day(self) -> date:
        _, days_in_month = calendar.monthrange(self.year, self.month)
        return date(self.year, self.month, days_in_month)

    @property
    def start_date(self) -> str:
        """First day of the month as YYYY-MM-DD."""
        return self.first_day.isoformat()

    @property
    def end_date(self) -> str:
        """Last day of the month as YYYY-MM-DD."""
        return self.last_day.isoformat()

    @property
    def filename(self) -> str:
        """CSV file name for this period, e.g. "2024-03.csv"."""
        return f"{self}.csv"

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}"
