"""Functional core - pure recurrence logic with no I/O."""

from .dates import add_days, add_weeks, add_months, add_years, is_same_day
from .recurrence import (
    DayOfMonth,
    Frequency,
    RecurrenceConfig,
    RecurrenceConfigError,
    WeekOfMonth,
    config_warnings,
    generate,
)
from .summary import Summary, summarize, summary_text
from .month_grid import GridDay, format_month, month_grid

__all__ = [
    # Dates
    "add_days",
    "add_weeks",
    "add_months",
    "add_years",
    "is_same_day",
    # Recurrence
    "DayOfMonth",
    "Frequency",
    "RecurrenceConfig",
    "RecurrenceConfigError",
    "WeekOfMonth",
    "config_warnings",
    "generate",
    # Summary
    "Summary",
    "summarize",
    "summary_text",
    # Month grid
    "GridDay",
    "format_month",
    "month_grid",
]
