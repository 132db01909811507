"""Recurrence configuration and date generation - pure, no I/O.

A RecurrenceConfig is an immutable value. Consumers replace it wholesale
on every edit (see `RecurrenceConfig.with_changes`) and call `generate`
again; the engine keeps no state between calls.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from enum import Enum
from typing import Any

from .dates import (
    add_days,
    add_months,
    add_years,
    parse_weekday,
    week_of_month,
    weekday_index,
)

logger = logging.getLogger(__name__)

MAX_OCCURRENCES = 100
DEFAULT_HORIZON_YEARS = 2


class RecurrenceConfigError(ValueError):
    """Raised when a configuration document cannot be parsed."""


class Frequency(Enum):
    """Base recurrence pattern."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"

    @property
    def unit(self) -> str:
        return {"daily": "day", "weekly": "week", "monthly": "month", "yearly": "year"}[self.value]


@dataclass(frozen=True)
class DayOfMonth:
    """Monthly on a fixed calendar day (1-31)."""

    day: int

    @classmethod
    def from_start(cls, start_date: date | None) -> "DayOfMonth":
        return cls(day=start_date.day if start_date else 1)


@dataclass(frozen=True)
class WeekOfMonth:
    """Monthly on the Nth weekday, e.g. week=2, day=2 is the 2nd Tuesday."""

    week: int
    day: int

    @classmethod
    def from_start(cls, start_date: date) -> "WeekOfMonth":
        return cls(week=week_of_month(start_date), day=weekday_index(start_date))


MonthlyPattern = DayOfMonth | WeekOfMonth


@dataclass(frozen=True)
class RecurrenceConfig:
    """
    Declarative recurrence input.

    `type` holds the raw string when it is not a known Frequency; the
    engine then steps one day at a time and includes every day.
    `selected_days` only matters for weekly, `monthly_pattern` only for
    monthly.
    """

    type: Frequency | str = Frequency.DAILY
    start_date: date | None = None
    end_date: date | None = None
    interval: int = 1
    selected_days: frozenset[int] = field(default_factory=frozenset)
    monthly_pattern: MonthlyPattern | None = None

    def __post_init__(self):
        if isinstance(self.type, str) and self.type.lower() in {f.value for f in Frequency}:
            object.__setattr__(self, "type", Frequency(self.type.lower()))
        if not isinstance(self.selected_days, frozenset):
            object.__setattr__(self, "selected_days", frozenset(self.selected_days))

    def with_changes(self, **changes: Any) -> "RecurrenceConfig":
        """New config with the given fields replaced."""
        return replace(self, **changes)

    @classmethod
    def from_dict(cls, data: dict) -> "RecurrenceConfig":
        """
        Build a config from the camelCase document shape.

        Example:
            {"type": "monthly", "interval": 1, "startDate": "2024-01-01",
             "endDate": "2024-03-31",
             "monthlyPattern": {"type": "weekOfMonth", "week": 2, "day": 2}}

        Intervals are coerced (see effective_interval); unparseable dates,
        weekdays or pattern kinds raise RecurrenceConfigError.
        """
        if not isinstance(data, dict):
            raise RecurrenceConfigError(f"Expected a JSON object, got {type(data).__name__}")

        selected = data.get("selectedDays") or []
        if not isinstance(selected, list):
            raise RecurrenceConfigError(f"Invalid selectedDays: {selected!r}")
        try:
            days = frozenset(parse_weekday(d) for d in selected)
        except ValueError as e:
            raise RecurrenceConfigError(str(e)) from e

        return cls(
            type=str(data.get("type") or Frequency.DAILY.value),
            start_date=_parse_date(data.get("startDate"), "startDate"),
            end_date=_parse_date(data.get("endDate"), "endDate"),
            interval=effective_interval(data.get("interval")),
            selected_days=days,
            monthly_pattern=_parse_pattern(data.get("monthlyPattern")),
        )

    def to_dict(self) -> dict:
        """Inverse of from_dict."""
        pattern = None
        match self.monthly_pattern:
            case DayOfMonth(day=day):
                pattern = {"type": "dayOfMonth", "day": day}
            case WeekOfMonth(week=week, day=day):
                pattern = {"type": "weekOfMonth", "week": week, "day": day}
        return {
            "type": self.type.value if isinstance(self.type, Frequency) else self.type,
            "interval": self.interval,
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
            "selectedDays": sorted(self.selected_days),
            "monthlyPattern": pattern,
        }


def _parse_date(value: Any, name: str) -> date | None:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).split("T")[0])
    except ValueError as e:
        raise RecurrenceConfigError(f"Invalid {name}: {value!r}") from e


def _parse_pattern(data: dict | None) -> MonthlyPattern | None:
    if not data:
        return None
    if not isinstance(data, dict):
        raise RecurrenceConfigError(f"Invalid monthlyPattern: {data!r}")
    kind = data.get("type") or data.get("kind")
    try:
        match kind:
            case "dayOfMonth":
                return DayOfMonth(day=int(data["day"]))
            case "weekOfMonth":
                return WeekOfMonth(week=int(data["week"]), day=parse_weekday(data["day"]))
    except (KeyError, TypeError, ValueError) as e:
        raise RecurrenceConfigError(f"Invalid monthlyPattern: {data!r}") from e
    raise RecurrenceConfigError(f"Unknown monthlyPattern type: {kind!r}")


def effective_interval(value: Any) -> int:
    """Interval as a positive int; anything non-numeric or below 1 becomes 1."""
    try:
        n = int(value)
    except (TypeError, ValueError):
        return 1
    return n if n >= 1 else 1


def horizon(config: RecurrenceConfig) -> date | None:
    """Inclusive upper bound: the end date, or two years after the start."""
    if config.end_date:
        return config.end_date
    if config.start_date:
        try:
            return add_years(config.start_date, DEFAULT_HORIZON_YEARS)
        except (OverflowError, ValueError):
            return date.max
    return None


def should_include(d: date, config: RecurrenceConfig) -> bool:
    """Inclusion predicate applied to each cursor position."""
    match config.type, config.monthly_pattern:
        case Frequency.WEEKLY, _:
            return weekday_index(d) in config.selected_days
        case Frequency.MONTHLY, DayOfMonth(day=day):
            return d.day == day
        case Frequency.MONTHLY, WeekOfMonth(week=week, day=day):
            return week_of_month(d) == week and weekday_index(d) == day
        case _:
            return True


def next_date(d: date, config: RecurrenceConfig) -> date:
    """
    Advance the cursor.

    Weekly and monthly-with-pattern walks scan one day at a time and let
    should_include pick the matches, so the interval does not apply to them.
    """
    interval = effective_interval(config.interval)
    match config.type, config.monthly_pattern:
        case Frequency.DAILY, _:
            return add_days(d, interval)
        case Frequency.WEEKLY, _:
            return add_days(d, 1)
        case Frequency.MONTHLY, DayOfMonth() | WeekOfMonth():
            return add_days(d, 1)
        case Frequency.MONTHLY, _:
            return add_months(d, interval)
        case Frequency.YEARLY, _:
            return add_years(d, interval)
        case _:
            return add_days(d, 1)


def generate(config: RecurrenceConfig) -> list[date]:
    """
    Concrete dates produced by a recurrence config, ascending.

    Pure function - no I/O. Walks from the start date to the horizon
    (inclusive) and stops early once MAX_OCCURRENCES dates are collected.
    Returns [] without a start date or when the end date precedes it.
    """
    if not config.start_date:
        return []

    if not isinstance(config.type, Frequency):
        logger.debug(f"Unrecognized recurrence type {config.type!r}, stepping daily")

    end = horizon(config)
    cursor = config.start_date
    dates: list[date] = []

    while cursor <= end and len(dates) < MAX_OCCURRENCES:
        if should_include(cursor, config):
            dates.append(cursor)
        try:
            cursor = next_date(cursor, config)
        except (OverflowError, ValueError):
            logger.debug(f"Next step after {cursor.isoformat()} is past the last representable date")
            return dates

    if len(dates) >= MAX_OCCURRENCES and cursor <= end:
        logger.debug(f"Stopped at {MAX_OCCURRENCES} occurrences before {end.isoformat()}")

    return dates


def config_warnings(config: RecurrenceConfig) -> list[str]:
    """User-facing hints about an incomplete or inconsistent config."""
    warnings = []
    if not config.start_date:
        warnings.append("Please select a start date to begin creating your recurrence pattern.")
    if config.start_date and config.end_date and config.start_date > config.end_date:
        warnings.append("End date must be after start date.")
    if config.type == Frequency.WEEKLY and not config.selected_days:
        warnings.append("Please select at least one day of the week for weekly recurrence.")
    return warnings
