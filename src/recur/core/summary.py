"""Pure summary formatting for recurrence configs - no I/O dependencies."""

from dataclasses import dataclass, field
from datetime import date

from .dates import day_name, format_short, ordinal
from .recurrence import (
    DayOfMonth,
    Frequency,
    RecurrenceConfig,
    WeekOfMonth,
    config_warnings,
    effective_interval,
)


@dataclass
class Summary:
    """Everything a consumer shows next to a configured recurrence."""

    text: str
    count: int
    next_date: date | None
    preview: list[date] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


def _every(interval: int, unit: str) -> str:
    if interval == 1:
        return f"Every {unit}"
    return f"Every {interval} {unit}s"


def summary_text(config: RecurrenceConfig) -> str:
    """
    One-line description of a config.

    Examples:
        Every day starting 1/1/2024
        Every 2 weeks on Monday, Wednesday starting 1/1/2024 until 2/1/2024
        Every month on the 2nd Tuesday starting 1/1/2024
    """
    if not config.start_date or not config.type:
        return "No recurrence configured"
    if not isinstance(config.type, Frequency):
        return "Invalid recurrence pattern"

    parts = [_every(effective_interval(config.interval), config.type.unit)]

    match config.type, config.monthly_pattern:
        case Frequency.WEEKLY, _:
            names = ", ".join(day_name(d) for d in sorted(config.selected_days))
            parts.append(f"on {names or 'selected days'}")
        case Frequency.MONTHLY, DayOfMonth(day=day):
            parts.append(f"on day {day}")
        case Frequency.MONTHLY, WeekOfMonth(week=week, day=day):
            parts.append(f"on the {ordinal(week)} {day_name(day)}")

    parts.append(f"starting {format_short(config.start_date)}")
    if config.end_date:
        parts.append(f"until {format_short(config.end_date)}")
    return " ".join(parts)


def summarize(config: RecurrenceConfig, dates: list[date], preview: int = 5) -> Summary:
    """
    Assemble a Summary from a config and its generated dates.

    Pure function - no I/O. `dates` is normally `generate(config)`.
    """
    return Summary(
        text=summary_text(config),
        count=len(dates),
        next_date=dates[0] if dates else None,
        preview=dates[: max(preview, 0)],
        warnings=config_warnings(config),
    )
