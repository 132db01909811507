"""Month preview grid - pure, no I/O."""

from dataclasses import dataclass
from datetime import date

from .dates import add_days, add_months, is_same_day, weekday_index

GRID_CELLS = 42
WEEKDAY_HEADER = ["Su", "Mo", "Tu", "We", "Th", "Fr", "Sa"]


@dataclass
class GridDay:
    """One cell of the month grid."""

    date: date
    in_month: bool
    is_recurring: bool
    is_today: bool


def month_grid(
    view: date,
    recurring: list[date],
    today: date | None = None,
) -> list[GridDay]:
    """
    Six Sunday-first weeks covering the month of `view`.

    Leading and trailing cells belong to the neighbouring months; those are
    never marked recurring.
    """
    first = view.replace(day=1)
    grid_start = add_days(first, -weekday_index(first))

    cells = []
    for i in range(GRID_CELLS):
        d = add_days(grid_start, i)
        in_month = d.month == first.month
        cells.append(
            GridDay(
                date=d,
                in_month=in_month,
                is_recurring=in_month and any(is_same_day(d, r) for r in recurring),
                is_today=today is not None and is_same_day(d, today),
            )
        )
    return cells


def shift_month(view: date, direction: int) -> date:
    """Move the viewed month forward (positive) or back (negative)."""
    return add_months(view, direction)


def format_month(view: date, grid: list[GridDay]) -> str:
    """
    Render a grid as plain text, four characters per cell.

    Recurring days are bracketed ("[ 9]"), today is starred (" 15*"), and
    days outside the viewed month are left blank.
    """
    lines = [view.strftime("%B %Y"), "".join(f" {h} " for h in WEEKDAY_HEADER).rstrip()]
    for week_start in range(0, len(grid), 7):
        cells = []
        for cell in grid[week_start : week_start + 7]:
            day = cell.date.day
            if not cell.in_month:
                cells.append("    ")
            elif cell.is_recurring:
                cells.append(f"[{day:>2}]")
            elif cell.is_today:
                cells.append(f" {day:>2}*")
            else:
                cells.append(f" {day:>2} ")
        lines.append("".join(cells).rstrip())
    return "\n".join(lines)
