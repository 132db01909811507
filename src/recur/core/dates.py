"""Pure calendar arithmetic - no I/O dependencies.

All functions work on local calendar days. Weekday indices run from
0 (Sunday) to 6 (Saturday).
"""

from datetime import date, datetime, timedelta

DAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


def add_days(d: date, n: int) -> date:
    return d + timedelta(days=n)


def add_weeks(d: date, n: int) -> date:
    return add_days(d, n * 7)


def add_months(d: date, n: int) -> date:
    """
    Same day-of-month, N months later.

    Days past the end of a shorter target month roll over into the
    following month instead of being clamped:
    2024-01-31 + 1 month = 2024-03-02, 2023-01-31 + 1 month = 2023-03-03.
    """
    year, month = divmod(d.year * 12 + (d.month - 1) + n, 12)
    return date(year, month + 1, 1) + timedelta(days=d.day - 1)


def add_years(d: date, n: int) -> date:
    """Same month and day, N years later. Feb 29 rolls to Mar 1 in non-leap years."""
    return date(d.year + n, d.month, 1) + timedelta(days=d.day - 1)


def is_same_day(a: date, b: date) -> bool:
    """Check if two dates (or datetimes) fall on the same calendar day."""
    return (a.year, a.month, a.day) == (b.year, b.month, b.day)


def weekday_index(d: date) -> int:
    """Day of week, 0 = Sunday."""
    return d.isoweekday() % 7


def week_of_month(d: date) -> int:
    """Ordinal of this weekday within its month: ceil(day / 7)."""
    return (d.day + 6) // 7


def day_name(index: int) -> str:
    return DAY_NAMES[index]


def parse_weekday(value: int | str) -> int:
    """
    Weekday index from an int (0-6) or an English day name.

    Names match case-insensitively on any prefix of two letters or more
    ("tu", "Tue", "tuesday").
    """
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"Unknown weekday: {value!r}")
    if isinstance(value, int):
        if 0 <= value <= 6:
            return value
        raise ValueError(f"Weekday index out of range: {value}")

    text = value.strip().lower()
    if text.isdigit():
        return parse_weekday(int(text))
    if len(text) >= 2:
        for i, name in enumerate(DAY_NAMES):
            if name.lower().startswith(text):
                return i
    raise ValueError(f"Unknown weekday: {value!r}")


def ordinal(n: int) -> str:
    """1 -> '1st', 2 -> '2nd', 11 -> '11th', 22 -> '22nd'."""
    if n <= 0:
        return str(n)
    if 3 < n < 21 or n % 10 > 3:
        suffix = "th"
    else:
        suffix = ["th", "st", "nd", "rd"][n % 10]
    return f"{n}{suffix}"


def format_date(d: date | datetime) -> str:
    """Long display form, e.g. 'Mon, Jan 1, 2024'."""
    return f"{d.strftime('%a, %b')} {d.day}, {d.year}"


def format_short(d: date | datetime) -> str:
    """Short numeric form, e.g. '1/15/2024'."""
    return f"{d.month}/{d.day}/{d.year}"
