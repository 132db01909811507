"""Recur CLI - preview recurring dates from the terminal."""

import json
import logging
import sys
from datetime import date
from pathlib import Path

import click

from . import __version__
from .config import Config, load_config
from .core.dates import format_date, parse_weekday, week_of_month, weekday_index
from .core.month_grid import format_month, month_grid, shift_month
from .core.recurrence import (
    DayOfMonth,
    Frequency,
    RecurrenceConfig,
    RecurrenceConfigError,
    WeekOfMonth,
    generate,
)
from .core.summary import summarize

ISO_DATE = click.DateTime(formats=["%Y-%m-%d"])


def pattern_options(f):
    """Options shared by every command that builds a RecurrenceConfig."""
    options = [
        click.option(
            "--type",
            "freq",
            type=click.Choice([freq.value for freq in Frequency]),
            help="Base pattern (default from recur.conf)",
        ),
        click.option("--interval", type=int, help="Every N days/months/years"),
        click.option("--start", type=ISO_DATE, help="Start date, YYYY-MM-DD"),
        click.option("--end", type=ISO_DATE, help="End date, YYYY-MM-DD (default: start + 2 years)"),
        click.option("--days", help="Weekly days, e.g. mon,wed or 1,3 (0 = Sunday)"),
        click.option("--day-of-month", type=click.IntRange(1, 31), help="Monthly on this day"),
        click.option("--nth", type=click.IntRange(1, 5), help="Monthly on the Nth --weekday"),
        click.option("--weekday", help="Weekday for --nth (default: start date's weekday)"),
        click.option(
            "--from-json",
            "from_json",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Read the config from a JSON document; other options override it",
        ),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _parse_days(value: str) -> frozenset[int]:
    try:
        return frozenset(parse_weekday(d) for d in value.split(",") if d.strip())
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--days") from e


def _monthly_pattern(
    start: date | None,
    day_of_month: int | None,
    nth: int | None,
    weekday: str | None,
) -> DayOfMonth | WeekOfMonth | None:
    if day_of_month is not None:
        if nth is not None or weekday is not None:
            raise click.UsageError("--day-of-month cannot be combined with --nth or --weekday")
        return DayOfMonth(day=day_of_month)
    if nth is None and weekday is None:
        return None

    if weekday is not None:
        try:
            day = parse_weekday(weekday)
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="--weekday") from e
    elif start:
        day = weekday_index(start)
    else:
        raise click.BadParameter("needs --weekday or --start", param_hint="--nth")

    if nth is None:
        if not start:
            raise click.BadParameter("needs --nth or --start", param_hint="--weekday")
        nth = week_of_month(start)
    return WeekOfMonth(week=nth, day=day)


def build_config(settings: Config, opts: dict) -> RecurrenceConfig:
    """Turn command-line options into a RecurrenceConfig."""
    if opts.get("from_json"):
        path: Path = opts["from_json"]
        try:
            config = RecurrenceConfig.from_dict(json.loads(path.read_text()))
        except (json.JSONDecodeError, RecurrenceConfigError) as e:
            click.echo(f"Error: {path}: {e}", err=True)
            sys.exit(1)
    else:
        config = RecurrenceConfig(type=settings.default_type, interval=settings.default_interval)

    changes = {}
    if opts.get("freq"):
        changes["type"] = opts["freq"]
    if opts.get("interval") is not None:
        changes["interval"] = opts["interval"]
    if opts.get("start"):
        changes["start_date"] = opts["start"].date()
    if opts.get("end"):
        changes["end_date"] = opts["end"].date()
    if opts.get("days") is not None:
        changes["selected_days"] = _parse_days(opts["days"])

    pattern = _monthly_pattern(
        changes.get("start_date", config.start_date),
        opts.get("day_of_month"),
        opts.get("nth"),
        opts.get("weekday"),
    )
    if pattern:
        changes["monthly_pattern"] = pattern

    return config.with_changes(**changes) if changes else config


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx, debug: bool):
    """Recur - recurring date configurator."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    ctx.obj = load_config()


@main.command()
@pattern_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def dates(settings: Config, as_json: bool, **opts):
    """List the dates a recurrence produces."""
    config = build_config(settings, opts)
    occurrences = generate(config)

    if as_json:
        click.echo(json.dumps([d.isoformat() for d in occurrences], indent=2))
        return

    if not occurrences:
        click.echo("No occurrences.")
        return

    for d in occurrences:
        click.echo(format_date(d))


@main.command()
@pattern_options
@click.pass_obj
def summary(settings: Config, **opts):
    """Describe a recurrence and preview its next occurrences."""
    config = build_config(settings, opts)
    occurrences = generate(config)
    result = summarize(config, occurrences, preview=settings.preview_count)

    click.echo(result.text)
    click.echo(f"{result.count} upcoming occurrence{'' if result.count == 1 else 's'}")
    if result.next_date:
        click.echo(f"Next: {format_date(result.next_date)}")

    if result.count > 1:
        click.echo(f"\nNext {len(result.preview)} occurrences:")
        for d in result.preview:
            click.echo(f"  • {format_date(d)}")

    for warning in result.warnings:
        click.echo(f"\n! {warning}")


@main.command()
@pattern_options
@click.option("--month", type=click.DateTime(formats=["%Y-%m"]), help="First month shown, YYYY-MM")
@click.option("--months", type=click.IntRange(min=1), help="Number of months to show")
@click.pass_obj
def calendar(settings: Config, month, months: int | None, **opts):
    """Show recurring dates on a month calendar."""
    config = build_config(settings, opts)
    occurrences = generate(config)

    if month:
        view = month.date()
    else:
        view = config.start_date or date.today()
    view = view.replace(day=1)

    today = date.today()
    blocks = []
    for offset in range(months or settings.months):
        shown = shift_month(view, offset)
        blocks.append(format_month(shown, month_grid(shown, occurrences, today=today)))
    click.echo("\n\n".join(blocks))
