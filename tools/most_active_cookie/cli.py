"""CLI interface for Most Active Cookie."""

import json
import sys
from pathlib import Path
from typing import Optional

import click
from rich.markup import escape
from rich.text import Text

from shared.cli import create_table, error, handle_errors, info, print_table, success, warning
from shared.logger import setup_logger

from .analyzer import CookieActivity, summarize_activity
from .parser import CookieLogError, MalformedRecordError, ParsePolicy, open_csv_file, parse_cookie_logs

INVALID_ARGUMENTS = "Invalid argument(s)!"


def display_activity(activity: CookieActivity) -> None:
    """Display most active cookies in a table."""
    table = create_table(title=f"Most Active Cookies ({escape(str(activity.date))})")
    table.add_column("Cookie", style="cyan")
    table.add_column("Sightings", justify="right", style="yellow")

    for cookie in activity.cookies:
        table.add_row(Text(cookie), str(activity.max_count))

    print_table(table)


@click.command()
@click.argument(
    "log_file",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--date",
    "-d",
    help="UTC date to check (YYYY-MM-DD)",
)
@click.option(
    "--on-malformed",
    type=click.Choice([p.value for p in ParsePolicy], case_sensitive=False),
    default=ParsePolicy.FAIL.value,
    envvar="MOST_ACTIVE_COOKIE_ON_MALFORMED",
    show_default=True,
    help="Abort on a malformed record or skip it with a warning",
)
@click.option(
    "--output",
    "-o",
    type=click.Choice(["text", "json", "table"], case_sensitive=False),
    default="text",
    help="Output format",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@handle_errors
def main(
    log_file: Optional[Path],
    date: Optional[str],
    on_malformed: str,
    output: str,
    verbose: bool,
):
    """
    Most Active Cookie - Find the most active cookie(s) on a given day.

    LOG_FILE is a csv file with a header line followed by
    `cookie,timestamp` records. Ties are all printed, one per line.

    Examples:

        \b
        # Most active cookie on a day
        most-active-cookie cookie_log.csv -d 2018-12-09

        \b
        # Tolerate broken records
        most-active-cookie cookie_log.csv -d 2018-12-09 --on-malformed skip

        \b
        # JSON output
        most-active-cookie cookie_log.csv -d 2018-12-09 --output json
    """
    # Setup logging
    log_level = "DEBUG" if verbose else "INFO"
    setup_logger("tools.most_active_cookie", level=log_level)

    if log_file is None or date is None:
        click.echo(INVALID_ARGUMENTS)
        sys.exit(2)

    policy = ParsePolicy(on_malformed.lower())

    try:
        lines = open_csv_file(log_file)
        cookie_logs = parse_cookie_logs(lines, policy=policy)
    except MalformedRecordError as e:
        error(str(e))
        sys.exit(1)
    except (OSError, UnicodeDecodeError, CookieLogError) as e:
        error(f"Failed to read log file: {e}")
        sys.exit(1)

    if verbose:
        info(f"Parsed {len(cookie_logs)} entries from {log_file}")

    activity = summarize_activity(cookie_logs, date=date)

    if output == "json":
        click.echo(json.dumps(activity.to_dict(), indent=2))
        sys.exit(0)

    if not activity.cookies:
        warning(f"No cookies found on {date}")
        sys.exit(0)

    if output == "table":
        display_activity(activity)
        success(f"{len(activity.cookies)} cookie(s) with {activity.max_count} sighting(s) on {date}")
    else:
        for cookie in activity.cookies:
            click.echo(cookie)


if __name__ == "__main__":
    main()
