"""CLI command: summary — show the activities found in a GPX file."""

import pytz
from tabulate import tabulate

from gpxactivity.appconfig import load_config
from gpxactivity.formats.gpx import parse_gpx, parse_gpx_multiple
from gpxactivity.utils import format_distance, format_duration_hms, format_speed


def _local_time(dt, home_timezone: str) -> str:
    try:
        tz = pytz.timezone(home_timezone)
    except pytz.UnknownTimeZoneError:
        tz = pytz.UTC
    local_dt = dt.astimezone(tz)
    return f"{local_dt.strftime('%Y-%m-%d %H:%M')} {local_dt.tzname()}"


def activity_rows(activities, config) -> list[list[str]]:
    units = config.get("units", "metric")
    home_timezone = config.get("home_timezone", "UTC")
    rows = []
    for activity in activities:
        rows.append(
            [
                _local_time(activity.start_time, home_timezone),
                activity.type or "—",
                format_distance(activity.total_distance, units),
                format_duration_hms(activity.total_time),
                format_speed(activity.max_speed, units),
                len(activity.laps),
            ]
        )
    return rows


def run(path: str, multiple: bool = False) -> None:
    """Print one row per activity in the GPX file at *path*."""
    config = load_config()
    max_elements = config.get("max_elements", 0)

    if multiple:
        activities = parse_gpx_multiple(path, max_elements=max_elements)
    else:
        activities = [parse_gpx(path, max_elements=max_elements)]

    if not activities:
        print("No activities found.")
        return

    print(
        tabulate(
            activity_rows(activities, config),
            headers=["Start", "Type", "Distance", "Duration", "Max speed", "Laps"],
            tablefmt="simple",
        )
    )
