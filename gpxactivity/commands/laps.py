"""CLI command: laps — show per-lap totals for the first track of a GPX file."""

from tabulate import tabulate

from gpxactivity.appconfig import load_config
from gpxactivity.formats.gpx import parse_gpx
from gpxactivity.utils import format_distance, format_duration_hms, format_speed


def run(path: str) -> None:
    config = load_config()
    units = config.get("units", "metric")
    activity = parse_gpx(path, max_elements=config.get("max_elements", 0))

    rows = []
    for number, lap in enumerate(activity.laps, start=1):
        rows.append(
            [
                number,
                len(lap.trackpoints),
                format_distance(lap.total_distance, units),
                format_duration_hms(lap.total_time),
                format_speed(lap.average_speed, units),
                format_speed(lap.max_speed, units),
            ]
        )

    print(f"{activity.type or 'Activity'} — {activity.start_time.isoformat()}")
    print(
        tabulate(
            rows,
            headers=["Lap", "Points", "Distance", "Time", "Avg speed", "Max speed"],
            tablefmt="simple",
        )
    )
