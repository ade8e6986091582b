# pylint: disable=import-outside-toplevel
"""Main entry point for the gpxactivity CLI.

This module provides the command-line interface for gpxactivity, allowing users
to summarize the activities and laps recorded in GPX files.
"""

import argparse
import sys

from dotenv import load_dotenv

from gpxactivity.errors import GpxActivityError

load_dotenv()

HELP_TEXT = """
gpxactivity - Parse GPX tracks into activities, laps and trackpoints.

Usage:
    python -m gpxactivity <command>

Commands:
    summary PATH   Show the activity in a GPX (or .gpx.gz) file
                   (--multiple shows one row per track)
    laps PATH      Show per-lap distance, time and speed
    help           Show this help and usage documentation

Configuration:
    Settings are read from gpxactivity_config.json (or ../gpxactivity_config.json)
    and GPXACTIVITY_* environment variables, including a .env file:
        GPXACTIVITY_HOME_TIMEZONE   timezone used to display start times
        GPXACTIVITY_UNITS           metric or imperial
        GPXACTIVITY_DEBUG           enable debug logging
        GPXACTIVITY_MAX_ELEMENTS    reject documents with more XML elements

See README.md for more details.
"""


def main(argv=None):
    """Main function for the gpxactivity CLI."""
    parser = argparse.ArgumentParser(prog="gpxactivity", description="gpxactivity CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary_parser = subparsers.add_parser("summary", help="Show the activities in a GPX file")
    summary_parser.add_argument("path", type=str, help="Path to a .gpx or .gpx.gz file")
    summary_parser.add_argument(
        "--multiple",
        action="store_true",
        help="Parse every track in the file instead of only the first",
    )

    laps_parser = subparsers.add_parser("laps", help="Show per-lap totals for a GPX file")
    laps_parser.add_argument("path", type=str, help="Path to a .gpx or .gpx.gz file")

    subparsers.add_parser("help", help="Show usage and documentation")

    args = parser.parse_args(argv)

    try:
        if args.command == "summary":
            from gpxactivity.commands.summary import run

            run(args.path, multiple=args.multiple)
        elif args.command == "laps":
            from gpxactivity.commands.laps import run

            run(args.path)
        elif args.command == "help":
            print(HELP_TEXT)
        else:
            parser.print_help()
    except GpxActivityError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
