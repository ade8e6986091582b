"""CLI subcommands for gpxactivity."""
