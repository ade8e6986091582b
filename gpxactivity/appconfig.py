"""Application configuration helpers.

Configuration is resolved on every ``load_config()`` call:
  - built-in defaults,
  - overlaid by the first JSON config file found (if any),
  - overlaid by ``GPXACTIVITY_*`` environment variables.

No config file is required; the defaults always work.
"""

import copy
import json
import logging
import os
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Defaults
# ---------------------------------------------------------------------------

DEFAULT_CONFIG: dict[str, Any] = {
    "home_timezone": "UTC",
    "debug": False,
    "units": "metric",  # or "imperial"
    "max_elements": 5_000_000,  # 0 disables the limit
}

# Candidate JSON config file locations (searched in order)
_FILE_PATHS: list[Path] = [
    Path("gpxactivity_config.json"),
    Path("../gpxactivity_config.json"),
]

# Environment variable -> (config key, converter)
_ENV_OVERRIDES = {
    "GPXACTIVITY_HOME_TIMEZONE": ("home_timezone", str),
    "GPXACTIVITY_DEBUG": ("debug", lambda v: v.strip().lower() in ("1", "true", "yes", "y")),
    "GPXACTIVITY_UNITS": ("units", str),
    "GPXACTIVITY_MAX_ELEMENTS": ("max_elements", int),
}


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _load_from_file() -> dict[str, Any] | None:
    """Try each candidate path; return parsed JSON or ``None``."""
    for path in _FILE_PATHS:
        if path.exists():
            try:
                with open(path) as f:
                    return json.load(f)
            except (OSError, json.JSONDecodeError) as e:
                logger.warning("Ignoring unreadable config file %s: %s", path, e)
    return None


def _load_from_env() -> dict[str, Any]:
    overrides = {}
    for var, (key, convert) in _ENV_OVERRIDES.items():
        value = os.environ.get(var)
        if value is None or value == "":
            continue
        try:
            overrides[key] = convert(value)
        except ValueError:
            logger.warning("Ignoring invalid value for %s: %r", var, value)
    return overrides


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config() -> dict[str, Any]:
    """Return defaults merged with the JSON config file and environment."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    file_cfg = _load_from_file()
    if file_cfg:
        config.update(file_cfg)
    config.update(_load_from_env())

    if config.get("units") not in ("metric", "imperial"):
        logger.warning("Unknown units %r, using metric", config.get("units"))
        config["units"] = "metric"

    if config.get("debug"):
        logging.basicConfig(level=logging.DEBUG)

    return config
