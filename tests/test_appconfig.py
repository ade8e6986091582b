import json

import gpxactivity.appconfig as gcfg
from gpxactivity.appconfig import DEFAULT_CONFIG, load_config


class TestLoadConfig:
    """Config resolution: defaults, then file, then environment."""

    def test_defaults_without_file(self, monkeypatch):
        monkeypatch.setattr(gcfg, "_FILE_PATHS", [])
        for var in gcfg._ENV_OVERRIDES:
            monkeypatch.delenv(var, raising=False)

        config = load_config()

        assert config == DEFAULT_CONFIG
        assert config is not DEFAULT_CONFIG

    def test_file_overrides_defaults(self, monkeypatch, tmp_path):
        config_path = tmp_path / "gpxactivity_config.json"
        config_path.write_text(json.dumps({"home_timezone": "US/Pacific", "units": "imperial"}))
        monkeypatch.setattr(gcfg, "_FILE_PATHS", [tmp_path / "missing.json", config_path])
        for var in gcfg._ENV_OVERRIDES:
            monkeypatch.delenv(var, raising=False)

        config = load_config()

        assert config["home_timezone"] == "US/Pacific"
        assert config["units"] == "imperial"
        assert config["debug"] is False

    def test_env_overrides_file(self, monkeypatch, tmp_path):
        config_path = tmp_path / "gpxactivity_config.json"
        config_path.write_text(json.dumps({"home_timezone": "US/Pacific"}))
        monkeypatch.setattr(gcfg, "_FILE_PATHS", [config_path])
        monkeypatch.setenv("GPXACTIVITY_HOME_TIMEZONE", "Europe/Amsterdam")
        monkeypatch.setenv("GPXACTIVITY_MAX_ELEMENTS", "1000")
        monkeypatch.delenv("GPXACTIVITY_DEBUG", raising=False)
        monkeypatch.delenv("GPXACTIVITY_UNITS", raising=False)

        config = load_config()

        assert config["home_timezone"] == "Europe/Amsterdam"
        assert config["max_elements"] == 1000

    def test_invalid_values_are_ignored(self, monkeypatch, tmp_path):
        config_path = tmp_path / "gpxactivity_config.json"
        config_path.write_text("{not json")
        monkeypatch.setattr(gcfg, "_FILE_PATHS", [config_path])
        monkeypatch.setenv("GPXACTIVITY_MAX_ELEMENTS", "lots")
        monkeypatch.setenv("GPXACTIVITY_UNITS", "furlongs")
        monkeypatch.delenv("GPXACTIVITY_DEBUG", raising=False)
        monkeypatch.delenv("GPXACTIVITY_HOME_TIMEZONE", raising=False)

        config = load_config()

        assert config["max_elements"] == DEFAULT_CONFIG["max_elements"]
        assert config["units"] == "metric"
