import json
from pathlib import Path

from sgu.models import AppConfig
from sgu.services import ConfigService


def test_missing_config_gives_defaults(tmp_path):
    assert ConfigService(tmp_path / "config.json").load_config() == AppConfig()


def test_settings_are_loaded(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps(
            {
                "settings": {
                    "steam_path": "/mnt/steam/steamapps",
                    "log_dir": "/tmp/sgu-logs",
                    "console_log_level": "info",
                }
            }
        ),
        encoding="utf-8",
    )

    config = ConfigService(path).load_config()

    assert config.steam_path == Path("/mnt/steam/steamapps")
    assert config.log_dir == Path("/tmp/sgu-logs")
    assert config.console_log_level == "INFO"


def test_invalid_json_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json", encoding="utf-8")
    assert ConfigService(path).load_config() == AppConfig()


def test_wrong_types_are_ignored(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"settings": {"steam_path": 3, "console_log_level": []}}), encoding="utf-8")
    assert ConfigService(path).load_config() == AppConfig()


def test_non_object_settings_gives_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"settings": ["x"]}), encoding="utf-8")
    assert ConfigService(path).load_config() == AppConfig()
