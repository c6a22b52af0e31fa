# sgu/services/config_service.py
import json
from pathlib import Path

from sgu.models.config_model import AppConfig
from sgu.utils.logger_utils import logger


class ConfigService:
    """Manages read operations for the config.json file."""

    def __init__(self, config_path: Path):
        # --- Service Setup ---
        self.config_path = config_path

    def _optional_path(self, settings: dict, key: str) -> Path | None:
        value = settings.get(key)
        if value is None:
            return None
        if not isinstance(value, str) or not value.strip():
            logger.warning(f"Setting '{key}' must be a non-empty path string, got {value!r}. Ignoring.")
            return None
        return Path(value).expanduser()

    def load_config(self) -> AppConfig:
        """
        Loads the configuration from config.json.
        A missing, unreadable or malformed file gives the default AppConfig.
        """
        if not self.config_path.exists():
            logger.debug(
                f"Config file not found at '{self.config_path}'. Returning default config."
            )
            return AppConfig()

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse {self.config_path}: {e}. Returning default config.")
            return AppConfig()
        except OSError as e:
            logger.error(f"Failed to read {self.config_path}: {e}. Returning default config.")
            return AppConfig()

        # --- Parse [settings] object ---
        settings = data.get("settings", {}) if isinstance(data, dict) else None
        if not isinstance(settings, dict):
            logger.warning(f"'settings' in {self.config_path} is not an object. Ignoring it.")
            return AppConfig()

        console_log_level = settings.get("console_log_level", AppConfig.console_log_level)
        if not isinstance(console_log_level, str):
            logger.warning(f"console_log_level must be a string, got {console_log_level!r}. Ignoring.")
            console_log_level = AppConfig.console_log_level

        logger.info(f"Successfully loaded configuration from {self.config_path}.")
        return AppConfig(
            steam_path=self._optional_path(settings, "steam_path"),
            log_dir=self._optional_path(settings, "log_dir"),
            console_log_level=console_log_level.upper(),
        )
