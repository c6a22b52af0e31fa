# sgu/models/config_model.py
from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class AppConfig:
    """Holds the application's entire configuration state. Immutable."""

    # --- Steam Locations ---
    # Overrides the default primary steamapps directory when set.
    steam_path: Path | None = None

    # --- Logging ---
    log_dir: Path | None = None
    console_log_level: str = "WARNING"
