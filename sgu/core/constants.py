# sgu/core/constants.py
from pathlib import Path

# --- Application Info ---
APP_NAME: str = "sgu"
APP_VERSION: str = "0.1.0"
USAGE: str = "usage: sgu <id/name>"

# --- Steam Layout ---
DEFAULT_STEAMAPPS_PATH: Path = Path(".local/share/Steam/steamapps")  # Relative to home
LIBRARY_FOLDERS_FILE_NAME: str = "libraryfolders.vdf"
LIBRARY_STEAMAPPS_DIR_NAME: str = "steamapps"
COMMON_DIR_NAME: str = "common"

# --- Manifest Naming Conventions ---
MANIFEST_PREFIX: str = "appmanifest_"
MANIFEST_EXTENSION: str = ".acf"

# --- Manifest Field Names ---
FIELD_APP_ID: str = "appid"
FIELD_NAME: str = "name"
FIELD_INSTALL_DIR: str = "installdir"
FIELD_SIZE_ON_DISK: str = "SizeOnDisk"

# --- Key-Value Format ---
VDF_FIELD_SEPARATOR: str = "\t\t"

# --- File & Directory Names ---
CONFIG_FILE_NAME: str = "config.json"
DEFAULT_CONFIG_PATH: Path = Path(".config/sgu") / CONFIG_FILE_NAME  # Relative to home
DEFAULT_LOG_DIR: Path = Path(".cache/sgu/logs")  # Relative to home

# --- Size Display ---
BYTES_PER_GB: int = 1_000_000_000
BYTES_PER_MB: int = 1_000_000


def manifest_file_name(app_id: int) -> str:
    """Builds the manifest file name Steam uses for an app id."""
    return f"{MANIFEST_PREFIX}{app_id}{MANIFEST_EXTENSION}"
