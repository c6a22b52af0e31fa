# sgu/services/library_service.py
from pathlib import Path

from sgu.core.constants import (
    DEFAULT_STEAMAPPS_PATH,
    LIBRARY_FOLDERS_FILE_NAME,
    LIBRARY_STEAMAPPS_DIR_NAME,
)
from sgu.services.vdf_parsing_service import VdfParsingService
from sgu.utils.logger_utils import logger
from sgu.utils.system_utils import SystemUtils


class LibraryService:
    """Discovers the Steam library folders that may contain installed games."""

    def __init__(self, vdf_parsing_service: VdfParsingService, steam_path: Path | None = None):
        # --- Injected Services ---
        self.vdf_parsing_service = vdf_parsing_service
        # --- Service Setup ---
        self._steam_path = steam_path

    @property
    def primary_library(self) -> Path:
        """The default steamapps directory, or the configured override."""
        if self._steam_path is not None:
            return Path(self._steam_path).expanduser()
        return Path.home() / DEFAULT_STEAMAPPS_PATH

    def discover_libraries(self) -> tuple[Path, ...]:
        """
        Returns the primary library followed by every additional library
        listed in its libraryfolders.vdf, in the order the file lists them.

        Only numeric keys name a library; other fields in the same document
        (e.g. "contentstatsid") are ignored. A missing or unreadable
        libraryfolders.vdf just leaves the primary library on its own.
        """
        primary = self.primary_library
        libraries = [primary]

        folders_path = primary / LIBRARY_FOLDERS_FILE_NAME
        folders = self.vdf_parsing_service.parse_file(folders_path)

        for key, value in folders.items():
            index = SystemUtils.parse_int(key)
            if index is None or index < 0:
                continue
            libraries.append(Path(value) / LIBRARY_STEAMAPPS_DIR_NAME)

        logger.info(
            f"Discovered {len(libraries)} Steam libraries: {', '.join(str(p) for p in libraries)}"
        )
        return tuple(libraries)
