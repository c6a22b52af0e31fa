# sgu/services/game_service.py
import os
from pathlib import Path

from sgu.core.constants import (
    FIELD_APP_ID,
    FIELD_INSTALL_DIR,
    FIELD_NAME,
    FIELD_SIZE_ON_DISK,
    MANIFEST_EXTENSION,
    MANIFEST_PREFIX,
)
from sgu.core.signals import global_signals
from sgu.models.game_model import SteamGame, SteamLibraryIndex
from sgu.services.library_service import LibraryService
from sgu.services.vdf_parsing_service import VdfParsingService
from sgu.utils.logger_utils import logger
from sgu.utils.system_utils import SystemUtils


class GameService:
    """Builds the index of installed games and answers lookups against it."""

    def __init__(
        self,
        library_service: LibraryService,
        vdf_parsing_service: VdfParsingService,
    ):
        # --- Injected Services ---
        self.library_service = library_service
        self.vdf_parsing_service = vdf_parsing_service

    # --- Index Building ---
    def refresh(self) -> SteamLibraryIndex:
        """Discovers the libraries and builds a fresh index from scratch."""
        libraries = self.library_service.discover_libraries()
        return self.build_index(libraries)

    def _report_skip(self, path: Path, reason: str):
        """Skips are never errors, but they stay observable for debugging."""
        logger.debug(f"Skipping '{path}': {reason}")
        global_signals.scan_skipped.emit(str(path), reason)

    def _list_manifests(self, library: Path) -> list[Path]:
        """
        Returns the manifest files directly under a library, sorted by name.
        A library that can't be listed yields nothing.
        """
        try:
            with os.scandir(library) as it:
                names = [
                    entry.name
                    for entry in it
                    if entry.name.startswith(MANIFEST_PREFIX)
                    and entry.name.endswith(MANIFEST_EXTENSION)
                ]
        except OSError as e:
            self._report_skip(library, f"library could not be listed ({e})")
            return []
        return [library / name for name in sorted(names)]

    def _read_manifest(self, manifest_path: Path, library_index: int) -> SteamGame | None:
        """Parses one manifest. Returns None when it has no usable app id."""
        data = self.vdf_parsing_service.parse_file(manifest_path)
        if not data:
            self._report_skip(manifest_path, "manifest is unreadable or empty")
            return None

        raw_id = data.get(FIELD_APP_ID)
        app_id = SystemUtils.parse_int(raw_id)
        if app_id is None:
            self._report_skip(manifest_path, f"invalid app id {raw_id!r}")
            return None
        if app_id <= 0:
            self._report_skip(manifest_path, f"non-positive app id {app_id}")
            return None

        return SteamGame(
            id=app_id,
            name=data.get(FIELD_NAME, ""),
            install_dir=data.get(FIELD_INSTALL_DIR, ""),
            size_on_disk=data.get(FIELD_SIZE_ON_DISK, ""),
            library_index=library_index,
        )

    def build_index(self, libraries: tuple[Path, ...]) -> SteamLibraryIndex:
        """
        Scans every library for appmanifest_*.acf files and maps app id -> game.

        Libraries are scanned in order. If two manifests carry the same app id,
        the one scanned last replaces the earlier one.
        """
        games: dict[int, SteamGame] = {}
        for library_index, library in enumerate(libraries):
            for manifest_path in self._list_manifests(library):
                game = self._read_manifest(manifest_path, library_index)
                if game is None:
                    continue
                previous = games.get(game.id)
                if previous is not None:
                    logger.debug(
                        f"App {game.id} found again in '{library}', replacing the entry "
                        f"from '{libraries[previous.library_index]}'"
                    )
                games[game.id] = game

        logger.info(f"Indexed {len(games)} installed games across {len(libraries)} libraries.")
        return SteamLibraryIndex(libraries=tuple(libraries), games=games)

    # --- Search ---
    def find_matches(self, index: SteamLibraryIndex, keyword: str) -> list[SteamGame]:
        """Returns every game whose name contains the keyword, ignoring case, sorted by id."""
        needle = keyword.casefold()
        matches = [game for game in index.games.values() if needle in game.name.casefold()]
        return sorted(matches, key=lambda game: game.id)

    def search(self, index: SteamLibraryIndex, keyword: str) -> SteamGame | None:
        """
        Looks a game up by app id or name fragment.
        1. An exact app id always wins, whatever the names say.
        2. Otherwise the first case-insensitive name match, lowest app id first.
        3. None when nothing matches.
        """
        app_id = SystemUtils.parse_int(keyword)
        if app_id is not None and app_id in index.games:
            return index.games[app_id]

        matches = self.find_matches(index, keyword)
        if not matches:
            logger.info(f"No installed game matches '{keyword}'")
            return None
        if len(matches) > 1:
            logger.info(
                f"'{keyword}' matches {len(matches)} games, picking app {matches[0].id}"
            )
        return matches[0]
