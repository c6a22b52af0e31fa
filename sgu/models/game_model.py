# sgu/models/game_model.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Mapping

from sgu.core.constants import COMMON_DIR_NAME, manifest_file_name


@dataclass(frozen=True)
class SteamGame:
    """Represents a single installed game discovered from its manifest. Immutable."""

    id: int
    name: str = ""
    install_dir: str = ""
    # Raw string as found in the manifest; may be empty or non-numeric.
    size_on_disk: str = ""
    # Position of the owning library in SteamLibraryIndex.libraries
    library_index: int = 0


@dataclass(frozen=True)
class SteamLibraryIndex:
    """
    The discovered libraries and every game found in them.
    Built once per refresh and passed explicitly to search and uninstall.
    Read-only after construction: games is exposed as a mapping proxy.
    """

    libraries: tuple[Path, ...]
    games: Mapping[int, SteamGame] = field(default_factory=dict)

    def __post_init__(self):
        """Post-initialization validation."""
        if not self.libraries:
            raise ValueError("A library index needs at least the primary library.")
        for game in self.games.values():
            if not 0 <= game.library_index < len(self.libraries):
                raise ValueError(
                    f"Game {game.id} refers to unknown library #{game.library_index}"
                )
        # Copy so the caller's dict can't change the index afterwards
        object.__setattr__(self, "games", MappingProxyType(dict(self.games)))

    def library_of(self, game: SteamGame) -> Path:
        return self.libraries[game.library_index]

    def install_path(self, game: SteamGame) -> Path:
        """Full path of the game's content directory."""
        return self.library_of(game) / COMMON_DIR_NAME / game.install_dir

    def manifest_path(self, game: SteamGame) -> Path:
        """Path of the manifest that registers the game with Steam."""
        return self.library_of(game) / manifest_file_name(game.id)
