# sgu/services/uninstall_service.py
import os
from pathlib import Path
from typing import Callable

from sgu.core.constants import COMMON_DIR_NAME
from sgu.models.game_model import SteamGame, SteamLibraryIndex
from sgu.utils.logger_utils import logger


class UninstallError(OSError):
    """Raised when a file, directory or manifest could not be removed."""

    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.path = Path(path)


def _raise_walk_error(error: OSError):
    # os.walk swallows listing errors unless told otherwise
    raise error


class UninstallService:
    """Removes an installed game's files and its manifest, one entry at a time."""

    def _remove(self, path: Path, remover: Callable, progress_callback: Callable | None):
        if progress_callback is not None:
            progress_callback(str(path))
        try:
            remover(path)
        except OSError as e:
            logger.error(f"Failed to remove '{path}': {e}")
            raise UninstallError(f"failed to remove '{path}': {e}", path) from e

    def _check_install_path(self, index: SteamLibraryIndex, game: SteamGame, install_path: Path):
        """Refuses install dirs that would resolve to common/ itself or outside of it."""
        common = os.path.normpath(index.library_of(game) / COMMON_DIR_NAME)
        target = os.path.normpath(install_path)
        if not game.install_dir.strip() or not target.startswith(common + os.sep):
            logger.error(f"Refusing to uninstall app {game.id}: bad install dir {game.install_dir!r}")
            raise UninstallError(
                f"install dir {game.install_dir!r} does not name a folder inside '{common}'",
                install_path,
            )

    def remove_tree(self, root: Path, progress_callback: Callable | None = None) -> int:
        """
        Deletes everything under root, then root itself, children before parents.
        Stops at the first failure and raises UninstallError naming the path.
        Returns the number of entries removed.
        """
        # A symlinked install directory is unlinked, not followed
        if root.is_symlink() or root.is_file():
            self._remove(root, os.remove, progress_callback)
            return 1

        removed = 0
        try:
            for dirpath, dirnames, filenames in os.walk(
                root, topdown=False, onerror=_raise_walk_error
            ):
                current = Path(dirpath)
                for name in filenames:
                    self._remove(current / name, os.remove, progress_callback)
                    removed += 1
                # Links to directories are listed with dirs but never walked into
                for name in dirnames:
                    link = current / name
                    if link.is_symlink():
                        self._remove(link, os.remove, progress_callback)
                        removed += 1
                self._remove(current, os.rmdir, progress_callback)
                removed += 1
        except UninstallError:
            raise
        except OSError as e:
            failed_path = e.filename or root
            logger.error(f"Failed to walk '{failed_path}': {e}")
            raise UninstallError(f"failed to read '{failed_path}': {e}", failed_path) from e
        return removed

    def uninstall(
        self,
        index: SteamLibraryIndex,
        game: SteamGame,
        progress_callback: Callable | None = None,
    ) -> int:
        """
        Deletes the game's install directory and then its appmanifest file.

        Every path is passed to progress_callback right before it is deleted.
        There is no rollback: if a delete fails the error propagates at once,
        and the manifest is only touched after the whole tree is gone.
        Returns the total number of entries removed.
        """
        install_path = index.install_path(game)
        manifest_path = index.manifest_path(game)
        self._check_install_path(index, game, install_path)
        logger.info(f"Uninstalling '{game.name}' ({game.id}) from '{install_path}'")

        removed = self.remove_tree(install_path, progress_callback)
        self._remove(manifest_path, os.remove, progress_callback)
        removed += 1

        logger.info(f"Uninstalled '{game.name}' ({game.id}), {removed} entries removed.")
        return removed
