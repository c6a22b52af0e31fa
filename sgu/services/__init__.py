# sgu/services/__init__.py
from .config_service import ConfigService
from .game_service import GameService
from .library_service import LibraryService
from .uninstall_service import UninstallError, UninstallService
from .vdf_parsing_service import VdfParsingService

__all__ = [
    "ConfigService",
    "GameService",
    "LibraryService",
    "UninstallError",
    "UninstallService",
    "VdfParsingService",
]
