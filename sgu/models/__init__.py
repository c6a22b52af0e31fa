# sgu/models/__init__.py
from .config_model import AppConfig
from .game_model import SteamGame, SteamLibraryIndex

__all__ = ["AppConfig", "SteamGame", "SteamLibraryIndex"]
