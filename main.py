# Main.py
import argparse
import sys
from pathlib import Path

from sgu.core.constants import APP_NAME, DEFAULT_CONFIG_PATH, USAGE
from sgu.core.signals import global_signals
from sgu.utils.logger_utils import logger, reconfigure_logger

# Import services
from sgu.services import (
    ConfigService,
    GameService,
    LibraryService,
    UninstallError,
    UninstallService,
    VdfParsingService,
)

# Import utilities
from sgu.utils import SystemUtils


class _ArgumentParser(argparse.ArgumentParser):
    def format_usage(self):
        return USAGE + "\n"

    def error(self, message):
        # Wrong argument count: show usage and leave without touching anything
        self.exit(2, self.format_usage())


def build_arg_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(prog=APP_NAME, add_help=True)
    parser.add_argument("query", help="app id or part of the game's name")
    parser.add_argument("--config", type=Path, default=None, help="path to config.json")
    parser.add_argument(
        "--debug", action="store_true", help="print every skipped library or manifest"
    )
    return parser


def _print_skip(path: str, reason: str):
    print(f"skipped {path}: {reason}", file=sys.stderr)


def main(argv=None, read_input=input) -> int:
    """The main entry point for the application."""
    args = build_arg_parser().parse_args(argv)

    # --- 1. Configuration & Logging ---
    config_path = args.config or Path.home() / DEFAULT_CONFIG_PATH
    config = ConfigService(config_path).load_config()
    reconfigure_logger(config.log_dir, config.console_log_level)
    logger.info(f"{APP_NAME} starting with query '{args.query}'")

    if args.debug:
        global_signals.scan_skipped.connect(_print_skip)

    # --- 2. Composition Root: Create and Wire All Dependencies ---
    vdf_parsing_service = VdfParsingService()
    library_service = LibraryService(vdf_parsing_service, steam_path=config.steam_path)
    game_service = GameService(library_service, vdf_parsing_service)
    uninstall_service = UninstallService()

    try:
        # --- 3. Refresh & Search ---
        index = game_service.refresh()
        game = game_service.search(index, args.query)
        if game is None:
            print("no results found for", args.query)
            return 0

        # --- 4. Confirm & Uninstall ---
        print(f"{index.install_path(game)}\n\t{game.name} ({SystemUtils.format_size(game.size_on_disk)})")
        if not SystemUtils.confirm("uninstall? [y/n]: ", read_input):
            logger.info(f"Uninstall of '{game.name}' cancelled by user.")
            return 0

        try:
            uninstall_service.uninstall(index, game, progress_callback=print)
        except UninstallError as e:
            logger.error(f"Uninstall of '{game.name}' failed at '{e.path}'", exc_info=True)
            print(f'error: failed to uninstall "{game.name}": {e}', file=sys.stderr)
            return 1
        return 0
    finally:
        if args.debug:
            global_signals.scan_skipped.disconnect(_print_skip)


if __name__ == "__main__":
    sys.exit(main())
