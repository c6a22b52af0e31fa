# sgu/utils/logger_utils.py

import logging
import logging.handlers
import sys
from pathlib import Path
from datetime import datetime

from sgu.core.constants import DEFAULT_LOG_DIR


# ANSI escape codes for colors
class LogColors:
    RESET = "\x1b[0m"
    GREY = "\x1b[38;21m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    RED = "\x1b[31m"
    BOLD_RED = "\x1b[31;1m"
    CYAN = "\x1b[36m"


class ColoredFormatter(logging.Formatter):
    """
    Custom formatter to add colors to console log output.
    """

    LOG_LEVEL_COLORS = {
        logging.DEBUG: LogColors.GREY,
        logging.INFO: LogColors.GREEN,
        logging.WARNING: LogColors.YELLOW,
        logging.ERROR: LogColors.RED,
        logging.CRITICAL: LogColors.BOLD_RED,
    }

    def __init__(self, datefmt="%B %d, %Y > %H:%M:%S"):
        # The base format string isn't used, format() builds the line itself
        super().__init__(fmt="%(message)s", datefmt=datefmt)

    def format(self, record):
        level_color = self.LOG_LEVEL_COLORS.get(record.levelno, LogColors.RESET)

        time_str = self.formatTime(record, self.datefmt)
        colored_time = f"{LogColors.GREEN}{time_str}{LogColors.RESET}"

        # 8-character padding keeps the columns aligned
        colored_level = f"{level_color}{record.levelname:<8}{LogColors.RESET}"

        location = f"{record.name}:{record.funcName}:{record.lineno}"
        colored_location = f"{LogColors.CYAN}{location}{LogColors.RESET}"

        colored_message = f"{level_color}{record.getMessage()}{LogColors.RESET}"

        log_entry = (
            f"{colored_time} | {colored_level} | {colored_location} - {colored_message}"
        )

        # Add traceback in red if there's an exception
        if record.exc_info:
            if not record.exc_text:
                record.exc_text = self.formatException(record.exc_info)
            log_entry += f"\n{LogColors.RED}{record.exc_text}{LogColors.RESET}"

        return log_entry


# Global state for the lazily created logger
_logger_instance = None
_custom_log_dir = None
_console_level = logging.WARNING


def get_logger():
    """
    Get the logger instance. This ensures all modules get the same logger instance.
    Uses lazy initialization - logger is only created when first accessed.
    Until a log directory is known it only logs to the console.
    """
    global _logger_instance
    if _logger_instance is None:
        _logger_instance = setup_logger(_custom_log_dir, _console_level)
    return _logger_instance


def setup_logger(log_dir=None, console_level=logging.WARNING):
    logger = logging.getLogger("SGU_App")
    logger.setLevel(logging.DEBUG)  # Handlers do the filtering
    logger.propagate = False

    # Prevents duplicate handlers when called again
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    # === Console handler ===
    # stderr, so progress output on stdout stays machine-readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(ColoredFormatter(datefmt="%B %d, %Y > %H:%M:%S"))
    logger.addHandler(console_handler)

    # === File handler (no color, everything from DEBUG up) ===
    # Skipped until a directory is known, so nothing lands in a default
    # location the user configured away from
    if log_dir is None:
        return logger

    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    timestamp = datetime.now().strftime("%Y%m%d_%H-%M-%S")
    log_file_path = log_dir / f"LOG_SGU_{timestamp}.log"

    # 5 MB = 5 * 1024 * 1024 bytes
    max_bytes = 5 * 1024 * 1024
    backup_count = 10
    file_handler = logging.handlers.RotatingFileHandler(
        log_file_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        fmt="{asctime} | {levelname} | {name}:{funcName}:{lineno} - {message}",
        datefmt="%Y-%m-%d %H:%M:%S",
        style="{",
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    return logger


def reconfigure_logger(log_dir=None, console_level=None):
    """
    Reconfigure the existing logger with a new log directory and console level.
    Called by main.py once the user's config has been loaded.
    """
    global _logger_instance, _custom_log_dir, _console_level
    if log_dir is not None:
        _custom_log_dir = log_dir
    if console_level is not None:
        _console_level = (
            logging.getLevelName(console_level.upper())
            if isinstance(console_level, str)
            else console_level
        )
        # getLevelName returns "Level X" for unknown names
        if not isinstance(_console_level, int):
            _console_level = logging.WARNING
    if _custom_log_dir is None:
        _custom_log_dir = Path.home() / DEFAULT_LOG_DIR
    # Force recreation of logger with new settings
    _logger_instance = setup_logger(_custom_log_dir, _console_level)
    return _logger_instance


# Create a logger proxy that uses lazy initialization
class LoggerProxy:
    """
    A proxy class that forwards all logging calls to the actual logger instance.
    This ensures lazy initialization while maintaining the same interface.
    """

    def __getattr__(self, name):
        actual_logger = get_logger()
        return getattr(actual_logger, name)


# The proxy doesn't create the actual logger yet
logger = LoggerProxy()
__all__ = ["logger", "reconfigure_logger"]
