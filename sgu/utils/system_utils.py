# sgu/utils/system_utils.py
import re
from typing import Callable

from sgu.core.constants import BYTES_PER_GB, BYTES_PER_MB

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class SystemUtils:
    """A collection of static utility functions shared by the services and the CLI."""

    @staticmethod
    def parse_int(text: str | None) -> int | None:
        """
        Strictly parses a base-10 integer. Returns None for anything else,
        including surrounding whitespace, underscores and non-ASCII digits.
        """
        if text is None or not _INTEGER_PATTERN.fullmatch(text):
            return None
        try:
            return int(text)
        except ValueError:
            # Digit strings past the interpreter's conversion limit
            return None

    @staticmethod
    def format_size(size_on_disk: str | None) -> str:
        """
        Turns a manifest's SizeOnDisk string into a short human-readable size.
        Whole gigabytes from 1 GB upwards, whole megabytes below that,
        and "0 b" when the value can't be read as a number.
        """
        size = SystemUtils.parse_int(size_on_disk)
        if size is None:
            return "0 b"
        if size >= BYTES_PER_GB:
            return f"{size // BYTES_PER_GB} gb"
        # int() truncates toward zero, so bogus negative sizes don't round down
        return f"{int(size / BYTES_PER_MB)} mb"

    @staticmethod
    def confirm(prompt: str, read_input: Callable[[str], str] = input) -> bool:
        """
        Asks a yes/no question. Only an exact 'y' or 'Y' answer counts as yes;
        anything else, including end of input, is a no.
        """
        try:
            answer = read_input(prompt)
        except EOFError:
            return False
        return answer.strip() in ("y", "Y")
