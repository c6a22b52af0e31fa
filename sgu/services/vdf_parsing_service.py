# sgu/services/vdf_parsing_service.py
from pathlib import Path
from typing import Mapping

from sgu.core.constants import VDF_FIELD_SEPARATOR
from sgu.utils.logger_utils import logger


class VdfParsingService:
    """
    Reads Steam's KeyValues text documents (.vdf / .acf).

    Only flat '"key"\\t\\t"value"' lines are understood. Nested objects,
    comments and escape sequences are skipped line by line, so a nested
    section simply contributes nothing to the result.
    """

    def __init__(self):
        # This service is stateless.
        pass

    def parse(self, text: str) -> dict[str, str]:
        """
        Parses the body between the first '{' and the last '}' into a flat dict.
        Returns an empty dict if either brace is missing. Never raises.
        """
        start = text.find("{")
        end = text.rfind("}")
        if start < 0 or end < 0:
            missing = [name for name, pos in (("'{'", start), ("'}'", end)) if pos < 0]
            logger.warning(
                f"KeyValues body not found, missing {' and '.join(missing)} (start={start}, end={end})"
            )
            return {}

        data: dict[str, str] = {}
        for line in text[start + 1 : end].split("\n"):
            parts = line.strip().replace('"', "").split(VDF_FIELD_SEPARATOR)
            if len(parts) != 2:
                continue
            key, value = parts
            # Later duplicates overwrite earlier ones
            data[key] = value
        return data

    def parse_file(self, path: Path) -> dict[str, str]:
        """
        Reads and parses a document from disk.
        An unreadable file is treated as empty content, quietly.
        """
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.debug(f"Could not read '{path}': {e}. Treating it as empty.")
            return {}
        return self.parse(text)

    def serialize(self, data: Mapping[str, str], root_key: str) -> str:
        """
        Writes a flat mapping back out in the layout Steam uses, e.g.

            "AppState"
            {
                "appid"		"440"
            }
        """
        lines = [f'"{root_key}"', "{"]
        for key, value in data.items():
            lines.append(f'\t"{key}"{VDF_FIELD_SEPARATOR}"{value}"')
        lines.append("}")
        return "\n".join(lines) + "\n"
