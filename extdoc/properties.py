"""Turns ``key=value`` configuration files into an AsciiDoc reference."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .constants import DEFAULT_PROPERTIES_RESOURCE
from .files import IOFailure
from .logging import get_logger

BLOCK_SEPARATOR = "\n\n"
HORIZONTAL_RULE = "'''"
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


class ConfigFormatter:
    """Formats configuration lines as emphasised comments and bold keys."""

    def format_line(self, line: str) -> str:
        if line.startswith("#"):
            return "_" + line.replace("#", "").strip() + "_"
        parts = line.split("=", 1)
        if len(parts) < 2:
            return line
        # Values are environment specific; only keys are documented.
        return f"*{parts[0]}*{BLOCK_SEPARATOR}{HORIZONTAL_RULE}"

    def format_lines(self, lines: Iterable[str]) -> List[str]:
        return [self.format_line(line) for line in lines]

    def render(self, lines: Iterable[str]) -> str:
        return BLOCK_SEPARATOR.join(self.format_lines(lines))


class PropertiesLocator:
    """Finds the configuration resource on an ordered search path."""

    def __init__(
        self,
        search_paths: Sequence[Path | str],
        *,
        resource: str = DEFAULT_PROPERTIES_RESOURCE,
    ) -> None:
        self.search_paths = [Path(path) for path in search_paths]
        self.resource = resource
        self.logger = get_logger("properties")

    def locate(self) -> Optional[Path]:
        for directory in self.search_paths:
            candidate = directory / self.resource
            if candidate.is_file():
                self.logger.debug("Using configuration resource %s", candidate)
                return candidate
        self.logger.debug(
            "Configuration resource %s not found in %s",
            self.resource,
            ", ".join(str(path) for path in self.search_paths) or "(empty search path)",
        )
        return None


def read_lines(path: Path) -> List[str]:
    """Return the lines of ``path`` without line terminators.

    Only ``\\n``, ``\\r`` and ``\\r\\n`` end a line; other Unicode separators
    stay inside the value.
    """
    try:
        text = path.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise IOFailure(f"Unable to read configuration resource {path}: {exc}") from exc
    lines = _LINE_BREAK.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


__all__ = ["ConfigFormatter", "PropertiesLocator", "read_lines"]
