"""Output directory resolution and file lifecycle helpers."""

from __future__ import annotations

import shutil
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, TextIO

from .constants import (
    DEFAULT_OUTPUT_SUBDIR,
    GRADLE_BUILD_ROOT,
    MAVEN_BUILD_ROOT,
    MAVEN_MARKER,
)
from .logging import get_logger


class IOFailure(RuntimeError):
    """Raised when any filesystem operation on generated artifacts fails."""


def probe_build_root(base_dir: Path) -> Path:
    """Return the build-tool output root for ``base_dir``.

    Maven projects (``pom.xml`` present) write to ``target``; everything else
    is treated as a Gradle layout writing to ``build``.
    """
    if (base_dir / MAVEN_MARKER).exists():
        return base_dir / MAVEN_BUILD_ROOT
    return base_dir / GRADLE_BUILD_ROOT


class FileLifecycleManager:
    """Owns create, recreate, append and copy semantics for the output directory.

    The build root is decided once at construction so every path handed out
    afterwards agrees on it, even if the marker file appears mid-run.
    """

    def __init__(
        self,
        build_root: Path | str | None = None,
        *,
        base_dir: Path | str | None = None,
        subdir: str = DEFAULT_OUTPUT_SUBDIR,
    ) -> None:
        base = Path(base_dir) if base_dir is not None else Path.cwd()
        if build_root is None:
            root = probe_build_root(base)
        else:
            root = Path(build_root)
            if not root.is_absolute():
                root = base / root
        self._build_root = root
        self._output_directory = root / subdir
        self.logger = get_logger("files")

    @property
    def build_root(self) -> Path:
        return self._build_root

    @property
    def output_directory(self) -> Path:
        return self._output_directory

    def path_for(self, name: str) -> Path:
        return self._output_directory / name

    def ensure_output_directory(self) -> Path:
        try:
            self._output_directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise IOFailure(
                f"Unable to create output directory {self._output_directory}: {exc}"
            ) from exc
        return self._output_directory

    @contextmanager
    def recreate_file(self, name: str) -> Iterator[TextIO]:
        """Delete ``name`` if present, create it empty and yield it open for writing."""
        self.ensure_output_directory()
        path = self.path_for(name)
        try:
            path.unlink(missing_ok=True)
            handle = path.open("x", encoding="utf-8", newline="")
        except OSError as exc:
            raise IOFailure(f"Unable to recreate {path}: {exc}") from exc
        self.logger.debug("Recreated %s", path)
        with handle:
            try:
                yield handle
            except OSError as exc:
                raise IOFailure(f"Failed writing {path}: {exc}") from exc

    def append_file(self, name: str, text: str) -> None:
        """Append ``text`` to ``name``, creating the file when missing."""
        self.ensure_output_directory()
        path = self.path_for(name)
        try:
            with path.open("a", encoding="utf-8", newline="") as handle:
                handle.write(text)
        except OSError as exc:
            raise IOFailure(f"Failed appending to {path}: {exc}") from exc
        self.logger.debug("Appended %d characters to %s", len(text), path.name)

    def remove_file(self, name: str) -> None:
        path = self.path_for(name)
        try:
            path.unlink(missing_ok=True)
        except OSError as exc:
            raise IOFailure(f"Unable to remove {path}: {exc}") from exc

    def copy_file(self, source: Path, destination_dir: Path) -> Path:
        """Copy ``source`` byte-for-byte into ``destination_dir`` keeping its name."""
        if not source.is_file():
            raise IOFailure(f"Artifact not found: {source}")
        target = destination_dir / source.name
        try:
            destination_dir.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(source, target)
        except OSError as exc:
            raise IOFailure(f"Failed copying {source} to {target}: {exc}") from exc
        self.logger.debug("Copied %s -> %s", source, target)
        return target


__all__ = ["FileLifecycleManager", "IOFailure", "probe_build_root"]
