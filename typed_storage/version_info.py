from __future__ import annotations

import logging
from enum import IntEnum
from pathlib import Path

from .errors import DecodeError
from .json_store import read_text, write_text
from .settings import Settings

logger = logging.getLogger(__name__)

UNKNOWN_VERSION = "v0.0.0"
VERSION_FILE_SUFFIX = "_version.txt"


class StorageKind(IntEnum):
    BINARY = 0
    JSON = 1

    @property
    def file_suffix(self) -> str:
        return ".cache" if self is StorageKind.BINARY else ".json"


def parse_version(version: str) -> tuple[int, ...]:
    """
    Parse "v1.2.3" / "1.2" into a tuple of ints. Raises ValueError on anything else.
    """
    text = version.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    if not text:
        raise ValueError(f"empty version string: {version!r}")
    return tuple(int(part) for part in text.split("."))


def is_older(version: str, other: str) -> bool:
    left = parse_version(version)
    right = parse_version(other)
    width = max(len(left), len(right))
    left += (0,) * (width - len(left))
    right += (0,) * (width - len(right))
    return left < right


def version_file_path(file_path: Path, kind: int) -> Path:
    suffix = StorageKind(kind).file_suffix
    name = file_path.name
    if name.endswith(suffix):
        name = name[: -len(suffix)]
    return file_path.with_name(name + VERSION_FILE_SUFFIX)


class VersionInfoHandle:
    """
    Version marker for one load session of a stored file.

    clear_cache is decided when the handle is created; close() records the
    running version so the next session sees the file as compatible.
    """

    def __init__(self, marker_path: Path, *, current_version: str, min_compatible_version: str):
        self.marker_path = marker_path
        self.current_version = current_version
        self.previous_version = self._read_previous_version()
        self.clear_cache = is_older(self.previous_version, min_compatible_version)

    def _read_previous_version(self) -> str:
        if not self.marker_path.exists():
            return UNKNOWN_VERSION
        try:
            raw = read_text(self.marker_path).strip()
        except DecodeError:
            logger.warning("Version marker <%s> is not UTF-8 text", self.marker_path)
            return UNKNOWN_VERSION
        try:
            parse_version(raw)
        except ValueError:
            logger.warning("Unreadable version marker <%s>: %r", self.marker_path, raw)
            return UNKNOWN_VERSION
        return raw

    def close(self) -> None:
        write_text(self.marker_path, self.current_version)


class FileVersionGate:
    """
    VersionGate that keeps a "<name>_version.txt" marker next to each stored file.
    """

    def __init__(self, current_version: str, *, min_compatible_version: str | None = None):
        parse_version(current_version)
        if min_compatible_version is not None:
            parse_version(min_compatible_version)
        self.current_version = current_version
        self.min_compatible_version = min_compatible_version or current_version

    @classmethod
    def from_settings(cls, settings: Settings) -> "FileVersionGate":
        return cls(settings.app_version, min_compatible_version=settings.min_compatible_version)

    def open(self, file_path: Path, kind: int) -> VersionInfoHandle:
        return VersionInfoHandle(
            version_file_path(Path(file_path), kind),
            current_version=self.current_version,
            min_compatible_version=self.min_compatible_version,
        )
