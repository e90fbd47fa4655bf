from __future__ import annotations

import logging
from pathlib import Path
from typing import Generic, TypeVar

from .errors import DecodeError, DefaultValueError, EncodeError, StorageNotLoadedError
from .interfaces import Serializer, VersionGate, VersionGateHandle
from .json_store import backup_file, read_text, write_text
from .version_info import StorageKind

logger = logging.getLogger(__name__)

T = TypeVar("T")

EMPTY_DOCUMENT = "{}"


class JsonStorage(Generic[T]):
    """
    Keeps one value of an application-defined shape in a JSON file.

    - load() never returns None: missing, blank, corrupt or null content is
      replaced by the shape's defaults (decoded from "{}") and written back.
    - Content that gets discarded (including bytes that are not UTF-8) is first
      copied to a timestamped backup in directory_path.
    - A stale file (per the version gate) is deleted outright, without backup.
    - save() logs and swallows write errors.
    """

    FILE_SUFFIX = ".json"

    def __init__(
        self,
        file_path: Path,
        serializer: Serializer[T],
        version_gate: VersionGate,
        *,
        directory_path: Path | None = None,
    ):
        self.file_path = Path(file_path)
        self.directory_path = Path(directory_path) if directory_path is not None else self.file_path.parent
        self._serializer = serializer
        self._version_gate = version_gate
        self._data: T | None = None
        self._gate: VersionGateHandle | None = None
        self._gate_closed = False

    @property
    def data(self) -> T:
        if self._gate is None or self._data is None:
            raise StorageNotLoadedError(f"load() has not been called for <{self.file_path}>")
        return self._data

    @data.setter
    def data(self, value: T) -> None:
        if self._gate is None:
            raise StorageNotLoadedError(f"load() has not been called for <{self.file_path}>")
        self._data = value

    def load(self) -> T:
        self._gate = self._version_gate.open(self.file_path, StorageKind.JSON)
        self._gate_closed = False

        if self._gate.clear_cache and self.file_path.exists():
            self.file_path.unlink()
            logger.info("Deleting cached data at <%s>", self.file_path)

        if self.file_path.exists():
            self._deserialize(self.file_path)
        else:
            self._load_default()

        if self._data is None:
            raise DefaultValueError(f"no value available for <{self.file_path}>")
        return self._data

    def _deserialize(self, path: Path) -> None:
        try:
            serialized = read_text(path)
            self._data = self._serializer.decode(serialized) if serialized.strip() else None
        except DecodeError:
            self._load_default()
            logger.exception("Deserialize error for json <%s>", self.file_path)

        if self._data is None:
            self._load_default()

    def _load_default(self) -> None:
        if self.file_path.exists():
            self._backup_origin_file()

        self._data = self._default_value()
        self.save()

    def _default_value(self) -> T:
        try:
            value = self._serializer.decode(EMPTY_DOCUMENT)
        except DecodeError as e:
            raise DefaultValueError(f"shape has no default for <{self.file_path}>: {e}") from e
        if value is None:
            raise DefaultValueError(f"shape decoded {EMPTY_DOCUMENT} as null for <{self.file_path}>")
        return value

    def _backup_origin_file(self) -> Path:
        # TODO: surface backups to the host (callback or event) instead of only logging them.
        backup = backup_file(self.file_path, directory=self.directory_path)
        logger.info("Backed up <%s> to <%s>", self.file_path, backup)
        return backup

    def save(self) -> None:
        if self._gate is None:
            raise StorageNotLoadedError(f"save() called before load() for <{self.file_path}>")

        try:
            serialized = self._serializer.encode(self._data)
            write_text(self.file_path, serialized)
            if not self._gate_closed:
                self._gate.close()
                self._gate_closed = True

            logger.info("Saving cached data at <%s>", self.file_path)
        except (OSError, EncodeError):
            logger.exception("Error in saving data at <%s>", self.file_path)
