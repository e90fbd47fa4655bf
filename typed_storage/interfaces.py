from __future__ import annotations

from pathlib import Path
from typing import Protocol, TypeVar

T = TypeVar("T")


class Serializer(Protocol[T]):
    """
    Converts between a stored value and JSON text.
    """

    def decode(self, text: str) -> T | None:
        """Decode text into a value; raise DecodeError on bad content."""
        ...

    def encode(self, value: T) -> str:
        """Encode a value as indented JSON with null fields omitted."""
        ...


class VersionGateHandle(Protocol):
    clear_cache: bool

    def close(self) -> None:
        """Mark the stored file as written by the running version."""
        ...


class VersionGate(Protocol):
    """
    Decides whether a cache file was written by an incompatible application version.
    """

    def open(self, file_path: Path, kind: int) -> VersionGateHandle:
        ...
