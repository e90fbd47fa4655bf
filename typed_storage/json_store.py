from __future__ import annotations

import shutil
from datetime import datetime
from pathlib import Path

from .errors import DecodeError

DEFAULT_SUFFIX = ".json"


def read_text(path: Path) -> str:
    """
    Read a stored document as text.

    A UTF-8 byte order mark is dropped. Bytes that are not UTF-8 raise
    DecodeError; I/O errors propagate unchanged.
    """
    try:
        return path.read_text(encoding="utf-8-sig")
    except UnicodeDecodeError as e:
        raise DecodeError(f"<{path}> is not valid UTF-8: {e}") from e


def write_text(path: Path, text: str) -> None:
    """
    Overwrite path with text in place (no temp file / rename).
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def backup_timestamp(now: datetime | None = None) -> str:
    # yyyy-MM-dd-HH-mm-ss followed by seven fractional digits (100ns ticks)
    ts = now or datetime.now()
    return f"{ts:%Y-%m-%d-%H-%M-%S}-{ts.microsecond * 10:07d}"


def backup_path_for(path: Path, now: datetime | None = None, *, directory: Path | None = None) -> Path:
    suffix = path.suffix or DEFAULT_SUFFIX
    target_dir = directory if directory is not None else path.parent
    return target_dir / f"{path.stem}-{backup_timestamp(now)}{suffix}"


def backup_file(path: Path, now: datetime | None = None, *, directory: Path | None = None) -> Path:
    """
    Copy path under a timestamped name into directory (default: next to path),
    overwriting any existing copy.
    """
    target = backup_path_for(path, now, directory=directory)
    target.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(path, target)
    return target
