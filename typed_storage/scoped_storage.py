from __future__ import annotations

from pathlib import Path
from typing import Any, TypeVar

from .interfaces import VersionGate
from .json_storage import JsonStorage
from .paths import plugin_dir, settings_dir
from .serializers import PydanticSerializer
from .settings import get_settings
from .version_info import FileVersionGate

T = TypeVar("T")


def _resolve(data_dir: Path | None, version_gate: VersionGate | None) -> tuple[Path, VersionGate]:
    if data_dir is not None and version_gate is not None:
        return Path(data_dir), version_gate
    settings = get_settings()
    return (
        Path(data_dir) if data_dir is not None else settings.data_dir,
        version_gate if version_gate is not None else FileVersionGate.from_settings(settings),
    )


class SettingsJsonStorage(JsonStorage[T]):
    """
    Application-level store: <data_dir>/Settings/<ShapeName>.json
    """

    def __init__(self, shape: Any, *, data_dir: Path | None = None, version_gate: VersionGate | None = None):
        root, gate = _resolve(data_dir, version_gate)
        serializer: PydanticSerializer[T] = PydanticSerializer(shape)
        directory = settings_dir(root)
        super().__init__(
            directory / f"{serializer.shape_name}{self.FILE_SUFFIX}",
            serializer,
            gate,
            directory_path=directory,
        )


class PluginJsonStorage(JsonStorage[T]):
    """
    Per-plugin store: <data_dir>/Settings/Plugins/<plugin_name>/<ShapeName>.json
    """

    def __init__(
        self,
        shape: Any,
        plugin_name: str,
        *,
        data_dir: Path | None = None,
        version_gate: VersionGate | None = None,
    ):
        root, gate = _resolve(data_dir, version_gate)
        serializer: PydanticSerializer[T] = PydanticSerializer(shape)
        directory = plugin_dir(root, plugin_name)
        self.plugin_name = plugin_name
        super().__init__(
            directory / f"{serializer.shape_name}{self.FILE_SUFFIX}",
            serializer,
            gate,
            directory_path=directory,
        )
