from __future__ import annotations

from .errors import DecodeError, DefaultValueError, EncodeError, StorageError, StorageNotLoadedError
from .interfaces import Serializer, VersionGate, VersionGateHandle
from .json_storage import JsonStorage
from .scoped_storage import PluginJsonStorage, SettingsJsonStorage
from .serializers import PydanticSerializer
from .settings import Settings, get_settings, load_settings
from .version_info import FileVersionGate, StorageKind, VersionInfoHandle

__version__ = "0.1.0"

__all__ = [
    "JsonStorage",
    "SettingsJsonStorage",
    "PluginJsonStorage",
    "PydanticSerializer",
    "FileVersionGate",
    "VersionInfoHandle",
    "StorageKind",
    "Serializer",
    "VersionGate",
    "VersionGateHandle",
    "Settings",
    "get_settings",
    "load_settings",
    "StorageError",
    "DecodeError",
    "EncodeError",
    "StorageNotLoadedError",
    "DefaultValueError",
]
