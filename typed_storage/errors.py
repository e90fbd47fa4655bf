from __future__ import annotations


class StorageError(Exception):
    """Base class for every error raised by typed_storage."""


class DecodeError(StorageError, ValueError):
    """Stored text could not be turned into a value of the expected shape."""


class EncodeError(StorageError):
    """In-memory value could not be encoded as JSON text."""


class StorageNotLoadedError(StorageError, RuntimeError):
    """A store was saved (or its data read) before load() ran."""


class DefaultValueError(StorageError):
    """The shape could not produce its default value from an empty object."""
