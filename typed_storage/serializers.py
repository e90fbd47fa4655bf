from __future__ import annotations

from typing import Any, Generic, TypeVar

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from .errors import DecodeError, EncodeError

T = TypeVar("T")


class PydanticSerializer(Generic[T]):
    """
    JSON serializer for any shape pydantic can validate (models, dataclasses,
    TypedDicts, plain containers).

    - Decoding builds a fresh value; object-valued fields are replaced, never merged.
    - Encoding is indented and drops null fields.
    """

    def __init__(self, shape: Any, *, indent: int = 2):
        self._shape = shape
        self._adapter: TypeAdapter[T] = TypeAdapter(shape)
        self._indent = indent

    @property
    def shape(self) -> Any:
        return self._shape

    @property
    def shape_name(self) -> str:
        return getattr(self._shape, "__name__", None) or repr(self._shape)

    def decode(self, text: str) -> T | None:
        try:
            return self._adapter.validate_json(text)
        except ValidationError as e:
            raise DecodeError(f"invalid {self.shape_name} document: {e}") from e

    def encode(self, value: T) -> str:
        try:
            raw = self._adapter.dump_json(value, indent=self._indent, exclude_none=True)
        except PydanticSerializationError as e:
            raise EncodeError(f"cannot encode {self.shape_name}: {e}") from e
        return raw.decode("utf-8")
