"""
JSON codec used to turn typed values into cache bytes and back.
"""

import math
from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from .errors import SerializationError, DecodeError

T = TypeVar("T")


@lru_cache(maxsize=256)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


def _reject_non_finite(value: Any) -> None:
    # JSON has no NaN or Infinity; pydantic would write them as null.
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"Out of range float value {value!r} is not JSON compliant")
    elif isinstance(value, dict):
        for key, item in value.items():
            _reject_non_finite(key)
            _reject_non_finite(item)
    elif isinstance(value, (list, tuple, set, frozenset)):
        for item in value:
            _reject_non_finite(item)


class JsonCodec:
    """Serialize values to UTF-8 JSON bytes and validate them back into a type.

    Anything pydantic can dump is supported: builtins, models, dataclasses,
    datetimes, UUIDs, decimals and containers of those.
    NaN and infinite floats are rejected rather than written as ``null``.
    """

    encoding = "utf-8"

    def encode(self, value: Any) -> bytes:
        try:
            adapter = _adapter(Any)
            _reject_non_finite(adapter.dump_python(value))
            return adapter.dump_json(value)
        except (PydanticSerializationError, ValueError, TypeError) as e:
            raise SerializationError(
                f"Cannot serialize value of type {type(value).__name__}",
                {"type": type(value).__name__, "error": str(e)}
            ) from e

    def decode(self, data: bytes, model: Type[T] = Any) -> T:
        try:
            text = data.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise DecodeError(
                "Cached value is not valid UTF-8",
                {"position": e.start, "length": len(data)}
            ) from e

        try:
            return _adapter(model).validate_json(text)
        except PydanticValidationError as e:
            raise DecodeError(
                f"Cached value is not valid JSON for {getattr(model, '__name__', repr(model))}",
                {"errors": e.error_count(), "error": str(e)}
            ) from e


default_codec = JsonCodec()
