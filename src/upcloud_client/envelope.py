"""
Envelope normalization for UpCloud API payloads.

The API wraps every object in a named layer and every list in two of them:

    GET /server/{uuid}  ->  {"server": {...}}
    GET /server         ->  {"servers": {"server": [{...}, {...}]}}
    tags inside objects ->  {"tags": {"tag": ["a", "b"]}}

The helpers here strip those layers so the pydantic models only ever see
plain mappings and lists, and put them back when a model is encoded.
Provider list order is preserved as returned.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Annotated, Any, Generic, Mapping, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    PlainSerializer,
    Strict,
    StrictInt,
    ValidationError,
    ValidationInfo,
    WrapSerializer,
)

from upcloud_client.core.errors import DecodeError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Validation context marking data that came from a provider response.
PAYLOAD_CONTEXT = {"source": "payload"}


@dataclass(frozen=True)
class Single(Generic[ModelT]):
    """A response holding one object under ``key``."""

    model: type[ModelT]
    key: str


@dataclass(frozen=True)
class Collection(Generic[ModelT]):
    """A response holding a list under ``{outer: {inner: [...]}}``."""

    model: type[ModelT]
    outer: str
    inner: str


def decode_json(raw: bytes | str) -> Any:
    """Parse a raw response body, raising DecodeError on malformed JSON."""
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"Malformed JSON payload: {exc}", cause=exc) from exc


def unwrap_object(data: Any, key: str) -> dict[str, Any]:
    """
    Return the mapping stored under ``key``.

    A redundant outer layer is descended regardless of its name, so both
    ``{"server": {...}}`` and ``{"anything": {"server": {...}}}`` yield the
    inner mapping.
    """
    current = data
    while isinstance(current, Mapping):
        if key in current:
            value = current[key]
            if not isinstance(value, Mapping):
                raise DecodeError(
                    f"Expected an object under '{key}', got {type(value).__name__}",
                    details={"key": key},
                )
            return dict(value)
        if len(current) != 1:
            break
        (current,) = current.values()
    raise DecodeError(f"Payload has no '{key}' envelope", details={"key": key})


def unwrap_list(data: Any, inner: str) -> list[Any]:
    """
    Strip a ``{inner: [...]}`` wrapper.

    An absent or empty wrapper is an empty list. A lone object where a list
    was expected becomes a one-element list. A bare list is not a valid
    wrapper.
    """
    if data is None or data == "":
        return []
    if not isinstance(data, Mapping):
        raise DecodeError(
            f"Expected a '{inner}' wrapper object, got {type(data).__name__}",
            details={"key": inner},
        )
    items = data.get(inner)
    if items is None or items == "":
        return []
    if isinstance(items, list):
        return items
    return [items]


def unwrap_collection(data: Any, outer: str, inner: str) -> list[Any]:
    """Two-level unwrap: ``{outer: {inner: [...]}}`` to a plain list."""
    if not isinstance(data, Mapping):
        raise DecodeError(
            f"Expected a JSON object with '{outer}', got {type(data).__name__}",
            details={"key": outer},
        )
    return unwrap_list(data.get(outer), inner)


def normalize(raw: bytes | str, shape: Single[ModelT] | Collection[ModelT]) -> Any:
    """
    Decode a raw response body into the shape's model (or list of models).

    Raises DecodeError for malformed JSON, a missing envelope, or a field
    whose type does not match the model. Nothing partial is returned.
    """
    data = decode_json(raw)
    try:
        if isinstance(shape, Collection):
            items = unwrap_collection(data, shape.outer, shape.inner)
            return [shape.model.model_validate(item, context=PAYLOAD_CONTEXT) for item in items]
        return shape.model.model_validate(
            unwrap_object(data, shape.key), context=PAYLOAD_CONTEXT
        )
    except ValidationError as exc:
        raise DecodeError(
            f"Invalid {shape.model.__name__} payload: {exc}",
            cause=exc,
            details={"model": shape.model.__name__, "errors": exc.error_count()},
        ) from exc


def encode(value: Any, shape: Single[Any] | Collection[Any]) -> dict[str, Any]:
    """Wrap a model (or list of models) back into the provider's nested shape."""
    if isinstance(shape, Collection):
        return {
            shape.outer: {
                shape.inner: [item.model_dump(mode="json", by_alias=True) for item in value]
            }
        }
    return {shape.key: value.model_dump(mode="json", by_alias=True)}


# Field types ---------------------------------------------------------------


def _parse_string_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError("expected an integer encoded as a string, got a boolean")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(
            f"expected an integer encoded as a string, got {type(value).__name__}"
        )
    try:
        return int(value.strip())
    except ValueError:
        raise ValueError(f"{value!r} is not a valid integer") from None


def _parse_yes_no(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value == "yes":
        return True
    if value == "no":
        return False
    raise ValueError(f"expected 'yes' or 'no', got {value!r}")


def _empty_as_none(value: Any) -> Any:
    return None if value == "" else value


StringInt = Annotated[
    int,
    BeforeValidator(_parse_string_int),
    PlainSerializer(str, return_type=str),
]
"""An integer the provider transmits as a JSON string (``"2"``)."""

# Strict: strings and booleans are rejected, ints are accepted where a float is declared.
Number = Annotated[float, Strict()]
Count = StrictInt

YesNo = Annotated[
    bool,
    BeforeValidator(_parse_yes_no),
    PlainSerializer(lambda v: "yes" if v else "no", return_type=str),
]

EmptyAsNone = BeforeValidator(_empty_as_none)


def _unwrapper(inner: str):
    def _validate(value: Any, info: ValidationInfo) -> list[Any]:
        if isinstance(value, list) and info.context != PAYLOAD_CONTEXT:
            # Already unwrapped, e.g. a model constructed directly in Python.
            return value
        return unwrap_list(value, inner)

    return _validate


def _rewrapper(inner: str):
    def _serialize(value: Any, handler: Any) -> dict[str, Any]:
        return {inner: handler(value)}

    return _serialize


def wrapped_list(inner: str, item: Any) -> Any:
    """Annotated ``list[item]`` that (de)serializes as ``{inner: [...]}``."""
    return Annotated[
        list[item],
        BeforeValidator(_unwrapper(inner)),
        WrapSerializer(_rewrapper(inner)),
    ]
