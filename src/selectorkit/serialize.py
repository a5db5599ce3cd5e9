"""JSON serialization helpers for selectorkit values."""

from __future__ import annotations

import json
from typing import Any, TypeVar

T = TypeVar("T")


def _default(value: Any) -> Any:
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def to_json(value: Any) -> str:
    """Return compact JSON text for value.

    Objects that are not plain JSON data are serialized through their
    ``to_dict()`` method when they have one.
    """
    return json.dumps(value, separators=(",", ":"), default=_default)


def from_json(cls: type[T], text: str | bytes) -> T:
    """Parse JSON text and build an instance of cls from the decoded object.

    Uses ``cls.from_dict(data)`` when cls defines it, otherwise ``cls(**data)``.

    Raises:
        json.JSONDecodeError: If text is not valid JSON
        TypeError: If the JSON value is not an object, or does not fit cls
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise TypeError(f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}")

    from_dict = getattr(cls, "from_dict", None)
    if callable(from_dict):
        return from_dict(data)
    return cls(**data)
