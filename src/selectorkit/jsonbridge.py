"""Thin wrappers around :mod:`json` for plain objects.

``get_json`` writes the compact form (``[1,2,3]``, ``{"width":10}``) and
falls back to an object's instance fields for anything ``json`` cannot encode
natively, so methods never leak into the output.

``from_json`` goes the other way: the parsed fields become the attributes of a
fresh instance of the prototype's class, created without running ``__init__``.
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from selectorkit.config import SelectorKitConfig
from selectorkit.errors import DeserializationError, SerializationError

__all__ = ["get_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

_COMPACT = (",", ":")


def _instance_fields(obj: Any) -> dict[str, Any]:
    """Return the data fields of *obj* for encoding."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        fields = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    else:
        try:
            fields = dict(vars(obj))
        except TypeError:
            raise TypeError(
                f"Object of type {type(obj).__name__} is not JSON serializable"
            ) from None
    # Callables stored on the instance are behavior, not data.
    return {name: value for name, value in fields.items() if not callable(value)}


def get_json(obj: Any, config: SelectorKitConfig | None = None) -> str:
    """Return the JSON representation of *obj*.

    Examples:
        [1, 2, 3]                  -> '[1,2,3]'
        {"width": 10, "height": 20} -> '{"width":10,"height":20}'
        Rectangle(10, 20)          -> '{"width":10,"height":20}'
    """
    indent = config.json_indent if config else None
    sort_keys = config.json_sort_keys if config else False
    try:
        return json.dumps(
            obj,
            default=_instance_fields,
            separators=None if indent is not None else _COMPACT,
            indent=indent,
            sort_keys=sort_keys,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot serialize {type(obj).__name__}: {exc}", cause=exc) from exc


def from_json(proto: type[T] | T, text: str) -> T:
    """Rebuild an object of *proto*'s type from JSON text.

    *proto* may be a class or an existing instance (its class is used). The
    returned object shares the class behavior while its attributes come
    solely from the parsed JSON object::

        r = from_json(Rectangle, '{"width":10,"height":20}')
        r.get_area()  # 200
    """
    cls = proto if isinstance(proto, type) else type(proto)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise DeserializationError(f"Invalid JSON: {exc}", cause=exc) from exc

    if not isinstance(data, dict):
        raise DeserializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(data).__name__}"
        )

    if issubclass(cls, dict):
        return cls(data)

    try:
        obj = cls.__new__(cls)
        for name, value in data.items():
            object.__setattr__(obj, name, value)
    except (AttributeError, TypeError) as exc:
        raise DeserializationError(
            f"Cannot set fields {list(data)} on {cls.__name__}: {exc}", cause=exc
        ) from exc
    logger.debug("Revived %s with fields %s", cls.__name__, list(data))
    return obj
