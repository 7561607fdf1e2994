"""JSON encode/decode helpers for plain objects and dataclasses."""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objkit.config import ObjkitConfig
from objkit.errors import SerializationError

__all__ = ["to_json", "from_json"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _encode_object(obj: Any) -> Any:
    """``json.dumps`` fallback for values it cannot encode natively."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if hasattr(obj, "__dict__"):
        return {k: v for k, v in vars(obj).items() if not k.startswith("_")}
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def to_json(obj: Any, config: ObjkitConfig | None = None) -> str:
    """Return the JSON representation of ``obj``.

    Output is compact (``[1,2,3]``) unless ``config.json_indent`` is set.
    Dataclass instances are encoded by field, other objects by their public
    instance attributes.
    """
    config = config or ObjkitConfig()
    separators = (",", ":") if config.json_indent is None else None
    try:
        return json.dumps(
            obj,
            default=_encode_object,
            indent=config.json_indent,
            separators=separators,
            sort_keys=config.json_sort_keys,
        )
    except (TypeError, ValueError) as exc:
        raise SerializationError(f"Cannot encode value: {exc}", cause=exc) from exc


def from_json(cls: type[T], text: str) -> T:
    """Decode a JSON object into an instance of ``cls``.

    The instance is allocated without calling ``cls.__init__``; every key of
    the payload becomes an attribute. Properties and methods defined on
    ``cls`` work on the result as usual.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SerializationError(f"Invalid JSON: {exc}", cause=exc) from exc

    if not isinstance(payload, dict):
        raise SerializationError(
            f"Expected a JSON object for {cls.__name__}, got {type(payload).__name__}"
        )

    instance = cls.__new__(cls)
    for key, value in payload.items():
        try:
            object.__setattr__(instance, key, value)
        except (AttributeError, TypeError) as exc:
            raise SerializationError(
                f"Cannot set {key!r} on {cls.__name__}", cause=exc
            ) from exc
    logger.debug("Decoded %s with fields %s", cls.__name__, sorted(payload))
    return instance
