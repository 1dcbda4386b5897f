"""Encode values to JSON text and decode JSON text into typed instances."""

from __future__ import annotations

import dataclasses
import json
import logging
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Callable, TypeVar

from objkit.jsonbridge.errors import ConstructionError, EncodeError, ParseError

__all__ = ["BridgeConfig", "encode", "decode"]

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class BridgeConfig:
    """Output options for :func:`encode`."""

    sort_keys: bool = False
    indent: int | None = None
    ensure_ascii: bool = False


_DEFAULT_CONFIG = BridgeConfig()


def _own_fields(obj: Any) -> dict[str, Any]:
    """Return the public instance fields of *obj* for serialisation."""
    if isinstance(obj, type):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    fields: dict[str, Any] = {}
    if dataclasses.is_dataclass(obj):
        fields = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    elif not hasattr(obj, "__dict__"):
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
    # Attributes assigned outside the declared fields, e.g. by decode().
    for key, value in getattr(obj, "__dict__", {}).items():
        fields.setdefault(key, value)
    return {k: v for k, v in fields.items() if not k.startswith("_")}


class _NonStandardConstant(ValueError):
    pass


def _reject_constant(token: str) -> Any:
    raise _NonStandardConstant(token)


def encode(value: Any, config: BridgeConfig | None = None) -> str:
    """Serialise *value* to compact JSON text.

    Objects are written as their own public fields. Key order follows
    insertion order unless ``config.sort_keys`` is set.
    """
    cfg = config or _DEFAULT_CONFIG
    separators = (",", ":") if cfg.indent is None else (",", ": ")
    try:
        text = json.dumps(
            value,
            default=_own_fields,
            sort_keys=cfg.sort_keys,
            indent=cfg.indent,
            ensure_ascii=cfg.ensure_ascii,
            separators=separators,
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodeError(f"Cannot encode value: {exc}", cause=exc) from exc
    logger.debug("Encoded %s to %d characters", type(value).__name__, len(text))
    return text


def decode(factory: Callable[[], T], text: str) -> T:
    """Build a new instance from *factory* and copy the fields of *text* onto it.

    *factory* is a type or zero-argument callable. Every key of the parsed
    JSON object is assigned to the instance, overwriting defaults, including
    keys the type does not declare.
    """
    try:
        data = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"Invalid JSON: {exc.msg}", line=exc.lineno, column=exc.colno, cause=exc
        ) from exc
    except _NonStandardConstant as exc:
        raise ParseError(f"Invalid JSON: unexpected token {exc}", cause=exc) from exc
    if not isinstance(data, dict):
        raise ParseError(f"Expected a JSON object, got {type(data).__name__}")

    name = getattr(factory, "__name__", repr(factory))
    try:
        instance = factory()
    except TypeError as exc:
        raise ConstructionError(
            f"Cannot construct {name} without arguments: {exc}", cause=exc
        ) from exc

    if isinstance(instance, MutableMapping):
        instance.update(data)
    else:
        for key, value in data.items():
            try:
                setattr(instance, key, value)
            except AttributeError as exc:
                raise ConstructionError(
                    f"Cannot assign field {key!r} on {name}: {exc}", cause=exc
                ) from exc
    logger.debug("Decoded %d field(s) into %s", len(data), name)
    return instance
