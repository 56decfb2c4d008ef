"""Projector - Typed config <-> wire map conversion.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import copy
import dataclasses
import logging
import numbers
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, TypeVar

from roadgateway_admin.projection.fields import (
    field_type,
    find_field,
    is_settable,
    is_zero,
    list_item_type,
    omits_zero,
    wire_name,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProjectionError(Exception):
    """Base error for inverse projection failures."""

    def __init__(self, key: str, config_type: type, message: str):
        self.key = key
        self.config_type = config_type
        super().__init__(message)


class UnknownFieldError(ProjectionError):
    """No field of the config is declared with the wire key."""

    def __init__(self, key: str, config_type: type):
        super().__init__(
            key,
            config_type,
            f"No field with wire name '{key}' in {config_type.__name__}",
        )


class NotSettableError(ProjectionError):
    """The matching field cannot be written."""

    def __init__(self, key: str, config_type: type):
        super().__init__(
            key,
            config_type,
            f"Cannot set field '{key}' of {config_type.__name__}",
        )


class TypeMismatchError(ProjectionError):
    """The wire value does not match the field's declared type."""

    def __init__(self, key: str, config_type: type, expected: Any, value: Any):
        self.expected = expected
        self.value = value
        super().__init__(
            key,
            config_type,
            f"Wire value for '{key}' has type {type(value).__name__}, "
            f"want {_type_label(expected)}",
        )


class UnsupportedFieldKindError(ProjectionError):
    """The field's declared type cannot be populated from a wire map."""

    def __init__(self, key: str, config_type: type, kind: Any):
        self.kind = kind
        super().__init__(
            key,
            config_type,
            f"Field '{key}' of {config_type.__name__} has unsupported kind "
            f"{_type_label(kind)}; expected str, int or List[str]",
        )


def _type_label(kind: Any) -> str:
    return getattr(kind, "__name__", None) or str(kind)


def _require_instance(config: Any) -> None:
    if not dataclasses.is_dataclass(config) or isinstance(config, type):
        raise TypeError(
            f"Expected a dataclass instance, got {type(config).__name__}"
        )


def to_map(config: Any) -> Dict[str, Any]:
    """Flatten a typed config into a wire map.

    Only fields holding a non-zero value are emitted, keyed by their
    wire name. Fields without a wire name are skipped.
    """
    _require_instance(config)

    result: Dict[str, Any] = {}
    for f in dataclasses.fields(config):
        name = wire_name(f)
        if name is None:
            logger.debug(
                f"Skipping {type(config).__name__}.{f.name}: no wire name"
            )
            continue

        value = getattr(config, f.name)
        if value is None:
            continue
        if omits_zero(f) and is_zero(value):
            continue

        result[name] = _project_value(value)

    return result


def _project_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return to_map(value)
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_project_value(item) for item in value]
    if isinstance(value, dict):
        return {key: _project_value(item) for key, item in value.items()}
    return value


def set_wire_field(target: Any, key: str, value: Any) -> None:
    """Set the field of ``target`` declared with wire name ``key``."""
    _require_instance(target)
    config_type = type(target)

    f = find_field(config_type, key)
    if f is None:
        raise UnknownFieldError(key, config_type)

    if not is_settable(config_type, f):
        raise NotSettableError(key, config_type)

    kind = field_type(config_type, f)
    setattr(target, f.name, _coerce(key, config_type, kind, value))


def _coerce(key: str, config_type: type, kind: Any, value: Any) -> Any:
    if kind is str:
        if not isinstance(value, str):
            raise TypeMismatchError(key, config_type, kind, value)
        return value

    if kind is int:
        # Wire numbers may arrive as floats; bool is not a number here
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeMismatchError(key, config_type, kind, value)
        try:
            return int(value)
        except (ValueError, OverflowError):
            raise TypeMismatchError(key, config_type, kind, value)

    if list_item_type(kind) is str:
        if not isinstance(value, (list, tuple)):
            raise TypeMismatchError(key, config_type, kind, value)
        items: List[str] = []
        for item in value:
            if not isinstance(item, str):
                raise TypeMismatchError(key, config_type, kind, value)
            items.append(item)
        return items

    raise UnsupportedFieldKindError(key, config_type, kind)


def from_map(
    target: T,
    wire_map: Optional[Mapping[str, Any]],
    atomic: bool = True,
) -> T:
    """Populate a typed config from a wire map.

    Each key must match a field's wire name. The first failure is
    raised. With ``atomic`` the target is only written once every key
    has been applied; otherwise keys applied before the failure stay
    set on the target.
    """
    _require_instance(target)
    if not wire_map:
        return target

    if not atomic:
        for key, value in wire_map.items():
            set_wire_field(target, key, value)
        return target

    scratch = copy.copy(target)
    for key, value in wire_map.items():
        set_wire_field(scratch, key, value)

    for key in wire_map:
        f = find_field(type(target), key)
        setattr(target, f.name, getattr(scratch, f.name))

    return target


__all__ = [
    "ProjectionError",
    "UnknownFieldError",
    "NotSettableError",
    "TypeMismatchError",
    "UnsupportedFieldKindError",
    "to_map",
    "from_map",
    "set_wire_field",
]
