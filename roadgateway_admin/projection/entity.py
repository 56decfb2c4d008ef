"""Entity - Wire configs decoded from admin API responses.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Dict, Mapping, Optional, Type, TypeVar

from roadgateway_admin.projection.fields import (
    field_type,
    list_item_type,
    unwrap_optional,
    wire_name,
)
from roadgateway_admin.projection.projector import to_map

E = TypeVar("E", bound="Entity")


class Entity:
    """Base for admin API entities.

    Subclasses are wire configs. Encoding drops zero fields; decoding is
    lenient and ignores keys the entity does not declare.
    """

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire representation."""
        return to_map(self)

    @classmethod
    def from_dict(cls: Type[E], data: Optional[Mapping[str, Any]]) -> E:
        """Create an entity from a decoded response body."""
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ValueError(
                f"Expected a JSON object for {cls.__name__}, "
                f"got {type(data).__name__}"
            )

        fields_by_wire = {
            wire_name(f): f
            for f in dataclasses.fields(cls)
            if wire_name(f) is not None and f.init
        }

        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            f = fields_by_wire.get(key)
            if f is None:
                continue
            kwargs[f.name] = _decode_value(field_type(cls, f), value)

        return cls(**kwargs)


def _is_entity_type(kind: Any) -> bool:
    return isinstance(kind, type) and issubclass(kind, Entity)


def _decode_value(kind: Any, value: Any) -> Any:
    kind = unwrap_optional(kind)
    if value is None:
        return None

    if _is_entity_type(kind) and isinstance(value, Mapping):
        return kind.from_dict(value)

    item_type = list_item_type(kind)
    if item_type is not None and isinstance(value, list):
        return [_decode_value(item_type, item) for item in value]

    if kind is int and isinstance(value, float):
        return int(value)

    return value


__all__ = [
    "Entity",
]
