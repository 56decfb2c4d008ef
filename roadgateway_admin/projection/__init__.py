"""Projection module - Typed config <-> wire map conversion."""

from roadgateway_admin.projection.fields import (
    WireSchemaError,
    wire_field,
    wire_config,
    wire_name,
    is_zero,
)
from roadgateway_admin.projection.projector import (
    ProjectionError,
    UnknownFieldError,
    NotSettableError,
    TypeMismatchError,
    UnsupportedFieldKindError,
    to_map,
    from_map,
    set_wire_field,
)
from roadgateway_admin.projection.entity import Entity
from roadgateway_admin.projection.query import (
    encode_query,
    add_options,
)

__all__ = [
    "WireSchemaError",
    "wire_field",
    "wire_config",
    "wire_name",
    "is_zero",
    "ProjectionError",
    "UnknownFieldError",
    "NotSettableError",
    "TypeMismatchError",
    "UnsupportedFieldKindError",
    "to_map",
    "from_map",
    "set_wire_field",
    "Entity",
    "encode_query",
    "add_options",
]
