"""Wire Fields - Declarative field-to-wire-name mapping.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
import functools
import types
import typing
from dataclasses import MISSING, Field
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

T = TypeVar("T")

WIRE_NAME = "wire_name"
OMIT_ZERO = "omit_zero"

_NONE_TYPE = type(None)
_UNION_TYPES = (Union, getattr(types, "UnionType", Union))


class WireSchemaError(Exception):
    """Raised when a wire config declaration is malformed."""
    pass


def wire_field(
    name: str,
    *,
    default: Any = MISSING,
    default_factory: Any = MISSING,
    omit_zero: bool = True,
    init: bool = True,
    repr: bool = True,
    compare: bool = True,
) -> Any:
    """Declare a dataclass field transmitted under ``name``.

    Zero-valued fields are left out of the wire map unless
    ``omit_zero`` is False. ``None`` is never transmitted.
    """
    if not name:
        raise WireSchemaError("Wire name must be a non-empty string")

    return dataclasses.field(
        default=default,
        default_factory=default_factory,
        init=init,
        repr=repr,
        compare=compare,
        metadata={WIRE_NAME: name, OMIT_ZERO: omit_zero},
    )


def wire_name(f: Field) -> Optional[str]:
    """Get the declared wire name of a field, if any."""
    return f.metadata.get(WIRE_NAME)


def omits_zero(f: Field) -> bool:
    """Check if zero values of the field are left off the wire."""
    return f.metadata.get(OMIT_ZERO, True)


def wire_config(cls: Type[T]) -> Type[T]:
    """Validate a dataclass as a wire config.

    Every field must declare a wire name and no two fields may share
    one. Problems surface when the class is defined, not when it is
    first projected.
    """
    if not dataclasses.is_dataclass(cls):
        raise TypeError(f"{cls.__name__} is not a dataclass")

    names: Dict[str, str] = {}
    for f in dataclasses.fields(cls):
        name = wire_name(f)
        if name is None:
            raise WireSchemaError(
                f"{cls.__name__}.{f.name} declares no wire name"
            )
        if name in names:
            raise WireSchemaError(
                f"{cls.__name__}: wire name '{name}' used by both "
                f"'{names[name]}' and '{f.name}'"
            )
        names[name] = f.name

    cls.__wire_names__ = names
    return cls


def is_wire_config(cls: Any) -> bool:
    """Check if a class was validated with :func:`wire_config`."""
    return isinstance(cls, type) and "__wire_names__" in cls.__dict__


def is_zero(value: Any) -> bool:
    """Check if a value is the zero value for its type.

    Sequences and mappings are zero only when unset (``None``); an
    allocated empty list is a value. Nested dataclasses are zero when
    all of their init fields are zero.
    """
    if value is None:
        return True

    if isinstance(value, Enum):
        return is_zero(value.value)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return all(
            is_zero(getattr(value, f.name))
            for f in dataclasses.fields(value)
            if f.init
        )

    if isinstance(value, (list, tuple, dict, set, frozenset)):
        return False

    if isinstance(value, (bool, int, float, complex, str, bytes)):
        return value == type(value)()

    return False


def find_field(cls: type, name: str) -> Optional[Field]:
    """Find the field of a dataclass declared with a wire name."""
    for f in dataclasses.fields(cls):
        if wire_name(f) == name:
            return f
    return None


def is_settable(cls: type, f: Field) -> bool:
    """Check if a field may be written through projection."""
    params = getattr(cls, "__dataclass_params__", None)
    if params is not None and params.frozen:
        return False
    return f.init


@functools.lru_cache(maxsize=None)
def _type_hints(cls: type) -> Dict[str, Any]:
    return typing.get_type_hints(cls)


def field_type(cls: type, f: Field) -> Any:
    """Resolve a field's declared type, unwrapping ``Optional``."""
    hint = _type_hints(cls).get(f.name, Any)
    return unwrap_optional(hint)


def unwrap_optional(hint: Any) -> Any:
    """Reduce ``Optional[X]`` to ``X``."""
    if typing.get_origin(hint) in _UNION_TYPES:
        args = [a for a in typing.get_args(hint) if a is not _NONE_TYPE]
        if len(args) == 1:
            return args[0]
    return hint


def list_item_type(hint: Any) -> Any:
    """Get the item type of ``List[X]``, or None for other hints."""
    if typing.get_origin(hint) in (list, List):
        args = typing.get_args(hint)
        return args[0] if args else Any
    return None


__all__ = [
    "WireSchemaError",
    "wire_field",
    "wire_name",
    "omits_zero",
    "wire_config",
    "is_wire_config",
    "is_zero",
    "find_field",
    "is_settable",
    "field_type",
    "unwrap_optional",
    "list_item_type",
]
