"""Query Encoding - Filter options to query parameters.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Dict, List, Optional, Union
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from roadgateway_admin.projection.fields import is_zero, wire_name

QueryParams = Dict[str, Union[str, List[str]]]


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return _query_value(value.value)
    return str(value)


def encode_query(options: Any) -> QueryParams:
    """Encode a filter options record as query parameters.

    Uses the same zero policy as wire maps: unset and zero fields are
    left out. Sequences become repeated parameters.
    """
    if options is None:
        return {}

    if not dataclasses.is_dataclass(options) or isinstance(options, type):
        raise TypeError(
            f"Expected a dataclass instance, got {type(options).__name__}"
        )

    params: QueryParams = {}
    for f in dataclasses.fields(options):
        name = wire_name(f)
        if name is None:
            continue

        value = getattr(options, f.name)
        if is_zero(value):
            continue

        if isinstance(value, (list, tuple, set, frozenset)):
            params[name] = [_query_value(item) for item in value]
        else:
            params[name] = _query_value(value)

    return params


def add_options(path: str, options: Any) -> str:
    """Append encoded filter options to a path.

    e.g. ``add_options("apis", ApisGetAllOptions(request_path="service"))``
    gives ``apis?request_path=service``.
    """
    params = encode_query(options)
    if not params:
        return path

    scheme, netloc, url_path, _, fragment = urlsplit(path)
    return urlunsplit(
        (scheme, netloc, url_path, urlencode(params, doseq=True), fragment)
    )


def offset_from_next(next_url: Optional[str]) -> str:
    """Extract the ``offset`` cursor from a list response's next link."""
    if not next_url:
        return ""

    values = parse_qs(urlsplit(next_url).query).get("offset", [])
    return values[0] if values else ""


__all__ = [
    "QueryParams",
    "encode_query",
    "add_options",
    "offset_from_next",
]
