"""Resource Registry - Base paths per resource kind.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from roadgateway_admin.utils.helpers import join_path, quote_segment


class ResourceKind(Enum):
    """Admin API resource kinds and their base paths."""

    NODE = ""
    STATUS = "status"
    CLUSTER = "cluster"
    APIS = "apis"
    API_PLUGINS = "apis/{api}/plugins"
    CONSUMERS = "consumers"
    CONSUMER_ACLS = "consumers/{consumer}/acls"
    PLUGINS = "plugins"
    UPSTREAMS = "upstreams"
    TARGETS = "upstreams/{upstream}/targets"


def resource_path(kind: ResourceKind, *keys: Any, **params: Any) -> str:
    """Build the path of a resource.

    ``params`` fill placeholders of the base path, ``keys`` are appended
    as path segments. All are quoted.

    e.g. ``resource_path(ResourceKind.TARGETS, "i", upstream="u")``
    gives ``upstreams/u/targets/i``.
    """
    quoted = {name: quote_segment(value) for name, value in params.items()}
    try:
        base = kind.value.format(**quoted)
    except KeyError as e:
        raise ValueError(f"Missing path parameter {e} for {kind.name}") from e

    return join_path(base, *(quote_segment(key) for key in keys))


__all__ = [
    "ResourceKind",
    "resource_path",
]
