"""Targets - The ``/upstreams/{upstream}/targets`` resource.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Mapping, Optional

from roadgateway_admin.client.transport import TransportResult
from roadgateway_admin.projection.entity import Entity
from roadgateway_admin.projection.fields import wire_config, wire_field
from roadgateway_admin.resources.base import Page, ResourceService
from roadgateway_admin.resources.registry import ResourceKind

logger = logging.getLogger(__name__)


@wire_config
@dataclass
class Target(Entity):
    """A host:port backend of an upstream."""

    target: str = wire_field("target", default="", omit_zero=False)
    id: str = wire_field("id", default="")
    created_at: int = wire_field("created_at", default=0)
    weight: int = wire_field("weight", default=0)
    upstream_id: str = wire_field("upstream_id", default="")


@wire_config
@dataclass
class TargetsGetAllOptions:
    """Filters for :meth:`TargetsService.get_all`."""

    id: str = wire_field("id", default="")
    target: str = wire_field("target", default="")
    weight: int = wire_field("weight", default=0)
    size: int = wire_field("size", default=0)
    offset: str = wire_field("offset", default="")


class TargetsService(ResourceService):
    """Operations on the targets of an upstream."""

    kind = ResourceKind.TARGETS
    entity_type = Target

    def get_all(
        self,
        upstream: str,
        options: Optional[TargetsGetAllOptions] = None,
    ) -> Page[Target]:
        """List the targets of an upstream, including superseded entries.

        Equivalent to GET /upstreams/{name or id}/targets?{options}
        """
        return self._fetch_page(self._path(upstream=upstream), options)

    def get_all_active(self, upstream: str) -> Page[Target]:
        """List the active targets of an upstream.

        The endpoint reports an empty result as ``"data": {}`` rather
        than a list, so a zero total is read as an empty page.

        Equivalent to GET /upstreams/{name or id}/targets/active
        """
        result = self._send("GET", self._path("active", upstream=upstream))
        body = result.body or {}
        if not isinstance(body, Mapping):
            raise ValueError(f"Expected a JSON object, got {type(body).__name__}")

        if not body.get("total"):
            logger.debug(f"No active targets on upstream {upstream}")
            return Page(data=[], total=0)

        return Page.from_wire(body, Target)

    def delete(self, upstream: str, target: str) -> TransportResult:
        """Delete a target by host:port or id.

        Equivalent to DELETE /upstreams/{name or id}/targets/{target}
        """
        return self._send("DELETE", self._path(target, upstream=upstream))

    def post(self, upstream: str, target: Target) -> TransportResult:
        """Add a target to an upstream.

        Equivalent to POST /upstreams/{name or id}/targets
        """
        return self._send("POST", self._path(upstream=upstream), target)


__all__ = [
    "Target",
    "TargetsGetAllOptions",
    "TargetsService",
]
