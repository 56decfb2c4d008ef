"""Upstreams - The ``/upstreams`` resource.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional

from roadgateway_admin.client.transport import TransportResult
from roadgateway_admin.projection.entity import Entity
from roadgateway_admin.projection.fields import wire_config, wire_field
from roadgateway_admin.resources.base import Page, ResourceService
from roadgateway_admin.resources.registry import ResourceKind


@wire_config
@dataclass
class Upstream(Entity):
    """A virtual hostname load balancing over a set of targets."""

    name: str = wire_field("name", default="", omit_zero=False)
    id: str = wire_field("id", default="")
    created_at: int = wire_field("created_at", default=0)
    slots: int = wire_field("slots", default=0)
    orderlist: Optional[List[int]] = wire_field("orderlist", default=None)


@wire_config
@dataclass
class UpstreamsGetAllOptions:
    """Filters for :meth:`UpstreamsService.get_all`."""

    id: str = wire_field("id", default="")
    name: str = wire_field("name", default="")
    slots: int = wire_field("slots", default=0)
    size: int = wire_field("size", default=0)
    offset: str = wire_field("offset", default="")


class UpstreamsService(ResourceService):
    """Operations on ``/upstreams``."""

    kind = ResourceKind.UPSTREAMS
    entity_type = Upstream

    def get(self, upstream: str) -> Upstream:
        """Get an upstream by name or id.

        Equivalent to GET /upstreams/{name or id}
        """
        return self._fetch(self._path(upstream))

    def patch(self, upstream: Upstream) -> TransportResult:
        """Update an upstream, addressed by its name or else its id.

        Equivalent to PATCH /upstreams/{name or id}
        """
        key = upstream.name or upstream.id
        if not key:
            raise ValueError(
                "At least one of upstream.name or upstream.id must be specified"
            )
        return self._send("PATCH", self._path(key), upstream)

    def delete(self, upstream: str) -> TransportResult:
        """Delete an upstream by name or id.

        Equivalent to DELETE /upstreams/{name or id}
        """
        return self._send("DELETE", self._path(upstream))

    def post(self, upstream: Upstream) -> TransportResult:
        """Create an upstream.

        Equivalent to POST /upstreams
        """
        return self._send("POST", self._path(), upstream)

    def get_all(
        self,
        options: Optional[UpstreamsGetAllOptions] = None,
    ) -> Page[Upstream]:
        """List upstreams, optionally filtered.

        Equivalent to GET /upstreams?{options}
        """
        return self._fetch_page(self._path(), options)

    def iter_all(
        self,
        options: Optional[UpstreamsGetAllOptions] = None,
    ) -> Iterator[Upstream]:
        """Iterate over all upstreams matching the filters, across pages."""
        return self._iterate(self._path(), options, UpstreamsGetAllOptions)


__all__ = [
    "Upstream",
    "UpstreamsGetAllOptions",
    "UpstreamsService",
]
