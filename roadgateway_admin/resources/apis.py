"""APIs - The ``/apis`` resource.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from roadgateway_admin.client.transport import TransportResult
from roadgateway_admin.projection.entity import Entity
from roadgateway_admin.projection.fields import wire_config, wire_field
from roadgateway_admin.resources.base import Page, ResourceService
from roadgateway_admin.resources.registry import ResourceKind


@wire_config
@dataclass
class Api(Entity):
    """An API proxied by the gateway."""

    id: str = wire_field("id", default="")
    name: str = wire_field("name", default="")
    created_at: int = wire_field("created_at", default=0)
    request_host: str = wire_field("request_host", default="")
    request_path: str = wire_field("request_path", default="")
    strip_request_path: bool = wire_field("strip_request_path", default=False)
    preserve_host: bool = wire_field("preserve_host", default=False)
    upstream_url: str = wire_field("upstream_url", default="")


@wire_config
@dataclass
class ApisGetAllOptions:
    """Filters for :meth:`ApisService.get_all`."""

    id: str = wire_field("id", default="")
    name: str = wire_field("name", default="")
    request_host: str = wire_field("request_host", default="")
    request_path: str = wire_field("request_path", default="")
    upstream_url: str = wire_field("upstream_url", default="")
    size: int = wire_field("size", default=0)
    offset: str = wire_field("offset", default="")


class ApisService(ResourceService):
    """Operations on ``/apis``."""

    kind = ResourceKind.APIS
    entity_type = Api

    def get(self, api: str) -> Api:
        """Get an API by name or id.

        Equivalent to GET /apis/{name or id}
        """
        return self._fetch(self._path(api))

    def patch(self, api: Api) -> TransportResult:
        """Update an API, addressed by its id or else its name.

        Equivalent to PATCH /apis/{name or id}
        """
        key = api.id or api.name
        if not key:
            raise ValueError("At least one of api.id or api.name must be specified")
        return self._send("PATCH", self._path(key), api)

    def delete(self, api: str) -> TransportResult:
        """Delete an API by name or id.

        Equivalent to DELETE /apis/{name or id}
        """
        return self._send("DELETE", self._path(api))

    def post(self, api: Api) -> TransportResult:
        """Create an API.

        Equivalent to POST /apis
        """
        return self._send("POST", self._path(), api)

    def get_all(self, options: Optional[ApisGetAllOptions] = None) -> Page[Api]:
        """List APIs, optionally filtered.

        Equivalent to GET /apis?{options}
        """
        return self._fetch_page(self._path(), options)

    def iter_all(self, options: Optional[ApisGetAllOptions] = None) -> Iterator[Api]:
        """Iterate over all APIs matching the filters, across pages."""
        return self._iterate(self._path(), options, ApisGetAllOptions)


__all__ = [
    "Api",
    "ApisGetAllOptions",
    "ApisService",
]
