"""Consumers - The ``/consumers`` resource and consumer ACL groups.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, Optional

from roadgateway_admin.client.transport import TransportResult
from roadgateway_admin.projection.entity import Entity
from roadgateway_admin.projection.fields import wire_config, wire_field
from roadgateway_admin.resources.base import Page, ResourceService
from roadgateway_admin.resources.registry import ResourceKind


@wire_config
@dataclass
class Consumer(Entity):
    """A user or service consuming APIs through the gateway."""

    id: str = wire_field("id", default="")
    username: str = wire_field("username", default="")
    custom_id: str = wire_field("custom_id", default="")
    created_at: int = wire_field("created_at", default=0)


@wire_config
@dataclass
class ConsumersGetAllOptions:
    """Filters for :meth:`ConsumersService.get_all`."""

    id: str = wire_field("id", default="")
    custom_id: str = wire_field("custom_id", default="")
    username: str = wire_field("username", default="")
    size: int = wire_field("size", default=0)
    offset: str = wire_field("offset", default="")


@wire_config
@dataclass
class ACLGroup(Entity):
    """Membership of a consumer in an ACL group."""

    id: str = wire_field("id", default="")
    consumer_id: str = wire_field("consumer_id", default="")
    group: str = wire_field("group", default="", omit_zero=False)
    created_at: int = wire_field("created_at", default=0)


class ConsumersService(ResourceService):
    """Operations on ``/consumers``."""

    kind = ResourceKind.CONSUMERS
    entity_type = Consumer

    def get(self, consumer: str) -> Consumer:
        """Get a consumer by username or id.

        Equivalent to GET /consumers/{username or id}
        """
        return self._fetch(self._path(consumer))

    def patch(self, consumer: Consumer) -> TransportResult:
        """Update a consumer, addressed by its id or else its username.

        Equivalent to PATCH /consumers/{username or id}
        """
        key = consumer.id or consumer.username
        if not key:
            raise ValueError(
                "At least one of consumer.username or consumer.id must be specified"
            )
        return self._send("PATCH", self._path(key), consumer)

    def delete(self, consumer: str) -> TransportResult:
        """Delete a consumer by username or id.

        Equivalent to DELETE /consumers/{username or id}
        """
        return self._send("DELETE", self._path(consumer))

    def post(self, consumer: Consumer) -> TransportResult:
        """Create a consumer.

        Equivalent to POST /consumers
        """
        return self._send("POST", self._path(), consumer)

    def get_all(
        self,
        options: Optional[ConsumersGetAllOptions] = None,
    ) -> Page[Consumer]:
        """List consumers, optionally filtered.

        Equivalent to GET /consumers?{options}
        """
        return self._fetch_page(self._path(), options)

    def iter_all(
        self,
        options: Optional[ConsumersGetAllOptions] = None,
    ) -> Iterator[Consumer]:
        """Iterate over all consumers matching the filters, across pages."""
        return self._iterate(self._path(), options, ConsumersGetAllOptions)

    def configure_plugin(
        self,
        consumer: str,
        plugin: str,
        config: Any,
    ) -> TransportResult:
        """Create per-consumer plugin credentials or settings.

        ``config`` is a wire config or a plain mapping, e.g. a key-auth
        credential ``{"key": "..."}``.

        Equivalent to POST /consumers/{username or id}/{plugin}
        """
        return self._send("POST", self._path(consumer, plugin), config)


class ConsumerACLsService(ResourceService):
    """Operations on ``/consumers/{consumer}/acls``."""

    kind = ResourceKind.CONSUMER_ACLS
    entity_type = ACLGroup

    def configure(self, consumer: str, acl: ACLGroup) -> TransportResult:
        """Add a consumer to an ACL group.

        Equivalent to POST /consumers/{username or id}/acls
        """
        return self._send("POST", self._path(consumer=consumer), acl)

    def get(self, consumer: str) -> Page[ACLGroup]:
        """List the ACL groups of a consumer.

        Equivalent to GET /consumers/{username or id}/acls
        """
        return self._fetch_page(self._path(consumer=consumer))

    def delete(self, consumer: str, acl_id: str) -> TransportResult:
        """Remove a consumer from an ACL group.

        Equivalent to DELETE /consumers/{username or id}/acls/{id}
        """
        return self._send("DELETE", self._path(acl_id, consumer=consumer))


__all__ = [
    "Consumer",
    "ConsumersGetAllOptions",
    "ACLGroup",
    "ConsumersService",
    "ConsumerACLsService",
]
