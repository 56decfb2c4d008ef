"""Node - Node information, status and cluster membership.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from roadgateway_admin.client.transport import TransportResult
from roadgateway_admin.projection.entity import Entity
from roadgateway_admin.projection.fields import wire_config, wire_field
from roadgateway_admin.resources.base import ResourceService
from roadgateway_admin.resources.registry import ResourceKind, resource_path


@wire_config
@dataclass
class NodePlugins(Entity):
    available_on_server: Optional[Dict[str, bool]] = wire_field(
        "available_on_server", default=None
    )
    enabled_in_cluster: Optional[Dict[str, bool]] = wire_field(
        "enabled_in_cluster", default=None
    )


@wire_config
@dataclass
class Node(Entity):
    """Details of the node serving the admin API."""

    configuration: Optional[Dict[str, Any]] = wire_field("configuration", default=None)
    hostname: str = wire_field("hostname", default="")
    lua_version: str = wire_field("lua_version", default="")
    plugins: Optional[NodePlugins] = wire_field("plugins", default=None)
    prng_seeds: Optional[Dict[str, int]] = wire_field("prng_seeds", default=None)
    tagline: str = wire_field("tagline", default="")
    timers: Optional[Dict[str, int]] = wire_field("timers", default=None)
    version: str = wire_field("version", default="")


@wire_config
@dataclass
class Status(Entity):
    """Usage counters of the node's server and database."""

    database: Optional[Dict[str, int]] = wire_field("database", default=None)
    server: Optional[Dict[str, int]] = wire_field("server", default=None)


@wire_config
@dataclass
class ClusterMember(Entity):
    address: str = wire_field("address", default="")
    name: str = wire_field("name", default="")
    status: str = wire_field("status", default="")


@wire_config
@dataclass
class Cluster(Entity):
    total: int = wire_field("total", default=0, omit_zero=False)
    data: Optional[List[ClusterMember]] = wire_field("data", default=None)


class NodeService(ResourceService):
    """Operations on the node root and ``/status``."""

    kind = ResourceKind.NODE
    entity_type = Node

    def get(self) -> Node:
        """Get node information.

        Equivalent to GET /
        """
        return self._fetch(self._path())

    def get_status(self) -> Status:
        """Get node status.

        Equivalent to GET /status
        """
        return self._fetch(resource_path(ResourceKind.STATUS), Status)


class ClusterService(ResourceService):
    """Operations on ``/cluster``."""

    kind = ResourceKind.CLUSTER
    entity_type = Cluster

    def get(self) -> Cluster:
        """List cluster members.

        Equivalent to GET /cluster
        """
        return self._fetch(self._path())

    def delete(self, member: ClusterMember) -> TransportResult:
        """Remove a member from the cluster.

        Equivalent to DELETE /cluster
        """
        return self._send("DELETE", self._path(), member)


__all__ = [
    "NodePlugins",
    "Node",
    "Status",
    "ClusterMember",
    "Cluster",
    "NodeService",
    "ClusterService",
]
