"""Resources module - Admin API resource services."""

from roadgateway_admin.resources.registry import (
    ResourceKind,
    resource_path,
)
from roadgateway_admin.resources.base import (
    Page,
    ResourceService,
)
from roadgateway_admin.resources.apis import (
    Api,
    ApisGetAllOptions,
    ApisService,
)
from roadgateway_admin.resources.consumers import (
    Consumer,
    ConsumersGetAllOptions,
    ACLGroup,
    ConsumersService,
    ConsumerACLsService,
)
from roadgateway_admin.resources.plugins import (
    PluginsGetAllOptions,
    PluginsService,
)
from roadgateway_admin.resources.upstreams import (
    Upstream,
    UpstreamsGetAllOptions,
    UpstreamsService,
)
from roadgateway_admin.resources.targets import (
    Target,
    TargetsGetAllOptions,
    TargetsService,
)
from roadgateway_admin.resources.node import (
    Node,
    NodePlugins,
    Status,
    Cluster,
    ClusterMember,
    NodeService,
    ClusterService,
)

__all__ = [
    "ResourceKind",
    "resource_path",
    "Page",
    "ResourceService",
    "Api",
    "ApisGetAllOptions",
    "ApisService",
    "Consumer",
    "ConsumersGetAllOptions",
    "ACLGroup",
    "ConsumersService",
    "ConsumerACLsService",
    "PluginsGetAllOptions",
    "PluginsService",
    "Upstream",
    "UpstreamsGetAllOptions",
    "UpstreamsService",
    "Target",
    "TargetsGetAllOptions",
    "TargetsService",
    "Node",
    "NodePlugins",
    "Status",
    "Cluster",
    "ClusterMember",
    "NodeService",
    "ClusterService",
]
