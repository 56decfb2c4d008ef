"""RoadGateway Admin - Client for the gateway admin API.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

RoadGateway Admin manages a running gateway node with:
- APIs, consumers and consumer ACL groups
- Plugins with typed, registered configurations
- Upstreams and their load balancing targets
- Node information, status and cluster membership
- Field projection between config records and wire maps

Architecture Overview:
┌─────────────────────────────────────────────────────────────────────────────┐
│                           RoadGateway Admin                                  │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                              │
│  ┌───────────────────────────────────────────────────────────────────────┐  │
│  │                          Request Pipeline                              │  │
│  │  Service ──▶ Projection ──▶ Transport ──▶ Admin API ──▶ Entity/Page   │  │
│  └───────────────────────────────────────────────────────────────────────┘  │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────┐  ┌─────────────────────────────┐ │
│  │   Projection    │  │    Plugins      │  │        Resources            │ │
│  │                 │  │                 │  │                             │ │
│  │ - Wire fields   │  │ - Registry      │  │ - Apis / Consumers          │ │
│  │ - to_map        │  │ - Typed configs │  │ - Plugins                   │ │
│  │ - from_map      │  │ - TypedPlugin   │  │ - Upstreams / Targets       │ │
│  │ - Query params  │  │ - GenericConfig │  │ - Node / Cluster            │ │
│  └─────────────────┘  └─────────────────┘  └─────────────────────────────┘ │
│                                                                              │
│  ┌─────────────────┐  ┌─────────────────────────────────────────────────┐  │
│  │     Client      │  │                  Utils                           │  │
│  │                 │  │                                                  │  │
│  │ - Transport     │  │ - ClientConfig (file, YAML, env)                 │  │
│  │ - Error mapping │  │ - URL and path helpers                           │  │
│  └─────────────────┘  └─────────────────────────────────────────────────┘  │
│                                                                              │
└─────────────────────────────────────────────────────────────────────────────┘

Request Flow:
1. Service builds the resource path and projects the record to a wire map
2. Transport encodes the wire map as JSON and sends the request
3. Non-2xx responses raise NotFoundError, ConflictError or ErrorResponse
4. JSON bodies decode into entities or pages of entities

Usage:
    from roadgateway_admin import Client, Api, Plugin, TypedPlugin, ACLConfig

    with Client("http://localhost:8001/") as client:
        client.apis.post(Api(name="example", upstream_url="http://backend"))

        api = client.apis.get("example")
        client.plugins.post(TypedPlugin(
            ACLConfig(whitelist=["admins"]),
            Plugin(api_id=api.id),
        ))
"""

__version__ = "0.1.0"
__author__ = "BlackRoad OS, Inc."

# Projection
from roadgateway_admin.projection.fields import (
    WireSchemaError,
    wire_field,
    wire_config,
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
from roadgateway_admin.projection.query import encode_query

# Utils
from roadgateway_admin.utils.config import ClientConfig, load_config

# Client
from roadgateway_admin.client.transport import (
    ErrorResponse,
    NotFoundError,
    ConflictError,
    Transport,
    TransportResult,
)
from roadgateway_admin.client.client import Client

# Plugins
from roadgateway_admin.plugins.registry import (
    ConfigRegistry,
    default_registry,
    register_config,
)
from roadgateway_admin.plugins.configs import (
    ACLConfig,
    RequestSizeLimitingConfig,
    CorrelationIDConfig,
    RateLimitingConfig,
    JWTConfig,
    FileLogConfig,
    KeyAuthenticationConfig,
)
from roadgateway_admin.plugins.base import Plugin, GenericConfig, TypedPlugin

# Resources
from roadgateway_admin.resources.base import Page
from roadgateway_admin.resources.apis import Api, ApisGetAllOptions
from roadgateway_admin.resources.consumers import (
    Consumer,
    ConsumersGetAllOptions,
    ACLGroup,
)
from roadgateway_admin.resources.plugins import PluginsGetAllOptions
from roadgateway_admin.resources.upstreams import Upstream, UpstreamsGetAllOptions
from roadgateway_admin.resources.targets import Target, TargetsGetAllOptions
from roadgateway_admin.resources.node import Node, Status, Cluster, ClusterMember

__all__ = [
    # Version
    "__version__",
    # Projection
    "WireSchemaError",
    "wire_field",
    "wire_config",
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
    # Utils
    "ClientConfig",
    "load_config",
    # Client
    "ErrorResponse",
    "NotFoundError",
    "ConflictError",
    "Transport",
    "TransportResult",
    "Client",
    # Plugins
    "ConfigRegistry",
    "default_registry",
    "register_config",
    "ACLConfig",
    "RequestSizeLimitingConfig",
    "CorrelationIDConfig",
    "RateLimitingConfig",
    "JWTConfig",
    "FileLogConfig",
    "KeyAuthenticationConfig",
    "Plugin",
    "GenericConfig",
    "TypedPlugin",
    # Resources
    "Page",
    "Api",
    "ApisGetAllOptions",
    "Consumer",
    "ConsumersGetAllOptions",
    "ACLGroup",
    "PluginsGetAllOptions",
    "Upstream",
    "UpstreamsGetAllOptions",
    "Target",
    "TargetsGetAllOptions",
    "Node",
    "Status",
    "Cluster",
    "ClusterMember",
]
