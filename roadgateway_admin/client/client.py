"""Client - Entry point to the gateway admin API.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

import httpx

from roadgateway_admin.client.transport import Transport, TransportResult
from roadgateway_admin.resources.apis import ApisService
from roadgateway_admin.resources.consumers import ConsumerACLsService, ConsumersService
from roadgateway_admin.resources.node import ClusterService, NodeService
from roadgateway_admin.resources.plugins import PluginsService
from roadgateway_admin.resources.targets import TargetsService
from roadgateway_admin.resources.upstreams import UpstreamsService
from roadgateway_admin.utils.config import DEFAULT_ENV_PREFIX, ClientConfig, load_config

logger = logging.getLogger(__name__)


class Client:
    """Admin API client.

    Holds one transport shared by every resource service.

    Usage:
        with Client("http://localhost:8001/") as client:
            api = client.apis.get("example")
            for plugin in client.plugins.iter_all():
                print(plugin.name)
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        *,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        config = config or ClientConfig()
        if base_url is not None:
            config = config.merge({"base_url": base_url})

        self.config = config
        self.transport = Transport(config, http_client=http_client)

        self.apis = ApisService(self.transport)
        self.consumers = ConsumersService(self.transport)
        self.consumer_acls = ConsumerACLsService(self.transport)
        self.plugins = PluginsService(self.transport)
        self.upstreams = UpstreamsService(self.transport)
        self.targets = TargetsService(self.transport)
        self.node = NodeService(self.transport)
        self.cluster = ClusterService(self.transport)

        logger.debug(f"Admin client for {self.transport.base_url}")

    @classmethod
    def from_config(
        cls,
        path: Optional[str] = None,
        env_prefix: str = DEFAULT_ENV_PREFIX,
        http_client: Optional[httpx.Client] = None,
    ) -> "Client":
        """Create a client from a config file and environment overrides."""
        return cls(config=load_config(path, env_prefix), http_client=http_client)

    @property
    def base_url(self) -> httpx.URL:
        return self.transport.base_url

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Request:
        """Build a request for a path relative to the base URL."""
        return self.transport.new_request(method, path, body, params)

    def do(self, request: httpx.Request) -> TransportResult:
        """Execute a request built with :meth:`new_request`."""
        return self.transport.do(request)

    def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> TransportResult:
        return self.transport.send(method, path, body, params)

    def close(self) -> None:
        self.transport.close()

    def __enter__(self) -> "Client":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = [
    "Client",
]
