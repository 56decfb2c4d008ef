"""Plugins - The ``/plugins`` resource.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional, Union

from roadgateway_admin.client.transport import TransportResult
from roadgateway_admin.plugins.base import EnabledPlugins, Plugin, TypedPlugin
from roadgateway_admin.projection.fields import wire_config, wire_field
from roadgateway_admin.resources.base import Page, ResourceService
from roadgateway_admin.resources.registry import ResourceKind, resource_path


@wire_config
@dataclass
class PluginsGetAllOptions:
    """Filters for :meth:`PluginsService.get_all`."""

    id: str = wire_field("id", default="")
    name: str = wire_field("name", default="")
    api_id: str = wire_field("api_id", default="")
    consumer_id: str = wire_field("consumer_id", default="")
    size: int = wire_field("size", default=0)
    offset: str = wire_field("offset", default="")


def _as_plugin(plugin: Union[Plugin, TypedPlugin]) -> Plugin:
    if isinstance(plugin, TypedPlugin):
        return plugin.to_plugin()
    return plugin


class PluginsService(ResourceService):
    """Operations on ``/plugins`` and ``/apis/{api}/plugins``.

    Which API and consumer a new plugin applies to is set by its
    ``api_id`` and ``consumer_id``.
    """

    kind = ResourceKind.PLUGINS
    entity_type = Plugin

    def get(self, plugin_id: str) -> Plugin:
        """Get a plugin by id.

        Equivalent to GET /plugins/{id}
        """
        return self._fetch(self._path(plugin_id))

    def get_typed(self, plugin_id: str) -> TypedPlugin:
        """Get a plugin by id with its config decoded to the typed config."""
        return TypedPlugin.from_plugin(self.get(plugin_id))

    def get_enabled(self) -> List[str]:
        """List the plugin names enabled on the node.

        Equivalent to GET /plugins/enabled
        """
        enabled = self._fetch(self._path("enabled"), EnabledPlugins)
        return list(enabled.plugins or [])

    def patch(self, api: str, plugin: Union[Plugin, TypedPlugin]) -> TransportResult:
        """Update a plugin of an API. Accepts the API's name or id.

        Equivalent to PATCH /apis/{name or id}/plugins/{id}
        """
        plugin = _as_plugin(plugin)
        if not plugin.id:
            raise ValueError("plugin.id must be specified")
        path = resource_path(ResourceKind.API_PLUGINS, plugin.id, api=api)
        return self._send("PATCH", path, plugin)

    def delete(self, api: str, plugin_id: str) -> TransportResult:
        """Delete a plugin from an API. Accepts the API's name or id.

        Equivalent to DELETE /apis/{name or id}/plugins/{id}
        """
        path = resource_path(ResourceKind.API_PLUGINS, plugin_id, api=api)
        return self._send("DELETE", path)

    def post(self, plugin: Union[Plugin, TypedPlugin]) -> TransportResult:
        """Create a plugin.

        Equivalent to POST /plugins
        """
        return self._send("POST", self._path(), _as_plugin(plugin))

    def get_all(
        self,
        options: Optional[PluginsGetAllOptions] = None,
    ) -> Page[Plugin]:
        """List plugins, optionally filtered.

        Equivalent to GET /plugins?{options}
        """
        return self._fetch_page(self._path(), options)

    def iter_all(
        self,
        options: Optional[PluginsGetAllOptions] = None,
    ) -> Iterator[Plugin]:
        """Iterate over all plugins matching the filters, across pages."""
        return self._iterate(self._path(), options, PluginsGetAllOptions)

    def get_schema(self, name: str) -> Dict[str, Any]:
        """Get the config schema of a plugin.

        Equivalent to GET /plugins/schema/{name}
        """
        result = self._send("GET", self._path("schema", name))
        return dict(result.body or {})


__all__ = [
    "PluginsGetAllOptions",
    "PluginsService",
]
