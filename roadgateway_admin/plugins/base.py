"""Plugin Base - Plugin entity and typed plugin configs.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from roadgateway_admin.plugins.registry import ConfigRegistry, default_registry
from roadgateway_admin.projection.entity import Entity
from roadgateway_admin.projection.fields import wire_config, wire_field
from roadgateway_admin.projection.projector import from_map, to_map

logger = logging.getLogger(__name__)


@wire_config
@dataclass
class Plugin(Entity):
    """A plugin applied globally, to an API, to a consumer or both.

    ``config`` is the generic wire map of the plugin's settings. Use
    :class:`TypedPlugin` to work with a typed config instead.
    """

    id: str = wire_field("id", default="")
    name: str = wire_field("name", default="")
    created_at: int = wire_field("created_at", default=0)
    enabled: Optional[bool] = wire_field("enabled", default=None, omit_zero=False)
    api_id: str = wire_field("api_id", default="")
    consumer_id: str = wire_field("consumer_id", default="")
    config: Optional[Dict[str, Any]] = wire_field("config", default=None)


@dataclass
class GenericConfig:
    """Config of a plugin with no registered typed config."""

    values: Dict[str, Any] = field(default_factory=dict)


@dataclass
class TypedPlugin:
    """A plugin together with its typed config.

    ``config`` is either a registered wire config (``ACLConfig``,
    ``RateLimitingConfig``, ...) or a :class:`GenericConfig` for plugins
    the registry does not know.

    Usage:
        acl = TypedPlugin(ACLConfig(whitelist=["admins"]))
        client.plugins.post(acl)
    """

    config: Any
    plugin: Plugin = field(default_factory=Plugin)

    @property
    def is_generic(self) -> bool:
        """Check if the config is untyped."""
        return isinstance(self.config, (GenericConfig, dict))

    def to_plugin(self, registry: Optional[ConfigRegistry] = None) -> Plugin:
        """Flatten into a :class:`Plugin` with a generic config map.

        The plugin name defaults to the one the config type is
        registered under.
        """
        registry = registry or default_registry
        plugin = dataclasses.replace(self.plugin)

        if isinstance(self.config, GenericConfig):
            plugin.config = dict(self.config.values)
        elif isinstance(self.config, dict):
            plugin.config = dict(self.config)
        else:
            plugin.config = to_map(self.config)

        if not plugin.name and not self.is_generic:
            plugin.name = registry.name_of(type(self.config)) or ""

        if not plugin.name:
            raise ValueError("Plugin name is required for an untyped config")

        return plugin

    @classmethod
    def from_plugin(
        cls,
        plugin: Plugin,
        registry: Optional[ConfigRegistry] = None,
        atomic: bool = True,
    ) -> "TypedPlugin":
        """Select the config type by plugin name and populate it.

        Null entries in the plugin's config are treated as absent.

        Raises:
            ProjectionError: if the config map does not fit the typed config
        """
        registry = registry or default_registry
        config_type = registry.lookup(plugin.name)

        if config_type is None:
            logger.debug(f"No typed config for plugin {plugin.name!r}")
            return cls(config=GenericConfig(dict(plugin.config or {})), plugin=plugin)

        values = {k: v for k, v in (plugin.config or {}).items() if v is not None}
        config = from_map(config_type(), values, atomic=atomic)
        return cls(config=config, plugin=plugin)


@wire_config
@dataclass
class EnabledPlugins(Entity):
    """Plugin names enabled on the node."""

    plugins: Optional[List[str]] = wire_field("enabled_plugins", default=None)


__all__ = [
    "Plugin",
    "GenericConfig",
    "TypedPlugin",
    "EnabledPlugins",
]
