"""Plugin Config Registry - Plugin name to typed config lookup.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, Dict, List, Optional, TypeVar

from roadgateway_admin.projection.fields import is_wire_config

logger = logging.getLogger(__name__)

C = TypeVar("C", bound=type)


class ConfigRegistry:
    """Maps gateway plugin names to their typed config classes.

    Plugins without a registered config are handled generically.
    """

    def __init__(self):
        self._by_name: Dict[str, type] = {}
        self._by_type: Dict[type, str] = {}
        self._lock = threading.RLock()

    def register(self, name: str, config_type: type) -> None:
        """Register a config class for a plugin name."""
        if not is_wire_config(config_type):
            raise TypeError(
                f"{config_type.__name__} must be declared with @wire_config"
            )

        with self._lock:
            if name in self._by_name:
                raise ValueError(f"Plugin config already registered: {name}")
            self._by_name[name] = config_type
            self._by_type[config_type] = name

        logger.debug(f"Registered config {config_type.__name__} for plugin {name}")

    def unregister(self, name: str) -> bool:
        """Remove a plugin name. Returns False if it was not registered."""
        with self._lock:
            config_type = self._by_name.pop(name, None)
            if config_type is None:
                return False
            self._by_type.pop(config_type, None)
            return True

    def lookup(self, name: str) -> Optional[type]:
        """Get the config class for a plugin name."""
        return self._by_name.get(name)

    def name_of(self, config_type: type) -> Optional[str]:
        """Get the plugin name a config class is registered under."""
        return self._by_type.get(config_type)

    def names(self) -> List[str]:
        """List registered plugin names."""
        return sorted(self._by_name)

    def __contains__(self, name: str) -> bool:
        return name in self._by_name


default_registry = ConfigRegistry()


def register_config(
    name: str,
    registry: Optional[ConfigRegistry] = None,
) -> Callable[[C], C]:
    """Class decorator registering a typed plugin config."""

    def decorator(cls: C) -> C:
        (registry or default_registry).register(name, cls)
        return cls

    return decorator


__all__ = [
    "ConfigRegistry",
    "default_registry",
    "register_config",
]
