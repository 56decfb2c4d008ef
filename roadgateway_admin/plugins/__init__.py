"""Plugins module - Plugin entities and typed plugin configs."""

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
from roadgateway_admin.plugins.base import (
    Plugin,
    GenericConfig,
    TypedPlugin,
    EnabledPlugins,
)

__all__ = [
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
    "EnabledPlugins",
]
