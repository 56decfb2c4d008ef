"""Plugin Configs - Typed configurations of bundled gateway plugins.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.

Each config flattens to the plugin's ``config`` map with
:func:`~roadgateway_admin.projection.projector.to_map`. Sequence fields
default to ``None``: an empty list is sent as ``[]`` while an unset one
is left to the gateway's default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from roadgateway_admin.plugins.registry import register_config
from roadgateway_admin.projection.fields import wire_config, wire_field


@register_config("acl")
@wire_config
@dataclass
class ACLConfig:
    """Access control by consumer group."""

    whitelist: Optional[List[str]] = wire_field("whitelist", default=None)
    blacklist: Optional[List[str]] = wire_field("blacklist", default=None)


@register_config("request-size-limiting")
@wire_config
@dataclass
class RequestSizeLimitingConfig:
    """Request body size limit, in megabytes."""

    allowed_payload_size: int = wire_field("allowed_payload_size", default=0)


@register_config("correlation-id")
@wire_config
@dataclass
class CorrelationIDConfig:
    header_name: str = wire_field("header_name", default="")
    generator: str = wire_field("generator", default="")
    echo_downstream: bool = wire_field("echo_downstream", default=False)


@register_config("rate-limiting")
@wire_config
@dataclass
class RateLimitingConfig:
    """Request quotas per time window.

    ``policy`` selects where counters live (``local``, ``cluster`` or
    ``redis``); the redis settings apply to the latter only.
    """

    second: int = wire_field("second", default=0)
    minute: int = wire_field("minute", default=0)
    hour: int = wire_field("hour", default=0)
    day: int = wire_field("day", default=0)
    month: int = wire_field("month", default=0)
    year: int = wire_field("year", default=0)
    limit_by: str = wire_field("limit_by", default="")
    policy: str = wire_field("policy", default="")
    fault_tolerant: bool = wire_field("fault_tolerant", default=False)
    redis_host: str = wire_field("redis_host", default="")
    redis_port: int = wire_field("redis_port", default=0)
    redis_password: str = wire_field("redis_password", default="", repr=False)
    redis_timeout: int = wire_field("redis_timeout", default=0)


@register_config("jwt")
@wire_config
@dataclass
class JWTConfig:
    uri_param_names: Optional[List[str]] = wire_field("uri_param_names", default=None)
    claims_to_verify: Optional[List[str]] = wire_field("claims_to_verify", default=None)
    key_claim_name: str = wire_field("key_claim_name", default="")
    secret_is_base64: bool = wire_field("secret_is_base64", default=False)


@register_config("file-log")
@wire_config
@dataclass
class FileLogConfig:
    path: str = wire_field("path", default="")


@register_config("key-auth")
@wire_config
@dataclass
class KeyAuthenticationConfig:
    key_names: Optional[List[str]] = wire_field("key_names", default=None)
    hide_credentials: bool = wire_field("hide_credentials", default=False)


__all__ = [
    "ACLConfig",
    "RequestSizeLimitingConfig",
    "CorrelationIDConfig",
    "RateLimitingConfig",
    "JWTConfig",
    "FileLogConfig",
    "KeyAuthenticationConfig",
]
