"""Configuration utilities.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Type, TypeVar

import yaml

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="ClientConfig")

DEFAULT_ENV_PREFIX = "GATEWAY_ADMIN_"


@dataclass
class ClientConfig:
    """Admin API client configuration."""

    # Admin API location
    base_url: str = "http://localhost:8001/"

    # Timeouts
    connect_timeout: float = 10.0
    read_timeout: float = 30.0
    write_timeout: float = 30.0

    # Transport
    verify_ssl: bool = True
    user_agent: str = "roadgateway-admin/0.1.0"
    headers: Dict[str, str] = field(default_factory=dict)

    # Logging
    log_requests: bool = True
    log_bodies: bool = False
    max_body_log_size: int = 1024

    @classmethod
    def from_dict(cls: Type[T], data: Optional[Dict[str, Any]]) -> T:
        """Create config from dictionary, ignoring unknown keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        return cls(**{k: v for k, v in (data or {}).items() if k in known})

    @classmethod
    def from_json(cls: Type[T], path: str) -> T:
        with open(path, "r") as f:
            return cls.from_dict(json.load(f))

    @classmethod
    def from_yaml(cls: Type[T], path: str) -> T:
        with open(path, "r") as f:
            return cls.from_dict(yaml.safe_load(f))

    @classmethod
    def from_env(cls: Type[T], prefix: str = DEFAULT_ENV_PREFIX) -> T:
        """Load config from ``<prefix><FIELD>`` environment variables."""
        return cls.from_dict(env_overrides(prefix))

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)

    def merge(self, other: Dict[str, Any]) -> "ClientConfig":
        """Merge with explicitly provided values (other takes precedence)."""
        data = self.to_dict()
        data.update(other)
        return type(self).from_dict(data)


def _parse_env_value(kind: type, raw: str) -> Any:
    if kind is bool:
        return raw.strip().lower() in ("1", "true", "yes", "on")
    if kind is dict:
        # e.g. GATEWAY_ADMIN_HEADERS='{"Admin-Token": "..."}'
        value = json.loads(raw)
        if not isinstance(value, dict):
            raise ValueError(f"Expected a JSON object, got {type(value).__name__}")
        return value
    return kind(raw)


def env_overrides(prefix: str = DEFAULT_ENV_PREFIX) -> Dict[str, Any]:
    """Read the config values set in the environment.

    Values are parsed to the type of the field's default; unparsable
    values are logged and skipped.
    """
    defaults = ClientConfig()
    values: Dict[str, Any] = {}

    for f in dataclasses.fields(ClientConfig):
        env_key = prefix + f.name.upper()
        raw = os.environ.get(env_key)
        if raw is None:
            continue

        try:
            values[f.name] = _parse_env_value(type(getattr(defaults, f.name)), raw)
        except ValueError:
            logger.warning(f"Ignoring invalid value for {env_key}: {raw!r}")

    return values


def load_config(
    path: Optional[str] = None,
    env_prefix: str = DEFAULT_ENV_PREFIX,
) -> ClientConfig:
    """Load configuration from multiple sources.

    Priority (highest to lowest):
    1. Environment variables
    2. Config file (if provided)
    3. Defaults
    """
    config = ClientConfig()

    # Load from file if provided
    if path:
        path_obj = Path(path)
        if path_obj.exists():
            if path.endswith(".json"):
                config = ClientConfig.from_json(path)
            elif path.endswith((".yaml", ".yml")):
                config = ClientConfig.from_yaml(path)
            else:
                logger.warning(f"Unknown config format: {path}")
        else:
            logger.warning(f"Config file not found: {path}")

    # Override with environment variables
    return config.merge(env_overrides(env_prefix))


__all__ = [
    "ClientConfig",
    "DEFAULT_ENV_PREFIX",
    "env_overrides",
    "load_config",
]
