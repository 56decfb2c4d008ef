"""Utils module - Utility functions."""

from roadgateway_admin.utils.config import (
    ClientConfig,
    env_overrides,
    load_config,
)
from roadgateway_admin.utils.helpers import (
    normalize_base_url,
    quote_segment,
    join_path,
)

__all__ = [
    "ClientConfig",
    "env_overrides",
    "load_config",
    "normalize_base_url",
    "quote_segment",
    "join_path",
]
