"""Client module - Admin API client and HTTP transport."""

from roadgateway_admin.client.transport import (
    ErrorResponse,
    NotFoundError,
    ConflictError,
    check_response,
    TransportResult,
    Transport,
)
from roadgateway_admin.client.client import Client

__all__ = [
    "ErrorResponse",
    "NotFoundError",
    "ConflictError",
    "check_response",
    "TransportResult",
    "Transport",
    "Client",
]
