"""Transport - Request/response exchange with the admin API.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
import json
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

from roadgateway_admin.projection.projector import to_map
from roadgateway_admin.utils.config import ClientConfig
from roadgateway_admin.utils.helpers import normalize_base_url

logger = logging.getLogger(__name__)

CONTENT_TYPE = "Content-Type"
APPLICATION_JSON = "application/json"


class ErrorResponse(Exception):
    """Raised when the admin API answers outside the 2xx range.

    Carries the response along with the optional ``message`` and
    ``error`` fields of the gateway's error body.
    """

    def __init__(
        self,
        response: httpx.Response,
        message: str = "",
        error: str = "",
    ):
        self.response = response
        self.status_code = response.status_code
        self.message = message
        self.error = error
        self.method, self.url = _request_line(response)
        super().__init__(response, message, error)

    def __str__(self) -> str:
        return (
            f"{self.method} {self.url}: {self.status_code} "
            f"{self.message} {self.error}"
        )


class NotFoundError(ErrorResponse):
    """The requested resource does not exist (404)."""
    pass


class ConflictError(ErrorResponse):
    """The resource being created already exists (409)."""
    pass


def _request_line(response: httpx.Response) -> Tuple[str, str]:
    try:
        request = response.request
    except RuntimeError:
        return "", ""
    return request.method, str(request.url)


def _error_fields(response: httpx.Response) -> Tuple[str, str]:
    try:
        data = response.json()
    except ValueError:
        return "", ""

    if not isinstance(data, dict):
        return "", ""

    message = data.get("message")
    error = data.get("error")
    return (
        message if isinstance(message, str) else "",
        error if isinstance(error, str) else "",
    )


def check_response(response: httpx.Response) -> None:
    """Raise the error matching a non-2xx response."""
    if 200 <= response.status_code <= 299:
        return

    message, error = _error_fields(response)

    if response.status_code == 404:
        raise NotFoundError(response, message, error)
    if response.status_code == 409:
        raise ConflictError(response, message, error)
    raise ErrorResponse(response, message, error)


@dataclass
class TransportResult:
    """Result of one admin API exchange."""

    status_code: int
    body: Any = None
    raw: bytes = b""
    response: Optional[httpx.Response] = None


class Transport:
    """HTTP transport for the admin API.

    Resolves resource paths against the base URL, encodes request
    bodies as JSON and turns non-2xx responses into errors.

    Exchange:
    ┌────────────────────────────────────────────────────────────┐
    │                        Transport                            │
    ├────────────────────────────────────────────────────────────┤
    │  new_request ──▶ httpx.Client.send ──▶ check_response      │
    │       │                                      │              │
    │   JSON body                            JSON decode          │
    │   query params                         TransportResult      │
    └────────────────────────────────────────────────────────────┘
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.config = config or ClientConfig()
        self.base_url = httpx.URL(normalize_base_url(self.config.base_url))
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(
            timeout=httpx.Timeout(
                self.config.read_timeout,
                connect=self.config.connect_timeout,
                write=self.config.write_timeout,
            ),
            verify=self.config.verify_ssl,
        )

    def resolve(self, path: str) -> httpx.URL:
        """Resolve a relative resource path against the base URL."""
        if not path:
            return self.base_url
        return self.base_url.join(path)

    def new_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Request:
        """Build a request for a resource path.

        A body, if given, is JSON encoded; dataclass bodies are projected
        to their wire map first. Without a body no content is sent.
        """
        headers: Dict[str, str] = {
            "Accept": APPLICATION_JSON,
            "User-Agent": self.config.user_agent,
        }
        headers.update(self.config.headers)

        content: Optional[bytes] = None
        if body is not None:
            if dataclasses.is_dataclass(body) and not isinstance(body, type):
                body = to_map(body)
            content = json.dumps(body).encode("utf-8")
            headers[CONTENT_TYPE] = APPLICATION_JSON

        return httpx.Request(
            method.upper(),
            self.resolve(path),
            params=dict(params) if params else None,
            headers=headers,
            content=content,
        )

    def do(self, request: httpx.Request) -> TransportResult:
        """Execute a request and decode its JSON response.

        Raises:
            NotFoundError: on 404
            ConflictError: on 409
            ErrorResponse: on any other non-2xx status
        """
        start_time = time.perf_counter()
        if self.config.log_requests:
            self._log_request(request)

        response = self._client.send(request)

        duration_ms = (time.perf_counter() - start_time) * 1000
        if self.config.log_requests:
            logger.debug(f"<-- {response.status_code} ({duration_ms:.2f}ms)")

        if not response.is_success:
            logger.warning(
                f"{request.method} {request.url} returned {response.status_code}"
            )
        check_response(response)

        raw = response.content
        body = None
        if raw:
            try:
                body = response.json()
            except ValueError:
                logger.debug(f"Response from {request.url} is not JSON")

        return TransportResult(
            status_code=response.status_code,
            body=body,
            raw=raw,
            response=response,
        )

    def send(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> TransportResult:
        """Build and execute a request in one step."""
        return self.do(self.new_request(method, path, body, params))

    def _log_request(self, request: httpx.Request) -> None:
        log_parts = [f"--> {request.method} {request.url}"]

        if self.config.log_bodies and request.content:
            limit = self.config.max_body_log_size
            text = request.content[:limit].decode("utf-8", errors="replace")
            log_parts.append(f"body={text}")

        logger.debug(" ".join(log_parts))

    def close(self) -> None:
        """Close the underlying HTTP client if owned."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


__all__ = [
    "ErrorResponse",
    "NotFoundError",
    "ConflictError",
    "check_response",
    "TransportResult",
    "Transport",
]
