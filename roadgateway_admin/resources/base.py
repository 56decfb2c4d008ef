"""Resource Base - Pages and the service base class.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import (
    TYPE_CHECKING,
    Any,
    Generic,
    Iterator,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
)

from roadgateway_admin.projection.entity import Entity
from roadgateway_admin.projection.query import encode_query, offset_from_next
from roadgateway_admin.resources.registry import ResourceKind, resource_path

if TYPE_CHECKING:
    from roadgateway_admin.client.transport import Transport, TransportResult

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


@dataclass
class Page(Generic[E]):
    """One page of a list response.

    ``next`` links to the following page and ``offset`` is its cursor;
    both are empty on the last page.
    """

    data: List[E] = field(default_factory=list)
    total: int = 0
    next: str = ""
    offset: str = ""

    @classmethod
    def from_wire(cls, body: Any, entity_type: Type[E]) -> "Page[E]":
        """Decode a list response body."""
        body = body or {}
        if not isinstance(body, Mapping):
            raise ValueError(f"Expected a JSON object, got {type(body).__name__}")

        items = body.get("data") or []
        if not isinstance(items, list):
            raise ValueError(
                f"Expected 'data' to be a list, got {type(items).__name__}"
            )

        return cls(
            data=[entity_type.from_dict(item) for item in items],
            total=int(body.get("total") or 0),
            next=body.get("next") or "",
            offset=body.get("offset") or "",
        )

    @property
    def has_next(self) -> bool:
        """Check if another page follows."""
        return bool(self.offset or self.next)


class ResourceService:
    """Base for services talking to one admin API resource kind."""

    kind: ResourceKind
    entity_type: Type[Entity]

    def __init__(self, transport: "Transport"):
        self._transport = transport

    def _path(self, *keys: Any, **params: Any) -> str:
        return resource_path(self.kind, *keys, **params)

    def _fetch(
        self,
        path: str,
        entity_type: Optional[Type[E]] = None,
    ) -> E:
        result = self._transport.send("GET", path)
        return (entity_type or self.entity_type).from_dict(result.body)

    def _fetch_page(
        self,
        path: str,
        options: Any = None,
        entity_type: Optional[Type[E]] = None,
    ) -> Page[E]:
        result = self._transport.send("GET", path, params=encode_query(options))
        return Page.from_wire(result.body, entity_type or self.entity_type)

    def _iterate(
        self,
        path: str,
        options: Any,
        options_type: type,
        entity_type: Optional[Type[E]] = None,
    ) -> Iterator[E]:
        """Yield entities across pages by threading the offset cursor."""
        options = (
            dataclasses.replace(options) if options is not None else options_type()
        )

        while True:
            page = self._fetch_page(path, options, entity_type)
            yield from page.data

            cursor = page.offset or offset_from_next(page.next)
            if not cursor or not page.data or cursor == options.offset:
                break

            logger.debug(f"Following {path} cursor {cursor}")
            options = dataclasses.replace(options, offset=cursor)

    def _send(
        self,
        method: str,
        path: str,
        body: Any = None,
    ) -> "TransportResult":
        return self._transport.send(method, path, body)


__all__ = [
    "Page",
    "ResourceService",
]
