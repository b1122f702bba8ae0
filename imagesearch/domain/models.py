"""Models shared by the dispatcher, the orchestrator and observers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_LIMIT = 20
DEFAULT_CONTENT_TYPE = "any"
DEFAULT_ORDER = "relevance"


class ConnectionStatus(str, Enum):
    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class SearchOptions(BaseModel):
    """Request options for one search call; unknown keys are dropped."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)

    limit: int = Field(default=DEFAULT_LIMIT, ge=1)
    offset: int = Field(default=0, ge=0)
    content_type: str = Field(default=DEFAULT_CONTENT_TYPE, alias="contentType")
    order: str = DEFAULT_ORDER

    def to_params(self, query: str) -> dict[str, str]:
        return {
            "q": query,
            "limit": str(self.limit),
            "offset": str(self.offset),
            "order": self.order,
            "contentType": self.content_type,
        }


@dataclass(slots=True)
class SearchState:
    query: str = ""
    page: int = 1
    results_per_page: int = DEFAULT_LIMIT
    total_results: int = 0
    content_type: str = DEFAULT_CONTENT_TYPE
    sort_order: str = DEFAULT_ORDER

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.results_per_page

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_results / self.results_per_page)

    def options(self) -> SearchOptions:
        return SearchOptions(
            limit=self.results_per_page,
            offset=self.offset,
            content_type=self.content_type,
            order=self.sort_order,
        )


@dataclass(slots=True)
class SearchResults:
    """Read-only view over a search payload; records are kept verbatim."""

    results: list[dict[str, Any]] = field(default_factory=list)
    total: int | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> "SearchResults":
        if not isinstance(payload, dict):
            return cls()
        results = payload.get("results") or []
        total = payload.get("total") or None
        return cls(results=list(results), total=total)

    @property
    def total_count(self) -> int:
        return self.total if self.total else len(self.results)


@dataclass(frozen=True, slots=True)
class PaginationBounds:
    page: int
    total_pages: int

    @property
    def visible(self) -> bool:
        return self.total_pages > 1

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def unhealthy(message: str) -> dict[str, str]:
    return {"status": "unhealthy", "error": message}


__all__ = [
    "ConnectionStatus",
    "PaginationBounds",
    "SearchOptions",
    "SearchResults",
    "SearchState",
    "unhealthy",
]
