"""Notifications emitted to whatever renders search state."""

from __future__ import annotations

from typing import Any, Protocol, Sequence

from imagesearch.domain.models import ConnectionStatus, PaginationBounds
from imagesearch.logging import logger


class SearchObserver(Protocol):
    def status_changed(self, status: ConnectionStatus) -> None: ...

    def loading_started(self, query: str) -> None: ...

    def results_ready(
        self, query: str, total_results: int, results: Sequence[dict[str, Any]]
    ) -> None: ...

    def no_results(self, query: str) -> None: ...

    def search_failed(self, message: str) -> None: ...

    def pagination_changed(self, bounds: PaginationBounds) -> None: ...


class NullObserver:
    """Observer that ignores every event; subclass and override what you need."""

    def status_changed(self, status: ConnectionStatus) -> None:
        return None

    def loading_started(self, query: str) -> None:
        return None

    def results_ready(
        self, query: str, total_results: int, results: Sequence[dict[str, Any]]
    ) -> None:
        return None

    def no_results(self, query: str) -> None:
        return None

    def search_failed(self, message: str) -> None:
        return None

    def pagination_changed(self, bounds: PaginationBounds) -> None:
        return None


class LoggingObserver(NullObserver):
    def status_changed(self, status: ConnectionStatus) -> None:
        logger.info("connection_status_changed", status=status.value)

    def results_ready(
        self, query: str, total_results: int, results: Sequence[dict[str, Any]]
    ) -> None:
        logger.info(
            "search_results",
            query=query,
            total_results=total_results,
            returned=len(results),
        )

    def no_results(self, query: str) -> None:
        logger.info("search_no_results", query=query)

    def search_failed(self, message: str) -> None:
        logger.warning("search_failed", error=message)


__all__ = ["LoggingObserver", "NullObserver", "SearchObserver"]
