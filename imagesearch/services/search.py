"""Search orchestration: query, filter and pagination state over the dispatcher."""

from __future__ import annotations

from typing import Any, Mapping

import httpx

from imagesearch.config import ClientSettings
from imagesearch.domain.models import (
    PaginationBounds,
    SearchOptions,
    SearchResults,
    SearchState,
)
from imagesearch.logging import logger
from imagesearch.services.dispatcher import FailoverDispatcher
from imagesearch.services.events import NullObserver, SearchObserver
from imagesearch.services.exceptions import InvalidQueryError, ServiceError

SEARCH_PATH = "/api/search"
DEFAULT_ERROR_MESSAGE = "An error occurred while searching. Please try again."


class SearchOrchestrator:
    """Owns :class:`SearchState` and turns UI intents into backend searches.

    Every search issued through a state transition carries a sequence
    number. When searches overlap, only the most recently issued one may
    update state or notify the observer; older ones resolve to ``None``.
    """

    def __init__(
        self,
        dispatcher: FailoverDispatcher,
        settings: ClientSettings | None = None,
        *,
        observer: SearchObserver | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._settings = settings or ClientSettings()
        self._observer = observer or NullObserver()
        self._sequence = 0
        self.state = SearchState(results_per_page=self._settings.results_per_page)
        dispatcher.status.subscribe(self._observer)

    async def search(
        self,
        query: str,
        options: SearchOptions | Mapping[str, Any] | None = None,
        **overrides: Any,
    ) -> Any:
        """Run one search and return the backend payload unchanged."""

        resolved = _resolve_options(options, overrides)
        params = httpx.QueryParams(resolved.to_params(query))
        return await self._dispatcher.request(f"{SEARCH_PATH}?{params}")

    async def submit_query(self, query: str) -> Any:
        normalized = (query or "").strip()
        if not normalized:
            raise InvalidQueryError("Search query must not be empty.")
        self.state.query = normalized
        self.state.page = 1
        return await self._run()

    async def change_filter(
        self,
        *,
        content_type: str | None = None,
        sort_order: str | None = None,
    ) -> Any:
        if content_type is not None:
            self.state.content_type = content_type
        if sort_order is not None:
            self.state.sort_order = sort_order
        if not self.state.query:
            return None
        return await self._run()

    async def change_page(self, delta: int) -> Any:
        # The upper bound is enforced by whoever renders the next control.
        if delta not in (-1, 1):
            raise ValueError(f"Page step must be -1 or 1, got {delta}.")
        if self.state.page + delta < 1:
            raise ValueError(f"Cannot move before page 1 from page {self.state.page}.")
        self.state.page += delta
        return await self._run()

    async def retry(self) -> Any:
        if not self.state.query:
            raise InvalidQueryError("There is no search to retry.")
        return await self._run()

    def pagination(self) -> PaginationBounds:
        return PaginationBounds(page=self.state.page, total_pages=self.state.total_pages)

    async def _run(self) -> Any:
        self._sequence += 1
        sequence = self._sequence
        query = self.state.query
        options = self.state.options()
        self._observer.loading_started(query)

        try:
            payload = await self.search(query, options)
        except ServiceError as exc:
            if self._is_superseded(sequence):
                return None
            self._observer.search_failed(str(exc) or DEFAULT_ERROR_MESSAGE)
            raise

        if self._is_superseded(sequence):
            return None
        self._apply(query, payload)
        return payload

    def _is_superseded(self, sequence: int) -> bool:
        if sequence == self._sequence:
            return False
        logger.info("search_superseded", sequence=sequence, latest=self._sequence)
        return True

    def _apply(self, query: str, payload: Any) -> None:
        view = SearchResults.from_payload(payload)
        self.state.total_results = view.total_count
        if not view.results:
            self._observer.no_results(query)
            return
        self._observer.results_ready(query, self.state.total_results, view.results)
        self._observer.pagination_changed(self.pagination())


def _resolve_options(
    options: SearchOptions | Mapping[str, Any] | None,
    overrides: Mapping[str, Any],
) -> SearchOptions:
    if isinstance(options, SearchOptions):
        data = options.model_dump(by_alias=True)
    else:
        data = dict(options or {})
    data.update(overrides)
    if "content_type" in data:
        data["contentType"] = data.pop("content_type")
    return SearchOptions.model_validate(data)


__all__ = ["DEFAULT_ERROR_MESSAGE", "SEARCH_PATH", "SearchOrchestrator"]
