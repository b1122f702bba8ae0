"""Shared pytest fixtures for backend-facing service tests."""

from __future__ import annotations

from typing import Any, Callable

import httpx
import pytest

from imagesearch.config import ClientSettings
from imagesearch.services.events import NullObserver

PRIMARY = "https://primary.example"
BACKUP = "https://backup.example"


class RecordingObserver(NullObserver):
    def __init__(self) -> None:
        self.events: list[tuple[str, Any]] = []

    def status_changed(self, status):
        self.events.append(("status", status))

    def loading_started(self, query):
        self.events.append(("loading", query))

    def results_ready(self, query, total_results, results):
        self.events.append(("results", (query, total_results, list(results))))

    def no_results(self, query):
        self.events.append(("no_results", query))

    def search_failed(self, message):
        self.events.append(("error", message))

    def pagination_changed(self, bounds):
        self.events.append(("pagination", bounds))

    def of(self, kind: str) -> list[Any]:
        return [payload for name, payload in self.events if name == kind]


def backend_router(
    routes: dict[str, Callable[[httpx.Request], httpx.Response]],
    calls: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Dispatch each request to the handler registered for its host."""

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        return routes[request.url.host](request)

    return httpx.MockTransport(handler)


def refuse(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


def respond(payload: Any, status_code: int = 200) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json=payload)

    return handler


@pytest.fixture
def settings() -> ClientSettings:
    return ClientSettings(primary_backend=PRIMARY, backup_backend=BACKUP, results_per_page=20)


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()
