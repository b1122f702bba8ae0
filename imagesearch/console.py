"""Plain-text rendering of search events for terminal use."""

from __future__ import annotations

import sys
from typing import Any, Sequence, TextIO

from imagesearch.domain.models import ConnectionStatus, PaginationBounds
from imagesearch.services.events import NullObserver

STATUS_TEXT = {
    ConnectionStatus.CONNECTED: "Connected",
    ConnectionStatus.CONNECTING: "Connecting...",
    ConnectionStatus.DISCONNECTED: "Disconnected",
}
DETAIL_URL = "https://stock.adobe.com/{id}"


def format_result(item: dict[str, Any]) -> str:
    title = item.get("title") or "Untitled"
    creator = item.get("creator_name") or "Unknown"
    line = f"{title} by {creator}"
    downloads = item.get("nb_downloads")
    if downloads:
        line += f" | {downloads:,} downloads"
    if item.get("id") is not None:
        line += f" | {DETAIL_URL.format(id=item['id'])}"
    return line


class ConsoleObserver(NullObserver):
    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream or sys.stdout

    def _write(self, text: str) -> None:
        print(text, file=self._stream)

    def status_changed(self, status: ConnectionStatus) -> None:
        self._write(f"[backend] {STATUS_TEXT.get(status, 'Disconnected')}")

    def loading_started(self, query: str) -> None:
        self._write(f"Searching for \"{query}\"...")

    def results_ready(
        self, query: str, total_results: int, results: Sequence[dict[str, Any]]
    ) -> None:
        self._write(f"Results for \"{query}\": found {total_results:,} images")
        for index, item in enumerate(results, start=1):
            self._write(f"{index:>3}. {format_result(item)}")

    def no_results(self, query: str) -> None:
        self._write("No results found. Try a different search term.")

    def search_failed(self, message: str) -> None:
        self._write(f"Error: {message}")

    def pagination_changed(self, bounds: PaginationBounds) -> None:
        if bounds.visible:
            self._write(f"Page {bounds.page} of {bounds.total_pages}")


__all__ = ["ConsoleObserver", "STATUS_TEXT", "format_result"]
