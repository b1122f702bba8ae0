from __future__ import annotations

import io

from imagesearch.console import ConsoleObserver, format_result
from imagesearch.domain.models import ConnectionStatus, PaginationBounds


def test_format_result_uses_placeholders():
    assert format_result({"id": 42}) == "Untitled by Unknown | https://stock.adobe.com/42"


def test_format_result_includes_downloads():
    line = format_result(
        {"id": 1, "title": "Sunset", "creator_name": "Ana", "nb_downloads": 12345}
    )
    assert line == "Sunset by Ana | 12,345 downloads | https://stock.adobe.com/1"


def test_console_observer_renders_events():
    stream = io.StringIO()
    observer = ConsoleObserver(stream)

    observer.status_changed(ConnectionStatus.CONNECTING)
    observer.results_ready("cats", 1500, [{"id": 1, "title": "Cat"}])
    observer.pagination_changed(PaginationBounds(page=2, total_pages=75))
    observer.pagination_changed(PaginationBounds(page=1, total_pages=1))
    observer.no_results("dogs")
    observer.search_failed("HTTP 500")

    lines = stream.getvalue().splitlines()
    assert lines == [
        "[backend] Connecting...",
        'Results for "cats": found 1,500 images',
        "  1. Cat by Unknown | https://stock.adobe.com/1",
        "Page 2 of 75",
        "No results found. Try a different search term.",
        "Error: HTTP 500",
    ]
