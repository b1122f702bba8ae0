"""Application entrypoint."""

from __future__ import annotations

import argparse
import asyncio
from typing import Sequence

import httpx

from imagesearch.config import get_settings
from imagesearch.console import ConsoleObserver
from imagesearch.logging import configure_logging, logger
from imagesearch.services.dispatcher import FailoverDispatcher
from imagesearch.services.exceptions import ServiceError
from imagesearch.services.health import HealthProbe
from imagesearch.services.search import SearchOrchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="imagesearch", description="Search stock images.")
    parser.add_argument("query", help="Search terms.")
    parser.add_argument("--page", type=int, default=1, help="Result page to show.")
    parser.add_argument("--content-type", default=None, help="Content type filter.")
    parser.add_argument("--order", default=None, help="Sort order.")
    return parser


async def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)

    async with httpx.AsyncClient() as client:
        dispatcher = FailoverDispatcher(client, settings)
        observer = ConsoleObserver()
        orchestrator = SearchOrchestrator(dispatcher, settings, observer=observer)
        observer.status_changed(dispatcher.status.current)
        health_task = HealthProbe(dispatcher).start()

        logger.info("search_starting", endpoints=list(dispatcher.endpoints), query=args.query)
        try:
            await orchestrator.change_filter(
                content_type=args.content_type, sort_order=args.order
            )
            await orchestrator.submit_query(args.query)
            while orchestrator.state.page < args.page and orchestrator.pagination().has_next:
                await orchestrator.change_page(1)
        except ServiceError as exc:
            logger.error("search_aborted", error=str(exc))
            return 1
        finally:
            await health_task

    return 0


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
