"""Backend request dispatch with ordered failover between endpoints."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

import httpx

from imagesearch.config import ClientSettings
from imagesearch.domain.models import ConnectionStatus
from imagesearch.logging import logger
from imagesearch.services.exceptions import (
    BackendError,
    ParseFailure,
    ResponseStatusFailure,
    TransportFailure,
)
from imagesearch.services.status import StatusTracker

DEFAULT_HEADERS = {"Content-Type": "application/json"}


class FailoverDispatcher:
    """Issue one logical request against a list of interchangeable backends.

    The last backend that answered successfully is tried first on the next
    call; the remaining backends follow in configuration order. Each backend
    is attempted at most once per call and never concurrently.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        settings: ClientSettings | None = None,
        *,
        endpoints: Sequence[str] | None = None,
        status: StatusTracker | None = None,
    ) -> None:
        self._client = http_client
        self._settings = settings or ClientSettings()
        configured = endpoints if endpoints is not None else self._settings.endpoints
        self._endpoints = tuple(endpoint.rstrip("/") for endpoint in configured)
        if not self._endpoints:
            raise ValueError("At least one backend endpoint is required.")
        self._active = self._endpoints[0]
        self.status = status or StatusTracker()

    @property
    def endpoints(self) -> tuple[str, ...]:
        return self._endpoints

    @property
    def active_endpoint(self) -> str:
        return self._active

    def attempt_order(self) -> list[str]:
        return [self._active, *(e for e in self._endpoints if e != self._active)]

    async def request(
        self,
        path: str,
        *,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        json: Any = None,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        last_error: BackendError | None = None
        for endpoint in self.attempt_order():
            try:
                data = await self._attempt(
                    endpoint, path, method=method, headers=headers, json=json, params=params
                )
            except BackendError as exc:
                logger.warning(
                    "backend_request_failed",
                    endpoint=endpoint,
                    path=path,
                    error_type=exc.__class__.__name__,
                    error=str(exc),
                )
                last_error = exc
                continue

            if endpoint != self._active:
                logger.info("backend_switched", previous=self._active, endpoint=endpoint)
                self._active = endpoint
            self.status.set_status(ConnectionStatus.CONNECTED)
            return data

        self.status.set_status(ConnectionStatus.DISCONNECTED)
        logger.error("backend_unavailable", path=path, error=str(last_error))
        raise last_error

    async def _attempt(
        self,
        endpoint: str,
        path: str,
        *,
        method: str,
        headers: Mapping[str, str] | None,
        json: Any,
        params: Mapping[str, str] | None,
    ) -> Any:
        request_headers = httpx.Headers(DEFAULT_HEADERS)
        if headers:
            request_headers.update(headers)
        url = f"{endpoint}{path}"
        logger.debug("backend_request", method=method, url=url)
        try:
            response = await self._client.request(
                method,
                url,
                headers=request_headers,
                json=json,
                params=params,
                timeout=self._settings.timeout_seconds,
            )
        except httpx.RequestError as exc:
            raise TransportFailure(
                str(exc) or exc.__class__.__name__, endpoint=endpoint
            ) from exc

        if not response.is_success:
            raise ResponseStatusFailure(response.status_code, endpoint=endpoint)

        try:
            return response.json()
        except ValueError as exc:
            raise ParseFailure(f"Invalid JSON body: {exc}", endpoint=endpoint) from exc


__all__ = ["DEFAULT_HEADERS", "FailoverDispatcher"]
