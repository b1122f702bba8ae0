"""Domain-specific exceptions."""

from __future__ import annotations


class ServiceError(Exception):
    pass


class InvalidQueryError(ServiceError, ValueError):
    pass


class BackendError(ServiceError):
    """A single backend failed to produce a usable response."""

    def __init__(self, message: str, *, endpoint: str) -> None:
        super().__init__(message)
        self.endpoint = endpoint


class TransportFailure(BackendError):
    pass


class ResponseStatusFailure(BackendError):
    def __init__(self, status_code: int, *, endpoint: str) -> None:
        super().__init__(f"HTTP {status_code}", endpoint=endpoint)
        self.status_code = status_code


class ParseFailure(BackendError):
    pass
