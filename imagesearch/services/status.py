"""Connection status holder that fans changes out to observers."""

from __future__ import annotations

from imagesearch.domain.models import ConnectionStatus
from imagesearch.logging import logger
from imagesearch.services.events import SearchObserver


class StatusTracker:
    __slots__ = ("_current", "_observers")

    def __init__(self, initial: ConnectionStatus = ConnectionStatus.CONNECTING) -> None:
        self._current = initial
        self._observers: list[SearchObserver] = []

    @property
    def current(self) -> ConnectionStatus:
        return self._current

    def subscribe(self, observer: SearchObserver) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def unsubscribe(self, observer: SearchObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def set_status(self, status: ConnectionStatus) -> None:
        """Record ``status`` as current and notify subscribers.

        Any component may set any value; repeated values are still broadcast.
        """

        previous = self._current
        self._current = status
        logger.debug(
            "connection_status_set",
            previous=previous.value,
            status=status.value,
        )
        for observer in list(self._observers):
            observer.status_changed(status)


__all__ = ["StatusTracker"]
