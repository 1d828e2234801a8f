"""Callback subscriptions delivering full snapshots."""

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SnapshotPublisher(Generic[T]):
    """Fan out immutable snapshots to subscribers.

    Every emission replaces the previous one; subscribers never receive diffs.
    """

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T], None]] = []
        self._latest: T | None = None

    @property
    def latest(self) -> T | None:
        """Return the last published snapshot, if any."""
        return self._latest

    def subscribe(
        self, callback: Callable[[T], None], replay: bool = True
    ) -> Callable[[], None]:
        """Register a callback and return a function that unregisters it."""
        self._subscribers.append(callback)
        if replay and self._latest is not None:
            self._deliver(callback, self._latest)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def publish(self, snapshot: T) -> None:
        """Store a snapshot and hand it to every subscriber."""
        self._latest = snapshot
        for callback in list(self._subscribers):
            self._deliver(callback, snapshot)

    def _deliver(self, callback: Callable[[T], None], snapshot: T) -> None:
        try:
            callback(snapshot)
        except Exception:
            logger.exception("Snapshot subscriber failed")
