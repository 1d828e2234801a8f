"""Feeding persistence service with a live snapshot feed."""

from collections.abc import Callable
from dataclasses import dataclass, field, replace
from typing import Protocol

from feeding_tracker.domain.feedings import Feeding
from feeding_tracker.services.subscriptions import SnapshotPublisher

FeedingSnapshot = tuple[Feeding, ...]


class FeedingRepository(Protocol):
    """Persistence interface for feedings."""

    def get_feeding(self, feeding_id: int) -> Feeding | None:
        """Return a feeding by id."""

    def save_feeding(self, feeding: Feeding) -> int:
        """Insert a feeding without an id or update an existing one; return its id."""

    def delete_feeding(self, feeding_id: int) -> None:
        """Delete a feeding by id."""

    def list_feedings(self) -> list[Feeding]:
        """Return every stored feeding."""


@dataclass
class FeedingService:
    """Service for reading and writing feedings."""

    repository: FeedingRepository
    publisher: SnapshotPublisher[FeedingSnapshot] = field(
        default_factory=SnapshotPublisher
    )

    def get_feeding(self, feeding_id: int) -> Feeding | None:
        """Return a feeding by id."""
        return self.repository.get_feeding(feeding_id)

    def save_feeding(self, feeding: Feeding) -> Feeding:
        """Persist a feeding and return it with its assigned id."""
        feeding_id = self.repository.save_feeding(feeding)
        self.refresh()
        return replace(feeding, id=feeding_id)

    def delete_feeding(self, feeding_id: int) -> bool:
        """Delete a feeding; return False when it did not exist."""
        if self.repository.get_feeding(feeding_id) is None:
            return False
        self.repository.delete_feeding(feeding_id)
        self.refresh()
        return True

    def list_feedings(self) -> FeedingSnapshot:
        """Return the current feedings as an immutable snapshot."""
        return tuple(self.repository.list_feedings())

    def refresh(self) -> FeedingSnapshot:
        """Re-read all feedings and publish them to subscribers."""
        snapshot = self.list_feedings()
        self.publisher.publish(snapshot)
        return snapshot

    def subscribe(
        self, callback: Callable[[FeedingSnapshot], None]
    ) -> Callable[[], None]:
        """Receive every new snapshot; returns an unsubscribe function."""
        return self.publisher.subscribe(callback)
