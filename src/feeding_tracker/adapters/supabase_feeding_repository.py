"""Supabase repository for feedings."""

import logging
from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from feeding_tracker.domain.feedings import Feeding, wall_clock
from feeding_tracker.domain.units import UnitOfMeasurement
from feeding_tracker.services.feedings import FeedingRepository

logger = logging.getLogger(__name__)

_COLUMNS = "id, timestamp, quantity, unit"


@dataclass
class SupabaseFeedingRepository(FeedingRepository):
    """Supabase implementation for feedings."""

    client: Client
    table: str = "feedings"

    def get_feeding(self, feeding_id: int) -> Feeding | None:
        """Return a feeding by id."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .eq("id", feeding_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_row(response.data[0])

    def save_feeding(self, feeding: Feeding) -> int:
        """Insert a new feeding or update an existing row; return the id."""
        payload = _to_row(feeding)
        if feeding.id is None:
            response = self.client.table(self.table).insert(payload).execute()
            if not response.data:
                raise RuntimeError("Failed to create feeding")
            return int(response.data[0]["id"])
        self.client.table(self.table).update(payload).eq("id", feeding.id).execute()
        return feeding.id

    def delete_feeding(self, feeding_id: int) -> None:
        """Delete a feeding row."""
        self.client.table(self.table).delete().eq("id", feeding_id).execute()

    def list_feedings(self) -> list[Feeding]:
        """Return all feedings ordered by timestamp."""
        response = (
            self.client.table(self.table)
            .select(_COLUMNS)
            .order("timestamp", desc=False)
            .execute()
        )
        return [_parse_row(row) for row in response.data or []]


def _to_row(feeding: Feeding) -> dict[str, object]:
    timestamp = feeding.timestamp.isoformat() if feeding.timestamp else None
    return {
        "timestamp": timestamp,
        "quantity": feeding.quantity,
        "unit": feeding.unit.name,
    }


def _parse_row(row: dict[str, object]) -> Feeding:
    return Feeding(
        id=int(row["id"]),
        timestamp=_parse_timestamp(row.get("timestamp")),
        quantity=float(row.get("quantity") or 0.0),
        unit=UnitOfMeasurement[str(row["unit"])],
    )


def _parse_timestamp(raw: object) -> datetime | None:
    if not isinstance(raw, str) or not raw:
        return None
    try:
        return wall_clock(datetime.fromisoformat(raw))
    except ValueError:
        logger.warning("Unparseable feeding timestamp", extra={"raw": raw})
        return None
