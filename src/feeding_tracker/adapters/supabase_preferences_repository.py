"""Supabase repository for preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from feeding_tracker.domain.feedings import Preferences
from feeding_tracker.domain.units import UnitOfMeasurement
from feeding_tracker.services.preferences import PreferencesRepository

# single-user app: one preferences row
_ROW_ID = 1


@dataclass
class SupabasePreferencesRepository(PreferencesRepository):
    """Supabase implementation for preferences."""

    client: Client
    table: str = "preferences"

    def get_preferences(self) -> Preferences | None:
        """Return the stored preferences row."""
        response = (
            self.client.table(self.table)
            .select("display_unit, goal_quantity, goal_unit")
            .eq("id", _ROW_ID)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return Preferences(
            display_unit=UnitOfMeasurement[str(row["display_unit"])],
            goal_quantity=float(row.get("goal_quantity") or 0.0),
            goal_unit=UnitOfMeasurement[str(row["goal_unit"])],
        )

    def save_preferences(self, preferences: Preferences) -> None:
        """Upsert the preferences row."""
        self.client.table(self.table).upsert(
            {
                "id": _ROW_ID,
                "display_unit": preferences.display_unit.name,
                "goal_quantity": preferences.goal_quantity,
                "goal_unit": preferences.goal_unit.name,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
