"""Supabase repository for database metadata."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from photo_share.adapters.supabase_errors import translate_errors
from photo_share.domain.models import CollectionName, SchemaInfo
from photo_share.services.stats import StatsRepository

TABLES = {
    CollectionName.USER: "users",
    CollectionName.PHOTO: "photos",
    CollectionName.SCHEMA_INFO: "schema_info",
}


@dataclass
class SupabaseStatsRepository(StatsRepository):
    """Supabase implementation for counts and schema info."""

    client: Client

    def count_documents(self, collection: CollectionName) -> int:
        """Return an exact row count for the collection's table."""
        with translate_errors():
            response = (
                self.client.table(TABLES[collection])
                .select("id", count="exact")
                .limit(1)
                .execute()
            )
        return max(response.count or 0, 0)

    def get_schema_info(self) -> SchemaInfo | None:
        """Return the single schema_info row."""
        with translate_errors():
            response = (
                self.client.table("schema_info")
                .select("id, version, load_date_time")
                .limit(1)
                .execute()
            )
        if not response.data:
            return None
        row = response.data[0]
        loaded_raw = row.get("load_date_time")
        return SchemaInfo(
            id=UUID(str(row["id"])),
            version=str(row.get("version") or ""),
            load_date_time=(
                datetime.fromisoformat(loaded_raw)
                if isinstance(loaded_raw, str) and loaded_raw
                else None
            ),
        )
