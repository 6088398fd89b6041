"""Database metadata: schema info and collection counts."""

import asyncio
import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol

from photo_share.domain.errors import InternalError
from photo_share.domain.models import CollectionName, SchemaInfo

logger = logging.getLogger(__name__)

DEFAULT_COLLECTIONS = (
    CollectionName.USER,
    CollectionName.PHOTO,
    CollectionName.SCHEMA_INFO,
)


class StatsRepository(Protocol):
    """Persistence interface for database metadata."""

    def count_documents(self, collection: CollectionName) -> int:
        """Return the number of records in a collection."""

    def get_schema_info(self) -> SchemaInfo | None:
        """Return the schema info record, if present."""


@dataclass
class StatsService:
    """Service for the diagnostic metadata endpoints."""

    repository: StatsRepository

    def get_schema_info(self) -> SchemaInfo:
        """Return the schema info record."""
        info = self.repository.get_schema_info()
        if info is None:
            raise InternalError("Missing SchemaInfo")
        return info

    async def get_collection_counts(
        self, names: Iterable[CollectionName] = DEFAULT_COLLECTIONS
    ) -> dict[str, int]:
        """Count every collection concurrently.

        The result is all-or-nothing: the first failing count is raised and
        counts that already finished are discarded.
        """
        collections = list(dict.fromkeys(names))
        try:
            counts = await asyncio.gather(
                *(
                    asyncio.to_thread(self.repository.count_documents, collection)
                    for collection in collections
                )
            )
        except Exception:
            logger.exception(
                "Collection count failed",
                extra={"collections": [c.value for c in collections]},
            )
            raise
        return {
            collection.value: count
            for collection, count in zip(collections, counts, strict=True)
        }
