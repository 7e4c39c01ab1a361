from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from golf_api.errors import StoreError

logger = logging.getLogger(__name__)


@contextmanager
def _store_call(collection: str, operation: str) -> Iterator[None]:
    try:
        yield
    # OverflowError: BSON encoding of an int outside int64
    except (PyMongoError, BSONError, OverflowError) as exc:
        logger.error("%s on %s failed: %s", operation, collection, exc)
        raise StoreError(str(exc)) from exc


class DocumentRepository:
    """Single-call access to one collection keyed by an integer business key."""

    def __init__(self, collection: Any, key_field: str) -> None:
        self._collection = collection
        self._key_field = key_field

    @property
    def name(self) -> str:
        return getattr(self._collection, "name", "<collection>")

    async def find_all(self) -> List[Dict[str, Any]]:
        return await self.find_matching({})

    async def find_matching(self, query: Mapping[str, Any]) -> List[Dict[str, Any]]:
        with _store_call(self.name, "find"):
            return await self._collection.find(dict(query)).to_list(length=None)

    async def find_by_key(self, key: int) -> Dict[str, Any] | None:
        with _store_call(self.name, "find_one"):
            return await self._collection.find_one({self._key_field: key})

    async def insert(self, document: Mapping[str, Any]) -> Any:
        with _store_call(self.name, "insert_one"):
            result = await self._collection.insert_one(dict(document))
        return result.inserted_id

    async def set_fields(self, key: int, fields: Mapping[str, Any]) -> int:
        """Apply ``$set`` to the first match; returns the matched count."""

        with _store_call(self.name, "update_one"):
            result = await self._collection.update_one(
                {self._key_field: key}, {"$set": dict(fields)}
            )
        return result.matched_count

    async def delete_by_key(self, key: int) -> int:
        with _store_call(self.name, "delete_one"):
            result = await self._collection.delete_one({self._key_field: key})
        return result.deleted_count


__all__ = ["DocumentRepository"]
