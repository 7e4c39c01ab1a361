from __future__ import annotations

from typing import Any, Dict, List

from fastapi import Depends

from golf_api.db import HOLES, DocumentRepository, get_database
from golf_api.ids import parse_path_id


class HoleService:
    """Read-only view of holes grouped by their course foreign key."""

    def __init__(self, repository: DocumentRepository) -> None:
        self._repository = repository

    async def holes_for_course(self, raw_course_id: str) -> List[Dict[str, Any]]:
        course_id = parse_path_id(raw_course_id)
        if course_id is None:
            return []
        return await self._repository.find_matching({"golf_course_fk": course_id})


def get_hole_service(database: Any = Depends(get_database)) -> HoleService:
    return HoleService(DocumentRepository(database[HOLES], "golf_course_fk"))


__all__ = ["HoleService", "get_hole_service"]
