from __future__ import annotations

from typing import Any, Dict, List, Mapping

from fastapi import Depends

from golf_api.db import COURSES, DocumentRepository, get_database
from golf_api.errors import CourseNotFound
from golf_api.ids import parse_path_id

from .models import CourseCreate


class CourseService:
    def __init__(self, repository: DocumentRepository) -> None:
        self._repository = repository

    @staticmethod
    def _not_found(raw_id: str) -> CourseNotFound:
        return CourseNotFound(f"No golf course with id {raw_id}")

    async def list_courses(self) -> List[Dict[str, Any]]:
        return await self._repository.find_all()

    async def get_course(self, raw_id: str) -> Dict[str, Any]:
        course_id = parse_path_id(raw_id)
        course = None
        if course_id is not None:
            course = await self._repository.find_by_key(course_id)
        if course is None:
            raise self._not_found(raw_id)
        return course

    async def create_course(self, course: CourseCreate) -> str:
        inserted_id = await self._repository.insert(course.model_dump())
        return str(inserted_id)

    async def update_course(self, raw_id: str, body: Mapping[str, Any]) -> str:
        # the store id is immutable
        fields = {key: value for key, value in body.items() if key != "_id"}
        course_id = parse_path_id(raw_id)
        matched = 0
        if course_id is not None:
            matched = await self._repository.set_fields(course_id, fields)
        if matched == 0:
            raise self._not_found(raw_id)
        return f"Golf course with id {raw_id} has been updated."

    async def delete_course(self, raw_id: str) -> str:
        course_id = parse_path_id(raw_id)
        deleted = 0
        if course_id is not None:
            deleted = await self._repository.delete_by_key(course_id)
        if deleted == 0:
            raise self._not_found(raw_id)
        return f"Golf course with id {raw_id} has been successfully deleted."


def get_course_service(database: Any = Depends(get_database)) -> CourseService:
    return CourseService(DocumentRepository(database[COURSES], "golf_course_id"))


__all__ = ["CourseService", "get_course_service"]
