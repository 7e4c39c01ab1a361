from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class StoredDocument(BaseModel):
    """Response schema of a schemaless stored document.

    Routes return the stored document itself through ``encode_document``, so
    only keys present in the store appear; the fields below describe the
    usual shape for the API docs.
    """

    object_id: str = Field(alias="_id")

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class CourseDocument(StoredDocument):
    golf_course_id: Any = None
    location: Any = None
    size: Any = None


class PlayerDocument(StoredDocument):
    id: Any = None
    name: Any = None
    handicap: Any = None
    golf_courses: Any = None


class HoleDocument(StoredDocument):
    golf_course_fk: Any = None


class InsertResult(BaseModel):
    inserted_id: str = Field(alias="_id")

    model_config = ConfigDict(populate_by_name=True)


class StatusMessage(BaseModel):
    status: str


class ErrorMessage(BaseModel):
    error: str


__all__ = [
    "StoredDocument",
    "CourseDocument",
    "PlayerDocument",
    "HoleDocument",
    "InsertResult",
    "StatusMessage",
    "ErrorMessage",
]
