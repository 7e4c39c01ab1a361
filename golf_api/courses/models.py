from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class CourseCreate(BaseModel):
    golf_course_id: int | None = None
    location: Any = None
    size: Any = None


__all__ = ["CourseCreate"]
