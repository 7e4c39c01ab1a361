from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel


class PlayerCreate(BaseModel):
    id: int | None = None
    name: Any = None
    handicap: float | None = None
    # each entry references a course by ``golf_course_id``
    golf_courses: List[Dict[str, Any]] | None = None


__all__ = ["PlayerCreate"]
