"""Golf course documents."""

from .models import CourseCreate
from .service import CourseService, get_course_service

__all__ = ["CourseCreate", "CourseService", "get_course_service"]
