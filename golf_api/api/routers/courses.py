from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from golf_api.courses import CourseCreate, CourseService, get_course_service
from golf_api.db.documents import (
    CourseDocument,
    ErrorMessage,
    InsertResult,
    StatusMessage,
)
from golf_api.db.encoding import encode_document, encode_documents
from golf_api.errors import CourseNotFound

router = APIRouter(
    prefix="/api",
    tags=["courses"],
    responses={500: {"model": ErrorMessage}},
)

_NOT_FOUND = {404: {"model": StatusMessage}}


def _not_found(exc: CourseNotFound) -> JSONResponse:
    return JSONResponse({"status": exc.message}, status_code=status.HTTP_404_NOT_FOUND)


@router.get("/courses", response_model=List[CourseDocument])
async def list_courses(
    service: CourseService = Depends(get_course_service),
) -> JSONResponse:
    return JSONResponse(encode_documents(await service.list_courses()))


@router.get("/course/{course_id}", response_model=CourseDocument, responses=_NOT_FOUND)
async def get_course(
    course_id: str, service: CourseService = Depends(get_course_service)
) -> JSONResponse:
    try:
        course = await service.get_course(course_id)
    except CourseNotFound as exc:
        return _not_found(exc)
    return JSONResponse(encode_document(course))


@router.post(
    "/courses", response_model=InsertResult, status_code=status.HTTP_201_CREATED
)
async def create_course(
    payload: CourseCreate, service: CourseService = Depends(get_course_service)
) -> InsertResult:
    inserted_id = await service.create_course(payload)
    return InsertResult(_id=inserted_id)


@router.put("/courses/{course_id}", response_model=StatusMessage, responses=_NOT_FOUND)
async def update_course(
    course_id: str,
    body: Dict[str, Any] = Body(...),
    service: CourseService = Depends(get_course_service),
) -> Any:
    try:
        message = await service.update_course(course_id, body)
    except CourseNotFound as exc:
        return _not_found(exc)
    return StatusMessage(status=message)


@router.delete(
    "/courses/{course_id}", response_model=StatusMessage, responses=_NOT_FOUND
)
async def delete_course(
    course_id: str, service: CourseService = Depends(get_course_service)
) -> Any:
    try:
        message = await service.delete_course(course_id)
    except CourseNotFound as exc:
        return _not_found(exc)
    return StatusMessage(status=message)


__all__ = ["router"]
