from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from golf_api.db.documents import ErrorMessage, HoleDocument
from golf_api.db.encoding import encode_documents
from golf_api.holes import HoleService, get_hole_service

router = APIRouter(
    prefix="/api",
    tags=["holes"],
    responses={500: {"model": ErrorMessage}},
)


@router.get("/holes/{course_id}", response_model=List[HoleDocument])
async def holes_for_course(
    course_id: str, service: HoleService = Depends(get_hole_service)
) -> JSONResponse:
    return JSONResponse(encode_documents(await service.holes_for_course(course_id)))


__all__ = ["router"]
