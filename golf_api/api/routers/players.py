from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

from golf_api.db.documents import (
    ErrorMessage,
    InsertResult,
    PlayerDocument,
    StatusMessage,
)
from golf_api.db.encoding import encode_document, encode_documents
from golf_api.errors import PlayerNotFound
from golf_api.players import PlayerCreate, PlayerService, get_player_service

router = APIRouter(
    prefix="/api",
    tags=["players"],
    responses={500: {"model": ErrorMessage}},
)

_NOT_FOUND = {404: {"model": StatusMessage}}


def _not_found(exc: PlayerNotFound) -> JSONResponse:
    return JSONResponse({"status": exc.message}, status_code=status.HTTP_404_NOT_FOUND)


@router.get("/players", response_model=List[PlayerDocument])
async def list_players(
    service: PlayerService = Depends(get_player_service),
) -> JSONResponse:
    return JSONResponse(encode_documents(await service.list_players()))


@router.get("/player/{player_id}", response_model=PlayerDocument, responses=_NOT_FOUND)
async def get_player(
    player_id: str, service: PlayerService = Depends(get_player_service)
) -> JSONResponse:
    try:
        player = await service.get_player(player_id)
    except PlayerNotFound as exc:
        return _not_found(exc)
    return JSONResponse(encode_document(player))


@router.get("/playersforcourse/{course_id}", response_model=List[PlayerDocument])
async def players_for_course(
    course_id: str, service: PlayerService = Depends(get_player_service)
) -> JSONResponse:
    return JSONResponse(encode_documents(await service.players_for_course(course_id)))


@router.post(
    "/players", response_model=InsertResult, status_code=status.HTTP_201_CREATED
)
async def create_player(
    payload: PlayerCreate, service: PlayerService = Depends(get_player_service)
) -> InsertResult:
    inserted_id = await service.create_player(payload)
    return InsertResult(_id=inserted_id)


@router.put("/players/{player_id}", response_model=StatusMessage, responses=_NOT_FOUND)
async def update_player(
    player_id: str,
    body: Dict[str, Any] = Body(...),
    service: PlayerService = Depends(get_player_service),
) -> Any:
    try:
        message = await service.update_player(player_id, body)
    except PlayerNotFound as exc:
        return _not_found(exc)
    return StatusMessage(status=message)


@router.delete(
    "/players/{player_id}", response_model=StatusMessage, responses=_NOT_FOUND
)
async def delete_player(
    player_id: str, service: PlayerService = Depends(get_player_service)
) -> Any:
    try:
        message = await service.delete_player(player_id)
    except PlayerNotFound as exc:
        return _not_found(exc)
    return StatusMessage(status=message)


__all__ = ["router"]
