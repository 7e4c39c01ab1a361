from __future__ import annotations

from typing import Any, Dict, List, Mapping

from fastapi import Depends

from golf_api.db import PLAYERS, DocumentRepository, get_database
from golf_api.errors import PlayerNotFound
from golf_api.ids import parse_path_id

from .models import PlayerCreate


class PlayerService:
    def __init__(self, repository: DocumentRepository) -> None:
        self._repository = repository

    @staticmethod
    def _not_found(raw_id: str) -> PlayerNotFound:
        return PlayerNotFound(f"No player with id {raw_id}")

    async def list_players(self) -> List[Dict[str, Any]]:
        return await self._repository.find_all()

    async def get_player(self, raw_id: str) -> Dict[str, Any]:
        player_id = parse_path_id(raw_id)
        player = None
        if player_id is not None:
            player = await self._repository.find_by_key(player_id)
        if player is None:
            raise self._not_found(raw_id)
        return player

    async def players_for_course(self, raw_course_id: str) -> List[Dict[str, Any]]:
        """Players whose embedded course list references the course.

        An unknown course yields an empty list rather than a not-found error.
        """

        course_id = parse_path_id(raw_course_id)
        if course_id is None:
            return []
        return await self._repository.find_matching(
            {"golf_courses.golf_course_id": course_id}
        )

    async def create_player(self, player: PlayerCreate) -> str:
        inserted_id = await self._repository.insert(player.model_dump())
        return str(inserted_id)

    async def update_player(self, raw_id: str, body: Mapping[str, Any]) -> str:
        fields = {key: value for key, value in body.items() if key != "_id"}
        player_id = parse_path_id(raw_id)
        matched = 0
        if player_id is not None:
            matched = await self._repository.set_fields(player_id, fields)
        if matched == 0:
            raise self._not_found(raw_id)
        return f"Player with id {raw_id} has been updated."

    async def delete_player(self, raw_id: str) -> str:
        player_id = parse_path_id(raw_id)
        deleted = 0
        if player_id is not None:
            deleted = await self._repository.delete_by_key(player_id)
        if deleted == 0:
            raise self._not_found(raw_id)
        return f"Player with id {raw_id} has been successfully deleted."


def get_player_service(database: Any = Depends(get_database)) -> PlayerService:
    return PlayerService(DocumentRepository(database[PLAYERS], "id"))


__all__ = ["PlayerService", "get_player_service"]
