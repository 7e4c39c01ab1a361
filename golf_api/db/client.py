from __future__ import annotations

import logging
from typing import Any

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from golf_api.config import Settings

logger = logging.getLogger(__name__)


def build_client(settings: Settings) -> AsyncMongoClient:
    return AsyncMongoClient(settings.mongodb_connection_string)


async def probe_connection(client: Any) -> bool:
    """Ping the server once and log whether it answered."""

    try:
        await client.admin.command("ping")
    except PyMongoError as exc:
        logger.error("Could not connect to MongoDB: %s", exc)
        return False
    logger.info("Successfully connected to MongoDB.")
    return True


def get_database(request: Request) -> Any:
    return request.app.state.database


__all__ = ["build_client", "probe_connection", "get_database"]
