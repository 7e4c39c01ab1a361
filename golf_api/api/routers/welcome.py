from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["welcome"])

WELCOME_TEXT = "Welcome to the Golf Course Database API"


@router.get("/api", response_class=PlainTextResponse)
async def welcome() -> str:
    return WELCOME_TEXT


__all__ = ["router", "WELCOME_TEXT"]
