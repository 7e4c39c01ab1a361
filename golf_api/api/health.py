from typing import Any, Dict

from fastapi import Request


async def health(request: Request) -> Dict[str, Any]:
    settings = request.app.state.settings
    return {
        "status": "ok",
        "version": settings.build_version,
        "git": settings.git_sha,
    }
