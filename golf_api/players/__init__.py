from .models import PlayerCreate
from .service import PlayerService, get_player_service

__all__ = ["PlayerCreate", "PlayerService", "get_player_service"]
