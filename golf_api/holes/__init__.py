from .service import HoleService, get_hole_service

__all__ = ["HoleService", "get_hole_service"]
