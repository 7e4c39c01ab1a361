from . import courses, holes, players, welcome

__all__ = ["courses", "holes", "players", "welcome"]
