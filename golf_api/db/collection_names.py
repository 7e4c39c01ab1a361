"""Database and collection names, one per entity."""

DATABASE_NAME = "golf"

COURSES = "golf_course"
PLAYERS = "player"
HOLES = "holes"
