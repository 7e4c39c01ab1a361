from __future__ import annotations


class DocumentNotFound(Exception):
    """No stored document matched the requested business key."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CourseNotFound(DocumentNotFound):
    pass


class PlayerNotFound(DocumentNotFound):
    pass


class StoreError(Exception):
    """The document store rejected or failed an operation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


__all__ = ["DocumentNotFound", "CourseNotFound", "PlayerNotFound", "StoreError"]
