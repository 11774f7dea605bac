# campusnet/exceptions.py
from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """Referenced user/message/post/comment/notification does not exist."""

    def __init__(self, entity: str, entity_id=None):
        detail = f"{entity} not found" if entity_id is None else f"{entity} {entity_id} not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class PermissionDeniedError(HTTPException):
    """The authenticated user may not perform this action."""

    def __init__(self, detail: str = "Insufficient permissions"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class ValidationFailedError(HTTPException):
    """Input that passed schema validation but is still unusable."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class ConflictError(HTTPException):
    """A concurrent request changed the same row first."""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
