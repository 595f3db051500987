"""Typed failures raised by the service layer.

Routers never translate these by hand; ``main`` registers a single handler for
``TaskboardError`` that turns them into JSON responses.
"""
from typing import Optional


class TaskboardError(Exception):
    """Base class for domain errors surfaced to API callers."""
    status_code = 400
    headers: Optional[dict] = None

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"detail": self.message}


class NotFoundError(TaskboardError):
    """Entity missing, or resolved but scoped to another project/task/user."""
    status_code = 404


class ConflictError(TaskboardError):
    """Operation conflicts with current state (e.g. status still has tasks)."""
    status_code = 409


class ValidationError(TaskboardError):
    """Domain validation failure on a single request field."""
    status_code = 422

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        body = super().to_dict()
        if self.field:
            body["field"] = self.field
        return body


class PermissionDeniedError(TaskboardError):
    status_code = 403


class AuthenticationError(TaskboardError):
    """Credentials did not match any account."""
    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}
