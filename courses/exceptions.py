"""Domain errors raised by the course and topic services.

Each error carries a user-facing `message` that has already been resolved
through the message source. Translation to HTTP statuses happens only in
`api.exceptions`.
"""
from __future__ import annotations


class DomainError(Exception):
    """Base class for business-rule and persistence errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CourseNotFound(DomainError):
    """No course matches the requested id."""


class InvalidInput(DomainError):
    """A business rule rejected the input before any write."""


class PersistenceFailure(DomainError):
    """The store rejected a write.

    The entity context is kept for server-side diagnostics only; callers
    receive `message`, never `root_cause`.
    """

    def __init__(
        self,
        message: str,
        entity_type: str,
        entity_id: int | None,
        entity_name: str | None,
        operation: str,
        root_cause: str,
    ):
        super().__init__(message)
        self.entity_type = entity_type
        self.entity_id = entity_id
        self.entity_name = entity_name
        self.operation = operation
        self.root_cause = root_cause

    @classmethod
    def wrap(cls, message: str, entity_type: str, instance, operation: str, exc: BaseException) -> "PersistenceFailure":
        cause = exc.__cause__ or exc
        return cls(
            message,
            entity_type=entity_type,
            entity_id=getattr(instance, "pk", None),
            entity_name=getattr(instance, "name", None),
            operation=operation,
            root_cause=str(cause) or cause.__class__.__name__,
        )
