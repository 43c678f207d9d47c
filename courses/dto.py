"""Value objects returned by the services.

Wire names (``nombre``, ``listaTemasId``...) are applied by the API
serializers; these dataclasses keep the Python names.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Generic, Iterable, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Uniform envelope for every service result."""

    success: bool
    message: str
    data: T | None = None


@dataclass(frozen=True)
class CourseDto:
    id: int | None = None
    name: str | None = None
    modality: str | None = None
    end_date: date | None = None
    # None on create; a tuple of topic ids everywhere else
    topic_ids: tuple[int, ...] | None = None

    @classmethod
    def for_create(cls, course) -> "CourseDto":
        """Freshly created courses cannot have topics yet."""
        return cls(
            id=course.pk,
            name=course.name,
            modality=course.modality,
            end_date=course.end_date,
        )

    @classmethod
    def from_course(cls, course, topic_ids: Iterable[int]) -> "CourseDto":
        return cls(
            id=course.pk,
            name=course.name,
            modality=course.modality,
            end_date=course.end_date,
            topic_ids=tuple(topic_ids),
        )
