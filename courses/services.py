"""Course business rules and persistence orchestration.

Validation runs before any write and raises `InvalidInput`; store errors
are wrapped into `PersistenceFailure` with the entity context. The name
check is read-then-write: two concurrent creates with the same name can
both pass it, and the losing write surfaces as a `PersistenceFailure`
from the `UNIQUE` constraint.
"""
from __future__ import annotations

import logging

from django.db import DatabaseError, transaction

from topics.services import TopicService
from .dto import ApiResponse, CourseDto
from .exceptions import CourseNotFound, InvalidInput, PersistenceFailure
from .messages import MessageSource, get_message_source
from .models import MODALITIES, Course
from .pagination import Page, paginate

logger = logging.getLogger(__name__)

_MODALITIES_LOWER = {m.lower() for m in MODALITIES}


class CourseService:
    def __init__(self, messages: MessageSource | None = None, topics: TopicService | None = None):
        self.messages = messages or get_message_source()
        self.topics = topics or TopicService(messages=self.messages)

    def save_course(self, course: Course) -> ApiResponse[CourseDto]:
        """Persist a new course after the name and modality checks."""
        self._validate_name_not_exist(course.name)
        self._validate_modality(course.modality)
        self._persist(course, "Save", "curso.save.error")
        logger.info("Course %s saved with id %s", course.name, course.pk)
        message = self.messages.resolve("curso.save.success", [course.name])
        return ApiResponse(True, message, CourseDto.for_create(course))

    def get_courses(self, page: int, size: int) -> ApiResponse[Page[CourseDto]]:
        courses = paginate(Course.objects.all(), page, size)
        topic_ids = self.topics.find_ids_by_course_ids(c.pk for c in courses.content)
        dtos = courses.map(lambda c: CourseDto.from_course(c, topic_ids.get(c.pk, ())))
        return ApiResponse(True, self.messages.resolve("curso.getAll.success"), dtos)

    def get_course(self, course_id: int | None) -> ApiResponse[CourseDto]:
        course = self.find_course(course_id)
        message = self.messages.resolve("curso.get.success", [course.name])
        return ApiResponse(True, message, self._build_dto(course))

    def edit_modality(self, course_id: int, new_modality: str) -> ApiResponse[CourseDto]:
        """Overwrite only the modality.

        The value is stored exactly as supplied; it is not checked against
        the allowed modalities on this path.
        """
        course = self.find_course(course_id)
        course.modality = new_modality
        self._persist(course, "Update", "curso.update.error", update_fields=["modality", "updated_at"])
        logger.info("Course %s modality changed to %s", course.pk, new_modality)
        message = self.messages.resolve("curso.update.success", [course.name])
        return ApiResponse(True, message, self._build_dto(course))

    def edit_course(self, dto: CourseDto) -> ApiResponse[CourseDto]:
        """Replace name, modality and end date from the DTO.

        Replace, not merge: a missing string is written as "" and a missing
        date as null. Neither the modality nor the name uniqueness is
        re-validated here.
        """
        course = self.find_course(dto.id)
        course.name = dto.name if dto.name is not None else ""
        course.modality = dto.modality if dto.modality is not None else ""
        course.end_date = dto.end_date
        self._persist(course, "Update", "curso.update.error")
        logger.info("Course %s replaced", course.pk)
        message = self.messages.resolve("curso.update.success", [course.name])
        return ApiResponse(True, message, self._build_dto(course))

    def find_course(self, course_id: int | None) -> Course:
        if course_id is None:
            raise InvalidInput(self.messages.resolve("curso.validate.id.null"))
        course = Course.objects.filter(pk=course_id).first()
        if course is None:
            raise CourseNotFound(self.messages.resolve("curso.validate.id", [course_id]))
        return course

    def _build_dto(self, course: Course) -> CourseDto:
        return CourseDto.from_course(course, (t.pk for t in self.topics.find_by_course_id(course.pk)))

    def _persist(self, course: Course, operation: str, error_key: str, **save_kwargs) -> None:
        try:
            with transaction.atomic():
                course.save(**save_kwargs)
        except DatabaseError as exc:
            message = self.messages.resolve(error_key, [course.name])
            raise PersistenceFailure.wrap(message, "Curso", course, operation, exc) from exc

    def _validate_name_not_exist(self, name: str) -> None:
        if Course.objects.filter(name__iexact=name).exists():
            raise InvalidInput(self.messages.resolve("curso.validate.name", [name]))

    def _validate_modality(self, modality: str | None) -> None:
        if modality is None or not modality.strip():
            raise InvalidInput(self.messages.resolve("curso.validate.modality.empty"))
        if modality.lower() not in _MODALITIES_LOWER:
            raise InvalidInput(self.messages.resolve("curso.validate.modality.error", [modality]))
