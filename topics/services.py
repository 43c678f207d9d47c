"""Topic business rules and persistence orchestration."""
from __future__ import annotations

import logging
from collections import defaultdict
from typing import Iterable

from django.db import DatabaseError, transaction

from courses.dto import ApiResponse
from courses.exceptions import InvalidInput, PersistenceFailure
from courses.messages import MessageSource, get_message_source
from .dto import TopicDto
from .exceptions import TopicError
from .models import Topic

logger = logging.getLogger(__name__)


class TopicService:
    def __init__(self, messages: MessageSource | None = None):
        self.messages = messages or get_message_source()

    def save_topic(self, topic: Topic | None) -> ApiResponse[TopicDto]:
        """Validate and persist a new topic.

        The description is required here even though the column is
        nullable; a duplicate name raises `TopicError`.
        """
        self._validate_not_empty(topic)
        self._validate_name_not_exist(topic.name)
        try:
            with transaction.atomic():
                topic.save()
        except DatabaseError as exc:
            message = self.messages.resolve("tema.save.error", [topic.name])
            raise PersistenceFailure.wrap(message, "Tema", topic, "Save", exc) from exc
        logger.info("Topic %s saved with id %s (course %s)", topic.name, topic.pk, topic.course_id)
        message = self.messages.resolve("tema.save.success", [topic.name])
        return ApiResponse(True, message, TopicDto.from_topic(topic))

    def find_all(self) -> list[Topic]:
        return list(Topic.objects.all())

    def find_by_id(self, topic_id: int) -> Topic | None:
        return Topic.objects.filter(pk=topic_id).first()

    # Helpers for composition with the course service

    def find_all_by_id(self, ids: Iterable[int]) -> list[Topic]:
        return list(Topic.objects.filter(pk__in=list(ids)))

    def find_by_course_id(self, course_id: int) -> list[Topic]:
        return list(Topic.objects.filter(course_id=course_id))

    def find_names_by_course_id(self, course_id: int) -> list[str]:
        return list(Topic.objects.filter(course_id=course_id).values_list("name", flat=True))

    def find_ids_by_course_ids(self, course_ids: Iterable[int]) -> dict[int, list[int]]:
        """Map each course id to its topic ids with a single query."""
        grouped: dict[int, list[int]] = defaultdict(list)
        rows = Topic.objects.filter(course_id__in=list(course_ids)).order_by("id").values_list("course_id", "id")
        for course_id, topic_id in rows:
            grouped[course_id].append(topic_id)
        return dict(grouped)

    @staticmethod
    def extract_ids(topics: Iterable[TopicDto]) -> list[int]:
        return [dto.id for dto in topics]

    def _validate_not_empty(self, topic: Topic | None) -> None:
        if topic is None:
            raise InvalidInput(self.messages.resolve("tema.validate.null"))
        if topic.description is None or not topic.description.strip():
            raise InvalidInput(self.messages.resolve("tema.validate.description"))

    def _validate_name_not_exist(self, name: str) -> None:
        # Case-sensitive, unlike the course name check
        if Topic.objects.filter(name=name).exists():
            raise TopicError(self.messages.resolve("tema.validate.name", [name]))
