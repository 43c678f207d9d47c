from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TopicDto:
    id: int | None = None
    name: str | None = None
    description: str | None = None
    course_id: int | None = None

    @classmethod
    def from_topic(cls, topic) -> "TopicDto":
        return cls(
            id=topic.pk,
            name=topic.name,
            description=topic.description,
            course_id=topic.course_id,
        )
