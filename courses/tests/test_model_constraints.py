from __future__ import annotations

import datetime

import pytest
from django.db import IntegrityError

from courses.models import Course
from topics.models import Topic


@pytest.mark.django_db
def test_course_name_unique_constraint_raises_integrity_error():
    Course.objects.create(name="UQ", modality="Virtual", end_date=datetime.date(2030, 1, 1))
    with pytest.raises(IntegrityError):
        Course.objects.create(name="UQ", modality="Presencial", end_date=datetime.date(2030, 1, 1))


@pytest.mark.django_db
def test_topic_name_unique_constraint_raises_integrity_error():
    Topic.objects.create(name="Streams", description="a")
    with pytest.raises(IntegrityError):
        Topic.objects.create(name="Streams", description="b")


@pytest.mark.django_db
def test_store_assigns_timestamps_and_defaults():
    course = Course.objects.create(name="TS", modality="Virtual", end_date=datetime.date(2030, 1, 1))
    assert course.pk is not None
    assert course.enabled is True
    assert course.created_at is not None
    assert course.updated_at >= course.created_at


@pytest.mark.django_db
def test_topic_course_is_optional_and_reverse_relation_works():
    course = Course.objects.create(name="Rel", modality="Virtual", end_date=datetime.date(2030, 1, 1))
    orphan = Topic.objects.create(name="Orphan", description="x")
    owned = Topic.objects.create(name="Owned", description="y", course=course)
    assert orphan.course_id is None
    assert list(course.topics.values_list("id", flat=True)) == [owned.id]
