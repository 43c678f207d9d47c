from __future__ import annotations

import datetime
from unittest import mock

import pytest
from django.db import DatabaseError

from courses.dto import CourseDto
from courses.exceptions import CourseNotFound, InvalidInput, PersistenceFailure
from courses.messages import CatalogMessageSource
from courses.models import Course
from courses.services import CourseService
from topics.models import Topic

END = datetime.date(2030, 6, 30)


@pytest.fixture
def service():
    return CourseService(messages=CatalogMessageSource())


def _course(name="Java101", modality="Virtual", end_date=END):
    return Course(name=name, modality=modality, end_date=end_date)


@pytest.mark.django_db
def test_save_course_returns_create_dto_without_topics(service):
    result = service.save_course(_course(modality="virtual"))
    assert result.success is True
    assert result.message == "El curso 'Java101' se ha guardado correctamente."
    dto = result.data
    assert dto.id is not None
    assert (dto.name, dto.modality, dto.end_date) == ("Java101", "virtual", END)
    assert dto.topic_ids is None
    assert Course.objects.get(pk=dto.id).modality == "virtual"


@pytest.mark.django_db
@pytest.mark.parametrize("existing", ["Java101", "JAVA101", "java101"])
def test_save_course_rejects_existing_name_in_any_case(service, existing):
    Course.objects.create(name=existing, modality="Virtual", end_date=END)
    with pytest.raises(InvalidInput) as err:
        # Name check comes first, even when the modality is also invalid
        service.save_course(_course(name="Java101", modality="Hibrida"))
    assert "Java101" in err.value.message
    assert Course.objects.count() == 1


@pytest.mark.django_db
@pytest.mark.parametrize("modality", ["Presencial", "Virtual", "presencial", "VIRTUAL", "vIrTuAl"])
def test_save_course_accepts_modalities_case_insensitively(service, modality):
    result = service.save_course(_course(modality=modality))
    assert result.data.modality == modality


@pytest.mark.django_db
@pytest.mark.parametrize("modality", ["Hibrida", "Virtual ", "Remoto", "presencial-virtual"])
def test_save_course_rejects_unknown_modality(service, modality):
    with pytest.raises(InvalidInput) as err:
        service.save_course(_course(modality=modality))
    assert err.value.message == f"La modalidad '{modality}' no es válida. Debe ser 'Presencial' o 'Virtual'."
    assert not Course.objects.exists()


@pytest.mark.django_db
@pytest.mark.parametrize("modality", [None, "", "   "])
def test_save_course_rejects_blank_modality(service, modality):
    with pytest.raises(InvalidInput) as err:
        service.save_course(_course(modality=modality))
    assert err.value.message == "La modalidad no puede estar vacía."


@pytest.mark.django_db
def test_save_course_does_not_check_end_date(service):
    result = service.save_course(_course(end_date=datetime.date(2000, 1, 1)))
    assert result.data.end_date == datetime.date(2000, 1, 1)


@pytest.mark.django_db
def test_concurrent_duplicate_surfaces_as_persistence_failure(service):
    Course.objects.create(name="Race", modality="Virtual", end_date=END)
    # Simulate a create that passed the pre-check before the other committed
    with mock.patch.object(CourseService, "_validate_name_not_exist"):
        with pytest.raises(PersistenceFailure) as err:
            service.save_course(_course(name="Race"))
    failure = err.value
    assert failure.entity_type == "Curso"
    assert failure.entity_name == "Race"
    assert failure.operation == "Save"
    assert failure.root_cause
    assert failure.message == "No se pudo guardar el curso 'Race'. Intente nuevamente más tarde."
    assert isinstance(failure.__cause__, DatabaseError)
    assert Course.objects.count() == 1


@pytest.mark.django_db
def test_get_course_unknown_id_raises_not_found(service):
    with pytest.raises(CourseNotFound) as err:
        service.get_course(999)
    assert err.value.message == "No existe un curso con el ID 999."


@pytest.mark.django_db
def test_get_course_none_id_is_invalid(service):
    with pytest.raises(InvalidInput):
        service.get_course(None)


@pytest.mark.django_db
def test_get_course_lists_exactly_its_topic_ids(service):
    course = Course.objects.create(name="Py", modality="Virtual", end_date=END)
    other = Course.objects.create(name="Go", modality="Virtual", end_date=END)
    t1 = Topic.objects.create(name="Generators", description="d", course=course)
    t2 = Topic.objects.create(name="Decorators", description="d", course=course)
    Topic.objects.create(name="Goroutines", description="d", course=other)
    Topic.objects.create(name="Loose", description="d")

    result = service.get_course(course.pk)
    assert result.message == "Curso 'Py' obtenido correctamente."
    assert result.data.topic_ids == (t1.pk, t2.pk)

    empty = Course.objects.create(name="Empty", modality="Virtual", end_date=END)
    assert service.get_course(empty.pk).data.topic_ids == ()


@pytest.mark.django_db
def test_get_courses_pages_cover_every_course_once(service):
    ids = {Course.objects.create(name=f"C{i:02d}", modality="Virtual", end_date=END).pk for i in range(23)}
    size = 5
    first = service.get_courses(0, size).data
    assert first.total_elements == 23
    assert first.total_pages == 5
    seen = []
    for page in range(first.total_pages):
        chunk = service.get_courses(page, size).data
        assert chunk.number == page
        assert len(chunk.content) <= size
        seen.extend(dto.id for dto in chunk.content)
    assert len(seen) == len(set(seen))
    assert set(seen) == ids


@pytest.mark.django_db
def test_get_courses_includes_topic_ids_per_course(service):
    a = Course.objects.create(name="A", modality="Virtual", end_date=END)
    b = Course.objects.create(name="B", modality="Presencial", end_date=END)
    ta = Topic.objects.create(name="TA", description="d", course=a)
    result = service.get_courses(0, 10)
    assert result.message == "Cursos obtenidos correctamente."
    by_id = {dto.id: dto for dto in result.data.content}
    assert by_id[a.pk].topic_ids == (ta.pk,)
    assert by_id[b.pk].topic_ids == ()


@pytest.mark.django_db
def test_get_courses_out_of_range_and_zero_size(service):
    Course.objects.create(name="Only", modality="Virtual", end_date=END)
    beyond = service.get_courses(7, 10).data
    assert beyond.content == []
    assert beyond.total_elements == 1
    zero = service.get_courses(0, 0).data
    assert zero.content == []
    assert zero.total_pages == 0


@pytest.mark.django_db
def test_edit_modality_stores_value_as_supplied_without_validation(service):
    course = Course.objects.create(name="Edit", modality="Virtual", end_date=END)
    Topic.objects.create(name="T", description="d", course=course)
    result = service.edit_modality(course.pk, "Hibrida")
    assert result.data.modality == "Hibrida"
    assert len(result.data.topic_ids) == 1
    assert result.message == "El curso 'Edit' se ha modificado correctamente."
    course.refresh_from_db()
    assert course.modality == "Hibrida"


@pytest.mark.django_db
def test_edit_modality_unknown_id(service):
    with pytest.raises(CourseNotFound):
        service.edit_modality(42, "Virtual")


@pytest.mark.django_db
def test_edit_course_replaces_fields(service):
    course = Course.objects.create(name="Old", modality="Virtual", end_date=END)
    new_end = datetime.date(2031, 1, 1)
    result = service.edit_course(CourseDto(id=course.pk, name="New", modality="presencial", end_date=new_end))
    assert (result.data.name, result.data.modality, result.data.end_date) == ("New", "presencial", new_end)
    course.refresh_from_db()
    assert (course.name, course.modality, course.end_date) == ("New", "presencial", new_end)


@pytest.mark.django_db
def test_edit_course_without_name_clears_it(service):
    course = Course.objects.create(name="Keep", modality="Virtual", end_date=END)
    result = service.edit_course(CourseDto(id=course.pk, modality="Virtual", end_date=END))
    course.refresh_from_db()
    assert course.name == ""
    assert result.data.name == ""


@pytest.mark.django_db
def test_edit_course_without_date_clears_it(service):
    course = Course.objects.create(name="NoDate", modality="Virtual", end_date=END)
    service.edit_course(CourseDto(id=course.pk, name="NoDate", modality="Virtual"))
    course.refresh_from_db()
    assert course.end_date is None


@pytest.mark.django_db
def test_edit_course_unknown_id(service):
    with pytest.raises(CourseNotFound):
        service.edit_course(CourseDto(id=12345, name="X", modality="Virtual", end_date=END))


@pytest.mark.django_db
def test_edit_course_onto_existing_name_is_persistence_failure(service):
    Course.objects.create(name="Taken", modality="Virtual", end_date=END)
    course = Course.objects.create(name="Mine", modality="Virtual", end_date=END)
    with pytest.raises(PersistenceFailure) as err:
        service.edit_course(CourseDto(id=course.pk, name="Taken", modality="Virtual", end_date=END))
    assert err.value.operation == "Update"
    assert err.value.entity_id == course.pk
    course.refresh_from_db()
    assert course.name == "Mine"


@pytest.mark.django_db
def test_store_error_on_save_is_wrapped(service):
    with mock.patch.object(Course, "save", side_effect=DatabaseError("disk I/O error")):
        with pytest.raises(PersistenceFailure) as err:
            service.save_course(_course(name="Boom"))
    assert err.value.root_cause == "disk I/O error"
    assert err.value.entity_id is None


@pytest.mark.django_db
def test_messages_come_from_injected_source():
    class Recorder:
        def __init__(self):
            self.calls = []

        def resolve(self, key, args=(), locale=None):
            self.calls.append((key, list(args)))
            return key

    recorder = Recorder()
    result = CourseService(messages=recorder).save_course(_course(name="Inj"))
    assert result.message == "curso.save.success"
    assert recorder.calls == [("curso.save.success", ["Inj"])]
