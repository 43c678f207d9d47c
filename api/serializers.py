"""Serializers for the course/topic API.

Request validation stops at field shape (required, blank, length, date in
the future); business rules live in the services. Wire names are Spanish
and map onto the English model/DTO attributes through `source`.
"""
from __future__ import annotations

from django.utils import timezone
from django.utils.translation import gettext_lazy as _
from rest_framework import serializers

from courses.models import Course
from topics.models import Topic


class NotBlankValidator:
    """Reject whitespace-only text without trimming the accepted value."""

    def __init__(self, message):
        self.message = message

    def __call__(self, value):
        if not value.strip():
            raise serializers.ValidationError(self.message)


class CourseSerializer(serializers.ModelSerializer):
    """Course body accepted by the create endpoint."""

    nombre = serializers.CharField(
        source="name",
        max_length=20,
        trim_whitespace=False,
        validators=[NotBlankValidator(_("El nombre del curso no puede estar vacío."))],
        error_messages={
            "required": _("El nombre del curso es obligatorio."),
            "blank": _("El nombre del curso no puede estar vacío."),
            "null": _("El nombre del curso no puede ser nulo."),
        },
    )
    modalidad = serializers.CharField(
        source="modality",
        max_length=20,
        trim_whitespace=False,
        validators=[NotBlankValidator(_("La modalidad no puede estar vacía."))],
        error_messages={
            "required": _("La modalidad es obligatoria."),
            "blank": _("La modalidad no puede estar vacía."),
            "null": _("La modalidad no puede ser nula."),
        },
    )
    fecha_finalizacion = serializers.DateField(
        source="end_date",
        error_messages={
            "required": _("La fecha de finalización es obligatoria."),
            "null": _("La fecha de finalización no puede ser nula."),
        },
    )
    habilitado = serializers.BooleanField(source="enabled", required=False)

    class Meta:
        model = Course
        fields = ("id", "nombre", "modalidad", "fecha_finalizacion", "habilitado")
        read_only_fields = ("id",)


class CourseDtoSerializer(serializers.Serializer):
    """External shape of a course; also validates the full-replace body."""

    id = serializers.IntegerField(
        error_messages={
            "required": _("El id del curso es obligatorio."),
            "null": _("El id del curso no puede ser nulo."),
        },
    )
    nombre = serializers.CharField(
        source="name",
        max_length=20,
        trim_whitespace=False,
        validators=[NotBlankValidator(_("El nombre del curso no puede estar vacío."))],
        error_messages={
            "required": _("El nombre del curso es obligatorio."),
            "blank": _("El nombre del curso no puede estar vacío."),
            "null": _("El nombre del curso no puede ser nulo."),
        },
    )
    modalidad = serializers.CharField(
        source="modality",
        max_length=20,
        trim_whitespace=False,
        validators=[NotBlankValidator(_("La modalidad no puede estar vacía."))],
        error_messages={
            "required": _("La modalidad es obligatoria."),
            "blank": _("La modalidad no puede estar vacía."),
            "null": _("La modalidad no puede ser nula."),
        },
    )
    fecha_finalizacion = serializers.DateField(
        source="end_date",
        error_messages={
            "required": _("La fecha de finalización es obligatoria."),
            "null": _("La fecha de finalización no puede ser nula."),
        },
    )
    listaTemasId = serializers.ListField(
        source="topic_ids",
        child=serializers.IntegerField(),
        required=False,
        allow_null=True,
    )

    def validate_fecha_finalizacion(self, value):
        if value <= timezone.localdate():
            raise serializers.ValidationError(_("La fecha de finalización debe ser futura."))
        return value


class CoursePageSerializer(serializers.Serializer):
    content = CourseDtoSerializer(many=True)
    number = serializers.IntegerField()
    size = serializers.IntegerField()
    totalElements = serializers.IntegerField(source="total_elements")
    totalPages = serializers.IntegerField(source="total_pages")


class TopicSerializer(serializers.ModelSerializer):
    """Raw topic record; also the body accepted by the create endpoint."""

    nombre = serializers.CharField(
        source="name",
        max_length=20,
        trim_whitespace=False,
        validators=[NotBlankValidator(_("El nombre del tema no puede estar vacío."))],
        error_messages={
            "required": _("El nombre del tema es obligatorio."),
            "blank": _("El nombre del tema no puede estar vacío."),
            "null": _("El nombre del tema no puede ser nulo."),
        },
    )
    # Presence is a business rule checked by the service
    descripcion = serializers.CharField(
        source="description",
        max_length=100,
        trim_whitespace=False,
        required=False,
        allow_null=True,
        allow_blank=True,
    )
    curso = serializers.PrimaryKeyRelatedField(
        source="course",
        queryset=Course.objects.all(),
        required=False,
        allow_null=True,
    )
    fechaCreacion = serializers.DateTimeField(source="created_at", read_only=True)
    fechaUltimaModificacion = serializers.DateTimeField(source="updated_at", read_only=True)

    class Meta:
        model = Topic
        fields = ("id", "nombre", "descripcion", "curso", "fechaCreacion", "fechaUltimaModificacion")
        read_only_fields = ("id",)


class TopicDtoSerializer(serializers.Serializer):
    id_Tema = serializers.IntegerField(source="id")
    nombre = serializers.CharField(source="name")
    descripcion = serializers.CharField(source="description", allow_null=True)
    idCurso = serializers.IntegerField(source="course_id", allow_null=True)


# page * size must stay within a signed 64-bit OFFSET
MAX_QUERY_INT = 2**31 - 1


class PageQuerySerializer(serializers.Serializer):
    page = serializers.IntegerField(min_value=0, max_value=MAX_QUERY_INT, default=0)
    size = serializers.IntegerField(min_value=0, max_value=MAX_QUERY_INT, default=10)


class ModalityQuerySerializer(serializers.Serializer):
    modalidad = serializers.CharField(
        trim_whitespace=False,
        validators=[NotBlankValidator(_("La modalidad no puede estar en blanco"))],
        error_messages={
            "required": _("La modalidad no puede estar en blanco"),
            "blank": _("La modalidad no puede estar en blanco"),
        },
    )
