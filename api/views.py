"""HTTP endpoints for courses and topics.

Views validate the request shape, delegate to the services and wrap the
result in the envelope. Errors propagate to `api.exceptions`.
"""
from __future__ import annotations

from django.http import JsonResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response

from courses.dto import CourseDto
from courses.messages import get_message_source
from courses.models import Course
from courses.services import CourseService
from topics.models import Topic
from topics.services import TopicService
from .envelope import error_envelope, render_envelope
from .exceptions import ParameterValidationError
from .serializers import (
    CourseDtoSerializer,
    CoursePageSerializer,
    CourseSerializer,
    ModalityQuerySerializer,
    PageQuerySerializer,
    TopicDtoSerializer,
    TopicSerializer,
)


def _query_params(serializer_class, request) -> dict:
    serializer = serializer_class(data=request.query_params)
    if not serializer.is_valid():
        raise ParameterValidationError(serializer.errors)
    return serializer.validated_data


@extend_schema(request=CourseSerializer, responses={201: CourseDtoSerializer})
@api_view(["POST"])
def create_course(request):
    serializer = CourseSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    result = CourseService().save_course(Course(**serializer.validated_data))
    return Response(render_envelope(result, CourseDtoSerializer), status=status.HTTP_201_CREATED)


@extend_schema(parameters=[PageQuerySerializer], responses={200: CoursePageSerializer})
@api_view(["GET"])
def list_courses(request):
    params = _query_params(PageQuerySerializer, request)
    result = CourseService().get_courses(params["page"], params["size"])
    return Response(render_envelope(result, CoursePageSerializer))


@extend_schema(responses={200: CourseDtoSerializer})
@api_view(["GET"])
def get_course(request, pk: int):
    result = CourseService().get_course(pk)
    return Response(render_envelope(result, CourseDtoSerializer))


@extend_schema(
    parameters=[OpenApiParameter("modalidad", OpenApiTypes.STR, OpenApiParameter.QUERY, required=True)],
    responses={200: CourseDtoSerializer},
)
@api_view(["PATCH"])
def edit_course_modality(request, pk: int):
    params = _query_params(ModalityQuerySerializer, request)
    result = CourseService().edit_modality(pk, params["modalidad"])
    return Response(render_envelope(result, CourseDtoSerializer))


@extend_schema(request=CourseDtoSerializer, responses={200: CourseDtoSerializer})
@api_view(["PUT"])
def replace_course(request):
    serializer = CourseDtoSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    data = serializer.validated_data
    dto = CourseDto(
        id=data["id"],
        name=data.get("name"),
        modality=data.get("modality"),
        end_date=data.get("end_date"),
    )
    result = CourseService().edit_course(dto)
    return Response(render_envelope(result, CourseDtoSerializer))


@extend_schema(request=TopicSerializer, responses={201: TopicDtoSerializer})
@api_view(["POST"])
def create_topic(request):
    serializer = TopicSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)
    result = TopicService().save_topic(Topic(**serializer.validated_data))
    return Response(render_envelope(result, TopicDtoSerializer), status=status.HTTP_201_CREATED)


@extend_schema(responses={200: TopicSerializer(many=True)})
@api_view(["GET"])
def list_topics(request):
    """Raw topic records, not wrapped in the envelope."""
    return Response(TopicSerializer(TopicService().find_all(), many=True).data)


@extend_schema(responses={200: TopicSerializer})
@api_view(["GET"])
def get_topic(request, pk: int):
    """Raw topic record; an unknown id answers 200 with an empty body."""
    topic = TopicService().find_by_id(pk)
    return Response(TopicSerializer(topic).data if topic is not None else None)


def route_not_found(request, exception=None):
    """`handler404` for paths no URL pattern matched."""
    message = get_message_source().resolve("error.not_found")
    return JsonResponse(error_envelope(message), status=404)


def server_error(request):
    message = get_message_source().resolve("error.unexpected")
    return JsonResponse(error_envelope(message), status=500)
