"""Translate every error raised under a view into the response envelope.

Installed as ``REST_FRAMEWORK["EXCEPTION_HANDLER"]``. Domain errors keep
their resolved message; persistence and unexpected errors are logged in
full and answered with a user-safe message only.
"""
from __future__ import annotations

import logging

from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException, NotFound, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from courses.exceptions import CourseNotFound, InvalidInput, PersistenceFailure
from courses.messages import get_message_source
from topics.exceptions import TopicError
from .envelope import error_envelope

logger = logging.getLogger(__name__)


class ParameterValidationError(ValidationError):
    """Constraint violation on a query or path parameter."""


# Most specific first: TopicError is an InvalidInput.
DOMAIN_ERRORS = (
    (CourseNotFound, status.HTTP_404_NOT_FOUND, "Curso no encontrado"),
    (TopicError, status.HTTP_400_BAD_REQUEST, "Error en el tema"),
    (InvalidInput, status.HTTP_400_BAD_REQUEST, "Curso inválido"),
)


def field_errors(detail) -> dict[str, str]:
    """Flatten DRF error detail into ``{field: first message}``."""
    if isinstance(detail, dict):
        return {field: _first_message(messages) for field, messages in detail.items()}
    return {"non_field_errors": _first_message(detail)}


def _first_message(messages) -> str:
    if isinstance(messages, dict):
        # Nested serializer or list item errors
        return "; ".join(f"{k}: {_first_message(v)}" for k, v in messages.items())
    if isinstance(messages, (list, tuple)):
        return _first_message(messages[0]) if messages else ""
    return str(messages)


def envelope_exception_handler(exc, context):
    messages = get_message_source()

    for error_class, status_code, label in DOMAIN_ERRORS:
        if isinstance(exc, error_class):
            logger.error("%s: %s", label, exc.message, exc_info=exc)
            return Response(error_envelope(exc.message), status=status_code)

    if isinstance(exc, PersistenceFailure):
        logger.error(
            "Error al acceder a la base de datos: [ENTIDAD: %s] - [ID %s] - [NOMBRE: %s] - "
            "[OPERACIÓN: %s] - [CAUSA RAÍZ: %s] - [MENSAJE USUARIO: %s]",
            exc.entity_type, exc.entity_id, exc.entity_name, exc.operation, exc.root_cause, exc.message,
        )
        set_rollback()
        return Response(error_envelope(exc.message), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

    if isinstance(exc, ParameterValidationError):
        errors = field_errors(exc.detail)
        logger.error("Error de validación en parámetros: %s", errors)
        return Response(
            error_envelope(messages.resolve("error.validation.params"), errors),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, ValidationError):
        errors = field_errors(exc.detail)
        logger.error("Error de validación: %s", errors)
        return Response(
            error_envelope(messages.resolve("error.validation"), errors),
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, (Http404, NotFound)):
        logger.error("Recurso no encontrado: %s", exc)
        return Response(error_envelope(messages.resolve("error.not_found")), status=status.HTTP_404_NOT_FOUND)

    if isinstance(exc, APIException):
        # Parse errors, 405s...: keep DRF's status and headers, swap the body
        response = drf_exception_handler(exc, context)
        logger.error("Error de la API (%s): %s", response.status_code, exc.detail)
        response.data = error_envelope(str(exc.detail))
        return response

    logger.error("Error inesperado: %s", exc, exc_info=exc)
    set_rollback()
    return Response(
        error_envelope(messages.resolve("error.unexpected")),
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
