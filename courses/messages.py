"""User-facing message lookup by key, positional arguments and locale.

Services never hard-code response text. They ask a message source for
`resolve(key, args, locale)`; templates use `{0}`, `{1}` placeholders. The
active source is named by the `MESSAGE_SOURCE` setting so tests and
deployments can swap it without touching the services.
"""
from __future__ import annotations

from typing import Iterable, Protocol

from django.conf import settings
from django.utils import translation
from django.utils.module_loading import import_string


DEFAULT_CATALOGS: dict[str, dict[str, str]] = {
    "es": {
        "curso.save.success": "El curso '{0}' se ha guardado correctamente.",
        "curso.save.error": "No se pudo guardar el curso '{0}'. Intente nuevamente más tarde.",
        "curso.update.success": "El curso '{0}' se ha modificado correctamente.",
        "curso.update.error": "No se pudo modificar el curso '{0}'. Intente nuevamente más tarde.",
        "curso.getAll.success": "Cursos obtenidos correctamente.",
        "curso.get.success": "Curso '{0}' obtenido correctamente.",
        "curso.validate.id": "No existe un curso con el ID {0}.",
        "curso.validate.id.null": "El ID del curso no puede ser nulo.",
        "curso.validate.name": "Ya existe un curso con el nombre '{0}'.",
        "curso.validate.modality.empty": "La modalidad no puede estar vacía.",
        "curso.validate.modality.error": "La modalidad '{0}' no es válida. Debe ser 'Presencial' o 'Virtual'.",
        "tema.save.success": "El tema '{0}' se ha guardado correctamente.",
        "tema.save.error": "No se pudo guardar el tema '{0}'. Intente nuevamente más tarde.",
        "tema.validate.null": "El tema no puede ser nulo.",
        "tema.validate.description": "La descripción del tema no puede estar vacía.",
        "tema.validate.name": "El nombre del tema '{0}' ya existe.",
        "error.validation": "Errores de validación",
        "error.validation.params": "Errores de validación en los parámetros",
        "error.not_found": "Recurso no encontrado",
        "error.unexpected": "Ha ocurrido un error inesperado",
    },
    "en": {
        "curso.save.success": "Course '{0}' was saved successfully.",
        "curso.save.error": "Course '{0}' could not be saved. Please try again later.",
        "curso.update.success": "Course '{0}' was updated successfully.",
        "curso.update.error": "Course '{0}' could not be updated. Please try again later.",
        "curso.getAll.success": "Courses retrieved successfully.",
        "curso.get.success": "Course '{0}' retrieved successfully.",
        "curso.validate.id": "There is no course with ID {0}.",
        "curso.validate.id.null": "The course ID must not be null.",
        "curso.validate.name": "A course named '{0}' already exists.",
        "curso.validate.modality.empty": "The modality must not be empty.",
        "curso.validate.modality.error": "Modality '{0}' is not valid. It must be 'Presencial' or 'Virtual'.",
        "tema.save.success": "Topic '{0}' was saved successfully.",
        "tema.save.error": "Topic '{0}' could not be saved. Please try again later.",
        "tema.validate.null": "The topic must not be null.",
        "tema.validate.description": "The topic description must not be empty.",
        "tema.validate.name": "A topic named '{0}' already exists.",
        "error.validation": "Validation errors",
        "error.validation.params": "Parameter validation errors",
        "error.not_found": "Resource not found",
        "error.unexpected": "An unexpected error occurred",
    },
}


class MessageSource(Protocol):
    def resolve(self, key: str, args: Iterable[object] = (), locale: str | None = None) -> str:
        ...


class CatalogMessageSource:
    """Resolve messages from in-memory catalogs keyed by language code.

    Lookup order: the exact locale (``es-ar``), its language prefix
    (``es``), then ``settings.LANGUAGE_CODE``. An unknown key resolves to
    the key itself.
    """

    def __init__(self, catalogs: dict[str, dict[str, str]] | None = None):
        self.catalogs = catalogs if catalogs is not None else DEFAULT_CATALOGS

    def resolve(self, key: str, args: Iterable[object] = (), locale: str | None = None) -> str:
        template = self._template(key, locale or translation.get_language() or settings.LANGUAGE_CODE)
        if template is None:
            return key
        return template.format(*args)

    def _template(self, key: str, locale: str) -> str | None:
        for code in self._candidates(locale):
            catalog = self.catalogs.get(code)
            if catalog and key in catalog:
                return catalog[key]
        return None

    @staticmethod
    def _candidates(locale: str) -> list[str]:
        code = locale.lower().replace("_", "-")
        default = settings.LANGUAGE_CODE.lower()
        candidates = [code, code.split("-")[0], default, default.split("-")[0]]
        # Keep order, drop repeats
        return list(dict.fromkeys(candidates))


def get_message_source() -> MessageSource:
    """Instantiate the message source named by ``settings.MESSAGE_SOURCE``."""
    path = getattr(settings, "MESSAGE_SOURCE", "courses.messages.CatalogMessageSource")
    return import_string(path)()
