from __future__ import annotations

from django.test import override_settings
from django.utils import translation

from courses.messages import CatalogMessageSource, get_message_source


class StubMessageSource:
    def resolve(self, key, args=(), locale=None):
        return f"stub:{key}"


def test_positional_arguments_are_substituted():
    source = CatalogMessageSource()
    assert source.resolve("curso.validate.name", ["Java101"], "es") == "Ya existe un curso con el nombre 'Java101'."


def test_locale_falls_back_to_language_prefix():
    source = CatalogMessageSource()
    assert source.resolve("curso.getAll.success", locale="en-GB") == "Courses retrieved successfully."


def test_unknown_locale_uses_default_language():
    source = CatalogMessageSource()
    assert source.resolve("error.unexpected", locale="fr") == "Ha ocurrido un error inesperado"


def test_active_language_is_used_when_no_locale_given():
    source = CatalogMessageSource()
    with translation.override("en"):
        assert source.resolve("error.validation") == "Validation errors"
    with translation.override("es"):
        assert source.resolve("error.validation") == "Errores de validación"


def test_unknown_key_resolves_to_itself():
    assert CatalogMessageSource().resolve("no.such.key", locale="es") == "no.such.key"


def test_custom_catalogs():
    source = CatalogMessageSource({"es": {"greeting": "Hola {0} y {1}"}})
    assert source.resolve("greeting", ["A", "B"], "es") == "Hola A y B"


@override_settings(MESSAGE_SOURCE="courses.tests.test_messages.StubMessageSource")
def test_message_source_is_swappable_through_settings():
    assert get_message_source().resolve("anything") == "stub:anything"
