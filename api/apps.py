from django.apps import AppConfig


class ApiConfig(AppConfig):
    """App configuration for the HTTP layer (views, serializers, error handling)."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "api"
