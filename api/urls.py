"""API routes: course/topic endpoints plus OpenAPI schema and docs."""
from django.urls import path
from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularRedocView,
    SpectacularSwaggerView,
)

from .views import (
    create_course,
    create_topic,
    edit_course_modality,
    get_course,
    get_topic,
    list_courses,
    list_topics,
    replace_course,
)

urlpatterns = [
    path("curso/crear", create_course, name="course-create"),
    path("cursos/listar", list_courses, name="course-list"),
    path("curso/mostrar/<int:pk>", get_course, name="course-detail"),
    path("curso/modificar/<int:pk>", edit_course_modality, name="course-edit-modality"),
    path("curso/modificar", replace_course, name="course-replace"),
    path("creartema", create_topic, name="topic-create"),
    path("consultar/temas", list_topics, name="topic-list"),
    path("consultar/tema/<int:pk>", get_topic, name="topic-detail"),
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("redoc/", SpectacularRedocView.as_view(url_name="schema"), name="redoc"),
]
