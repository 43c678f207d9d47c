"""Root URL routing.

The course/topic endpoints and the API docs live in `api.urls`; paths no
pattern matches are answered with the JSON envelope.
"""
from django.contrib import admin
from django.urls import include, path


urlpatterns = [
    path("admin/", admin.site.urls),
    path("", include("api.urls")),
]

handler404 = "api.views.route_not_found"
handler500 = "api.views.server_error"
