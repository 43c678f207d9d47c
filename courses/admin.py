from django.contrib import admin

from .models import Course


@admin.register(Course)
class CourseAdmin(admin.ModelAdmin):
    list_display = ("name", "modality", "end_date", "enabled", "created_at")
    list_filter = ("modality", "enabled")
    search_fields = ("name",)
    readonly_fields = ("created_at", "updated_at")
