"""Topic model: a unit of content optionally attached to one course."""
from __future__ import annotations

from django.db import models


class Topic(models.Model):
    name = models.CharField(max_length=20, unique=True)
    # Nullable in the schema; the service still requires it on create.
    description = models.CharField(max_length=100, null=True, blank=True)
    course = models.ForeignKey(
        "courses.Course",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="topics",
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.name}"
