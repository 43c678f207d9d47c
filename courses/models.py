"""Course model.

A `Course` is the top-level unit of the catalogue. Topics point at their course
through a nullable foreign key declared on `topics.Topic`; the course never
owns a list column of its own, so topic ids are always read with an explicit
query on `course_id`.
"""
from __future__ import annotations

from django.db import models


MODALITIES = ("Presencial", "Virtual")


class Course(models.Model):
    """A course with a delivery modality and an end date."""

    name = models.CharField(max_length=20, unique=True)
    # Stored as supplied; the allowed set is checked by the service on create.
    modality = models.CharField(max_length=20)
    end_date = models.DateField(null=True, blank=True)
    enabled = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["id"]

    def __str__(self) -> str:  # pragma: no cover
        return f"{self.name}"
