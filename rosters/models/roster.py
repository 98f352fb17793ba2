# rosters/models/roster.py
from django.db import models


class Roster(models.Model):
    """
    A named list of students. Organizations point at a roster, so one
    roster can back several classrooms.
    """

    identifier_name = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"Roster #{self.pk} ({self.identifier_name})"
