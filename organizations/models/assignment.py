# organizations/models/assignment.py
from django.db import models
from django.contrib.auth.models import User
from .organization import Organization


class Assignment(models.Model):
    title = models.CharField(max_length=255)
    slug = models.SlugField()
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="assignments"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-created_at"]
        unique_together = ("organization", "slug")

    def __str__(self):
        return f"{self.title} ({self.organization})"


class AssignmentRepo(models.Model):
    """
    The repository a student got by accepting an assignment.
    `user` is cleared when the account is deleted.
    """

    assignment = models.ForeignKey(
        Assignment,
        on_delete=models.CASCADE,
        related_name="repos"
    )
    user = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="assignment_repos"
    )
    github_repo_id = models.PositiveBigIntegerField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.user} ← {self.assignment}"
