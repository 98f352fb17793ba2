# organizations/models/grouping.py
from django.db import models
from django.contrib.auth.models import User
from .organization import Organization


class Grouping(models.Model):
    title = models.CharField(max_length=255)
    slug = models.SlugField()
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="groupings"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["title"]
        unique_together = ("organization", "slug")

    def __str__(self):
        return self.title


class RepoAccess(models.Model):
    """A user's access to the repositories of an organization's teams."""

    user = models.ForeignKey(
        User,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="repo_accesses"
    )
    organization = models.ForeignKey(
        Organization,
        on_delete=models.CASCADE,
        related_name="repo_accesses"
    )

    created_at = models.DateTimeField(auto_now_add=True)

    def __str__(self):
        return f"{self.user} @ {self.organization}"


class Group(models.Model):
    title = models.CharField(max_length=255)
    grouping = models.ForeignKey(
        Grouping,
        on_delete=models.CASCADE,
        related_name="groups"
    )
    github_team_id = models.PositiveBigIntegerField(null=True, blank=True)
    repo_accesses = models.ManyToManyField(
        RepoAccess,
        blank=True,
        related_name="groups"
    )

    class Meta:
        ordering = ["title"]

    def __str__(self):
        return self.title
