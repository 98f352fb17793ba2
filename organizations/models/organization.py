from django.db import models


class Organization(models.Model):
    """
    A classroom: one GitHub organization integration.
    Several classrooms may share a single roster.
    """

    title = models.CharField(max_length=255)
    slug = models.SlugField(unique=True)
    github_id = models.PositiveBigIntegerField(unique=True, null=True, blank=True)

    roster = models.ForeignKey(
        "rosters.Roster",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="organizations"
    )
    google_course_id = models.CharField(max_length=255, blank=True, null=True)

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["title"]

    def __str__(self):
        return self.title
