from django.db import models
from django.conf import settings


class GitHubProfile(models.Model):
    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="github_profile"
    )

    github_id = models.PositiveBigIntegerField(unique=True)
    login = models.CharField(max_length=255)
    name = models.CharField(max_length=255, blank=True)
    avatar_url = models.URLField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["login"]

    def __str__(self):
        return self.login

    @property
    def html_url(self):
        return f"https://github.com/{self.login}"

    def sized_avatar_url(self, size):
        if not self.avatar_url:
            return f"https://avatars.githubusercontent.com/u/{self.github_id}?v=4&size={size}"
        separator = "&" if "?" in self.avatar_url else "?"
        return f"{self.avatar_url}{separator}size={size}"
