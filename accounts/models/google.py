from django.conf import settings
from django.db import models
from google.oauth2.credentials import Credentials


class GoogleClassroomCredential(models.Model):
    """
    OAuth tokens a teacher granted us for the Google Classroom API.
    The consent flow that produces them lives outside this project.
    """

    user = models.OneToOneField(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="google_classroom_credential"
    )
    token = models.TextField()
    refresh_token = models.TextField(blank=True)
    token_uri = models.URLField(default="https://oauth2.googleapis.com/token")
    scopes = models.TextField(blank=True, help_text="Space separated")
    expiry = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Google Classroom credential for {self.user}"

    def to_credentials(self):
        scopes = self.scopes.split() or settings.GOOGLE_CLASSROOM_SCOPES
        credentials = Credentials(
            token=self.token,
            refresh_token=self.refresh_token or None,
            token_uri=self.token_uri,
            client_id=settings.GOOGLE_CLIENT_ID or None,
            client_secret=settings.GOOGLE_CLIENT_SECRET or None,
            scopes=scopes,
        )
        if self.expiry:
            # google-auth compares against naive UTC datetimes
            credentials.expiry = self.expiry.replace(tzinfo=None)
        return credentials
