from .profile import GitHubProfile
from .google import GoogleClassroomCredential

__all__ = [
    "GitHubProfile",
    "GoogleClassroomCredential",
]
