# accounts/utils/github.py
"""
Helpers for rendering a user's GitHub identity.
Users without a GitHub profile fall back to their Django username.
"""


def github_profile_for(user):
    if user is None:
        return None
    return getattr(user, "github_profile", None)


def login_for(user):
    profile = github_profile_for(user)
    if profile:
        return profile.login
    return user.get_username() if user else ""


def avatar_url_for(user, size):
    profile = github_profile_for(user)
    if not profile:
        return ""
    return profile.sized_avatar_url(size)


def user_url_for(user):
    profile = github_profile_for(user)
    if not profile:
        return ""
    return profile.html_url
