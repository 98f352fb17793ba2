from django.contrib import admin

from accounts.models import (
    GitHubProfile,
    GoogleClassroomCredential,
)

# ============================================================
# GITHUB PROFILE
# ============================================================

@admin.register(GitHubProfile)
class GitHubProfileAdmin(admin.ModelAdmin):
    list_display = (
        "login",
        "user",
        "github_id",
        "created_at",
    )

    search_fields = (
        "login",
        "user__username",
        "user__email",
    )

    readonly_fields = (
        "created_at",
        "updated_at",
    )

    ordering = (
        "login",
    )


# ============================================================
# GOOGLE CLASSROOM CREDENTIAL
# ============================================================

@admin.register(GoogleClassroomCredential)
class GoogleClassroomCredentialAdmin(admin.ModelAdmin):
    list_display = (
        "user",
        "expiry",
        "updated_at",
    )

    search_fields = (
        "user__username",
        "user__email",
    )

    exclude = (
        "token",
        "refresh_token",
    )

    readonly_fields = (
        "created_at",
        "updated_at",
    )
