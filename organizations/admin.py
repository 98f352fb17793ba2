from django.contrib import admin

from organizations.models import (
    Assignment,
    AssignmentRepo,
    Group,
    Grouping,
    Organization,
    OrganizationMember,
    RepoAccess,
)


# =========================
# ORGANIZATION
# =========================
@admin.register(Organization)
class OrganizationAdmin(admin.ModelAdmin):
    list_display = ("title", "slug", "roster", "is_active", "created_at")
    list_filter = ("is_active",)
    search_fields = ("title", "slug")
    prepopulated_fields = {"slug": ("title",)}
    raw_id_fields = ("roster",)


# =========================
# ORGANIZATION MEMBERS
# =========================
@admin.register(OrganizationMember)
class OrganizationMemberAdmin(admin.ModelAdmin):
    list_display = ("user", "organization", "role", "is_active", "joined_at")
    list_filter = ("organization", "role", "is_active")
    search_fields = ("user__username", "organization__title")


# =========================
# ASSIGNMENTS
# =========================
@admin.register(Assignment)
class AssignmentAdmin(admin.ModelAdmin):
    list_display = ("title", "organization", "created_at")
    list_filter = ("organization",)
    search_fields = ("title", "organization__title")
    prepopulated_fields = {"slug": ("title",)}


@admin.register(AssignmentRepo)
class AssignmentRepoAdmin(admin.ModelAdmin):
    list_display = ("assignment", "user", "github_repo_id", "created_at")
    list_filter = ("assignment__organization",)
    search_fields = ("user__username", "assignment__title")
    autocomplete_fields = ("user",)


# =========================
# GROUPINGS
# =========================
class GroupInline(admin.TabularInline):
    model = Group
    extra = 0
    filter_horizontal = ("repo_accesses",)


@admin.register(Grouping)
class GroupingAdmin(admin.ModelAdmin):
    list_display = ("title", "organization", "created_at")
    list_filter = ("organization",)
    search_fields = ("title",)
    prepopulated_fields = {"slug": ("title",)}
    inlines = [GroupInline]


@admin.register(RepoAccess)
class RepoAccessAdmin(admin.ModelAdmin):
    list_display = ("user", "organization", "created_at")
    list_filter = ("organization",)
    search_fields = ("user__username",)
    autocomplete_fields = ("user",)
