from django.contrib import admin

from rosters.models import Roster, RosterEntry


# =========================
# ROSTER ENTRIES (inline)
# =========================
class RosterEntryInline(admin.TabularInline):
    model = RosterEntry
    extra = 0
    fields = ("identifier", "user", "google_user_id", "created_at")
    readonly_fields = ("created_at",)
    autocomplete_fields = ("user",)


# =========================
# ROSTER
# =========================
@admin.register(Roster)
class RosterAdmin(admin.ModelAdmin):
    list_display = ("id", "identifier_name", "created_at")
    search_fields = ("identifier_name", "organizations__title")
    readonly_fields = ("created_at",)
    inlines = [RosterEntryInline]


# =========================
# ROSTER ENTRY
# =========================
@admin.register(RosterEntry)
class RosterEntryAdmin(admin.ModelAdmin):
    list_display = ("identifier", "roster", "user", "created_at")
    list_filter = ("roster",)
    search_fields = ("identifier", "user__username")
    autocomplete_fields = ("user",)
    readonly_fields = ("created_at",)
