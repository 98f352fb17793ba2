from django.urls import path

from rosters.views.roster import (
    roster_show,
    roster_new,
    roster_remove_organization,
    roster_add_students,
    roster_link,
    roster_unlink,
    roster_delete_entry,
)
from rosters.views.google_classroom import (
    google_classroom_select,
    google_classroom_search,
    google_classroom_import,
)

app_name = "rosters"

# Mounted under classrooms/<slug:slug>/roster/
urlpatterns = [
    path("", roster_show, name="show"),
    path("new/", roster_new, name="new"),
    path("remove/", roster_remove_organization, name="remove_organization"),
    path("students/", roster_add_students, name="add_students"),

    # Entries
    path("entries/<int:entry_id>/link/", roster_link, name="link"),
    path("entries/<int:entry_id>/unlink/", roster_unlink, name="unlink"),
    path("entries/<int:entry_id>/delete/", roster_delete_entry, name="delete_entry"),

    # Google Classroom
    path("google/", google_classroom_select, name="google_classroom_select"),
    path("google/search/", google_classroom_search, name="google_classroom_search"),
    path("google/import/", google_classroom_import, name="google_classroom_import"),
]
