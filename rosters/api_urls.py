from django.urls import path
from . import api_views

urlpatterns = [
    path('classrooms/<slug:slug>/roster/entries/', api_views.RosterEntryListAPI.as_view(), name='api_roster_entries'),
    path('classrooms/<slug:slug>/roster/unlinked-users/', api_views.UnlinkedUserListAPI.as_view(), name='api_unlinked_users'),
]
