from django.urls import path

from organizations.views.dashboard import organization_list, organization_show
from organizations.views.assignments import assignment_show

app_name = "organizations"

urlpatterns = [
    path("", organization_list, name="list"),
    path("<slug:slug>/", organization_show, name="show"),
    path(
        "<slug:slug>/assignments/<slug:assignment_slug>/",
        assignment_show,
        name="assignment",
    ),
]
