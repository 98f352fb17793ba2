from django.contrib import admin
from django.urls import path, include
from django.views.generic import RedirectView

urlpatterns = [
    path("admin/", admin.site.urls),

    path("accounts/", include("django.contrib.auth.urls")),

    path("classrooms/", include("organizations.urls")),
    path("classrooms/<slug:slug>/roster/", include("rosters.urls")),

    path("api/", include("rosters.api_urls")),

    # Default redirect
    path("", RedirectView.as_view(
        pattern_name="organizations:list",
        permanent=False
    )),
]
