# rosters/permissions.py
"""
Request guards for roster views. They run after `org_admin_required`,
which puts the organization on `request.organization`.
"""
import logging
from functools import wraps

from django.conf import settings
from django.contrib import messages
from django.http import Http404
from django.shortcuts import redirect

from organizations.models import Grouping
from rosters.exceptions import GoogleClassroomError
from rosters.services.entries import TOO_FEW_ENTRIES_MESSAGE, can_delete_entry_from
from rosters.services.google_classroom import GoogleClassroomClient

logger = logging.getLogger(__name__)


def student_identifier_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not settings.STUDENT_IDENTIFIER_ENABLED:
            raise Http404("Rosters are not enabled")
        return view_func(request, *args, **kwargs)

    return _wrapped


def roster_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        request.roster = request.organization.roster
        if request.roster is None:
            return redirect("rosters:new", slug=request.organization.slug)
        return view_func(request, *args, **kwargs)

    return _wrapped


def roster_entry_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        request.roster_entry = (
            request.roster.entries
            .filter(id=kwargs.get("entry_id"))
            .first()
        )
        if request.roster_entry is None:
            raise Http404("Roster entry not found")
        return view_func(request, *args, **kwargs)

    return _wrapped


def enough_members_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not can_delete_entry_from(request.roster):
            messages.error(request, TOO_FEW_ENTRIES_MESSAGE)
            return redirect("rosters:show", slug=request.organization.slug)
        return view_func(request, *args, **kwargs)

    return _wrapped


def grouping_access_required(view_func):
    """Resolves ?grouping=<id> to a grouping of the current organization."""
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        request.grouping = None

        grouping_id = request.GET.get("grouping")
        if grouping_id:
            if not grouping_id.isdigit():
                raise Http404("Grouping not found")

            grouping = Grouping.objects.filter(id=grouping_id).first()
            if grouping is None or grouping.organization_id != request.organization.id:
                raise Http404("Grouping not found")
            request.grouping = grouping

        return view_func(request, *args, **kwargs)

    return _wrapped


def google_classroom_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        try:
            client = GoogleClassroomClient.for_user(request.user)
        except GoogleClassroomError as e:
            logger.warning("Google Classroom unavailable for %s: %s", request.user, e)
            client = None

        if client is None:
            messages.error(
                request,
                "Please connect your Google account before importing from Google Classroom."
            )
            return redirect("organizations:show", slug=request.organization.slug)

        request.google_classroom = client
        return view_func(request, *args, **kwargs)

    return _wrapped
