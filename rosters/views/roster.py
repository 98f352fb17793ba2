# rosters/views/roster.py
import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.paginator import Paginator
from django.db import DatabaseError
from django.http import HttpResponse
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from organizations.permissions import org_admin_required
from rosters.exceptions import IdentifierCreationError, RosterError
from rosters.forms import AddStudentsForm, RosterForm
from rosters.permissions import (
    enough_members_required,
    grouping_access_required,
    roster_entry_required,
    roster_required,
    student_identifier_required,
)
from rosters.services.creator import RosterCreator
from rosters.services.entries import add_students, delete_roster_entry, detach_roster
from rosters.services.export import user_to_group_map, write_roster_csv
from rosters.services.linking import (
    link_roster_entry,
    unlink_roster_entry,
    unlinked_user_ids,
    unlinked_users,
)
from rosters.utils import split_identifiers

logger = logging.getLogger(__name__)

GENERIC_ERROR = "An error has occured, please try again."


def _redirect_to_roster(request):
    return redirect("rosters:show", slug=request.organization.slug)


def _redirect_to_organization(request):
    return redirect("organizations:show", slug=request.organization.slug)


# =====================================================
# SHOW
# =====================================================
@login_required
@student_identifier_required
@org_admin_required
@roster_required
@grouping_access_required
def roster_show(request, slug):
    if request.GET.get("format") == "csv":
        return roster_download(request)

    entries = (
        request.roster.entries
        .select_related("user__github_profile")
        .order_by("identifier")
    )
    roster_entries = Paginator(
        entries, settings.ROSTER_ENTRIES_PER_PAGE
    ).get_page(request.GET.get("roster_entries_page"))

    # computed once per request, both lists below use it
    user_ids = unlinked_user_ids(request.organization)
    all_unlinked_users = unlinked_users(request.organization, user_ids)
    current_unlinked_users = Paginator(
        all_unlinked_users, settings.UNLINKED_USERS_PER_PAGE
    ).get_page(request.GET.get("unlinked_users_page"))

    return render(
        request,
        "rosters/show.html",
        {
            "organization": request.organization,
            "roster": request.roster,
            "roster_entries": roster_entries,
            "current_unlinked_users": current_unlinked_users,
            "unlinked_users": all_unlinked_users,
            "groupings": request.organization.groupings.all(),
            "add_students_form": AddStudentsForm(),
        }
    )


def roster_download(request):
    user_to_group = None
    if request.grouping is not None:
        user_to_group = user_to_group_map(request.grouping)

    entries = (
        request.roster.entries
        .select_related("user__github_profile")
        .order_by("identifier")
    )

    response = HttpResponse(content_type="text/csv")
    response["Content-Disposition"] = 'attachment; filename="classroom_roster.csv"'
    write_roster_csv(response, entries, user_to_group)
    return response


# =====================================================
# CREATE
# =====================================================
def create_roster_response(request, *, identifiers, identifier_name, google_user_ids=None):
    result = RosterCreator.perform(
        organization=request.organization,
        identifier_name=identifier_name,
        identifiers=identifiers,
        google_user_ids=google_user_ids,
    )

    if result.success:
        messages.success(
            request,
            "Your classroom roster has been saved! You can manage it from the roster page."
        )
        return _redirect_to_organization(request)

    form = RosterForm(initial={
        "identifier_name": identifier_name,
        "identifiers": identifiers,
    })
    return render(
        request,
        "rosters/new.html",
        {
            "organization": request.organization,
            "roster": result.roster,
            "form": form,
            "error": result.error,
        }
    )


@login_required
@student_identifier_required
@org_admin_required
def roster_new(request, slug):
    if request.method == "POST":
        return create_roster_response(
            request,
            identifiers=request.POST.get("identifiers", ""),
            identifier_name=request.POST.get(
                "identifier_name",
                RosterCreator.DEFAULT_IDENTIFIER_NAME,
            ),
        )

    return render(
        request,
        "rosters/new.html",
        {
            "organization": request.organization,
            "form": RosterForm(),
        }
    )


# =====================================================
# DELETE ROSTER
# =====================================================
@login_required
@require_POST
@student_identifier_required
@org_admin_required
@roster_required
def roster_remove_organization(request, slug):
    try:
        detach_roster(request.organization)
        messages.success(request, "Roster successfully deleted!")
    except DatabaseError:
        logger.exception("Could not detach roster from %s", request.organization.slug)
        messages.error(
            request,
            "An error has occured while trying to delete the roster. Please try again."
        )

    return _redirect_to_organization(request)


# =====================================================
# ENTRIES
# =====================================================
@login_required
@require_POST
@student_identifier_required
@org_admin_required
@roster_required
@roster_entry_required
def roster_link(request, slug, entry_id):
    try:
        user_id = int(request.POST.get("user_id", ""))
        link_roster_entry(
            request.roster_entry,
            user_id,
            organization=request.organization,
        )
        messages.success(request, "Student and GitHub account linked!")
    except (ValueError, RosterError, DatabaseError) as e:
        logger.warning("Link failed for roster entry %s: %s", entry_id, e)
        messages.error(request, GENERIC_ERROR)

    return _redirect_to_roster(request)


@login_required
@require_POST
@student_identifier_required
@org_admin_required
@roster_required
@roster_entry_required
def roster_unlink(request, slug, entry_id):
    try:
        unlink_roster_entry(request.roster_entry)
        messages.success(request, "Student and GitHub account unlinked!")
    except DatabaseError:
        logger.exception("Unlink failed for roster entry %s", entry_id)
        messages.error(request, GENERIC_ERROR)

    return _redirect_to_roster(request)


@login_required
@require_POST
@student_identifier_required
@org_admin_required
@roster_required
@roster_entry_required
@enough_members_required
def roster_delete_entry(request, slug, entry_id):
    try:
        delete_roster_entry(request.roster_entry)
        messages.success(request, "Student successfully removed from roster!")
    except RosterError as e:
        messages.error(request, str(e))
    except DatabaseError:
        logger.exception("Delete failed for roster entry %s", entry_id)
        messages.error(request, GENERIC_ERROR)

    return _redirect_to_roster(request)


@login_required
@require_POST
@student_identifier_required
@org_admin_required
@roster_required
def roster_add_students(request, slug):
    identifiers = split_identifiers(request.POST.get("identifiers", ""))

    try:
        entries = add_students(request.roster, identifiers)
    except IdentifierCreationError:
        messages.error(request, "An error has occured. Please try again.")
        return _redirect_to_roster(request)

    if not entries:
        messages.warning(request, "No students created.")
    elif len(entries) == len(identifiers):
        messages.success(request, "Students created.")
    else:
        messages.success(request, "Students created. Some duplicates have been omitted.")

    return _redirect_to_roster(request)
