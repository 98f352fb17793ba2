# rosters/views/google_classroom.py
import logging

from django.conf import settings
from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.core.paginator import Paginator
from django.shortcuts import redirect, render
from django.views.decorators.http import require_POST

from organizations.permissions import org_admin_required
from rosters.exceptions import GoogleClassroomError
from rosters.permissions import google_classroom_required, student_identifier_required
from rosters.services.creator import RosterCreator
from rosters.services.google_classroom import student_roster_pairs
from rosters.views.roster import create_roster_response

logger = logging.getLogger(__name__)


def _courses_page(courses, page_number):
    return Paginator(
        courses, settings.GOOGLE_CLASSROOM_COURSES_PER_PAGE
    ).get_page(page_number)


def _google_error(request, error):
    logger.warning("Google Classroom error for %s: %s", request.organization.slug, error)
    messages.error(request, "We could not reach Google Classroom. Please try again.")
    return redirect("organizations:show", slug=request.organization.slug)


@login_required
@student_identifier_required
@org_admin_required
@google_classroom_required
def google_classroom_select(request, slug):
    try:
        courses = request.google_classroom.list_courses()
    except GoogleClassroomError as e:
        return _google_error(request, e)

    return render(
        request,
        "rosters/select_google_classroom.html",
        {
            "organization": request.organization,
            "courses": _courses_page(courses, request.GET.get("page")),
        }
    )


@login_required
@student_identifier_required
@org_admin_required
@google_classroom_required
def google_classroom_search(request, slug):
    query = request.GET.get("query", "").lower()

    try:
        courses = [
            course for course in request.google_classroom.list_courses()
            if query in course.get("name", "").lower()
        ]
    except GoogleClassroomError as e:
        return _google_error(request, e)

    return render(
        request,
        "rosters/partials/google_classroom_collection.html",
        {
            "organization": request.organization,
            "courses": _courses_page(courses, request.GET.get("page")),
        }
    )


@login_required
@require_POST
@student_identifier_required
@org_admin_required
@google_classroom_required
def google_classroom_import(request, slug):
    course_id = request.POST.get("course_id", "")

    try:
        students = request.google_classroom.list_course_students(course_id)
    except GoogleClassroomError as e:
        return _google_error(request, e)

    if not students:
        messages.warning(request, "No new students were found in your Google Classroom.")
        return redirect("organizations:show", slug=request.organization.slug)

    pairs = student_roster_pairs(students)

    request.organization.google_course_id = course_id
    return create_roster_response(
        request,
        identifiers="\n".join(name for name, _ in pairs),
        identifier_name=RosterCreator.DEFAULT_IDENTIFIER_NAME,
        google_user_ids=[google_user_id for _, google_user_id in pairs],
    )
