import logging

from django.contrib.auth.decorators import login_required
from django.shortcuts import render

from organizations.models import Assignment, Organization
from organizations.permissions import org_admin_required

logger = logging.getLogger(__name__)


@login_required
def organization_list(request):
    """Classrooms the signed-in teacher manages."""
    organizations = Organization.objects.filter(is_active=True)
    if not request.user.is_superuser:
        organizations = organizations.filter(
            members__user=request.user,
            members__is_active=True,
        )

    return render(
        request,
        "organizations/list.html",
        {"organizations": organizations.distinct()}
    )


@login_required
@org_admin_required
def organization_show(request, slug):
    org = request.organization

    # =========================
    # ORGANIZATION STATS
    # =========================
    stats = {
        "assignments": Assignment.objects.filter(organization=org).count(),
        "groupings": org.groupings.count(),
        "roster_entries": org.roster.entries.count() if org.roster_id else 0,
    }

    return render(
        request,
        "organizations/show.html",
        {
            "organization": org,
            "stats": stats,
            "assignments": org.assignments.all(),
        }
    )
