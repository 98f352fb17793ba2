from django.conf import settings
from django.contrib.auth.decorators import login_required
from django.core.paginator import Paginator
from django.shortcuts import get_object_or_404, render

from organizations.models import Assignment
from organizations.permissions import org_admin_required
from organizations.view_models import AssignmentRepoView


@login_required
@org_admin_required
def assignment_show(request, slug, assignment_slug):
    org = request.organization
    assignment = get_object_or_404(
        Assignment,
        organization=org,
        slug=assignment_slug,
    )

    repos = assignment.repos.select_related("user__github_profile")
    repo_by_user = {
        repo.user_id: repo for repo in repos if repo.user_id is not None
    }

    page = None
    rows = []
    if org.roster_id:
        entries = (
            org.roster.entries
            .select_related("user__github_profile")
            .order_for_view(assignment)
        )
        page = Paginator(
            entries, settings.ROSTER_ENTRIES_PER_PAGE
        ).get_page(request.GET.get("page"))

        for entry in page:
            repo = repo_by_user.get(entry.user_id)
            rows.append({
                "entry": entry,
                "repo_view": AssignmentRepoView(repo) if repo else None,
            })

    return render(
        request,
        "organizations/assignment.html",
        {
            "organization": org,
            "assignment": assignment,
            "roster_entries": page,
            "rows": rows,
            "repo_count": len(repos),
        }
    )
