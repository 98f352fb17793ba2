# organizations/permissions.py
from functools import wraps

from django.contrib.auth.views import redirect_to_login
from django.core.exceptions import PermissionDenied
from django.shortcuts import get_object_or_404

from organizations.models.membership import OrganizationMember
from organizations.models.organization import Organization


def get_managed_organization(user, slug):
    """
    The active organization `slug` if `user` may manage it.
    Raises Http404 for unknown slugs and PermissionDenied for non members.
    """
    organization = get_object_or_404(Organization, slug=slug, is_active=True)

    if user.is_superuser:
        return organization

    is_member = OrganizationMember.objects.filter(
        user=user,
        organization=organization,
        is_active=True,
    ).exists()

    if not is_member:
        raise PermissionDenied("Organization admins only")

    return organization


def org_admin_required(view_func):
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):

        # 1. Must be logged in
        if not request.user.is_authenticated:
            return redirect_to_login(request.get_full_path())

        # 2. Must manage the organization in the URL
        request.organization = get_managed_organization(
            request.user,
            kwargs.get("slug"),
        )

        return view_func(request, *args, **kwargs)

    return _wrapped
