# rosters/api_views.py
from django.conf import settings
from django.http import Http404
from django.shortcuts import get_object_or_404
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import APIView

from organizations.models import Assignment
from organizations.permissions import get_managed_organization
from rosters.serializers import RosterEntrySerializer, UnlinkedUserSerializer
from rosters.services.linking import unlinked_users


class RosterAPIView(APIView):

    def get_organization(self, slug):
        if not settings.STUDENT_IDENTIFIER_ENABLED:
            raise Http404("Rosters are not enabled")
        return get_managed_organization(self.request.user, slug)


class RosterEntryListAPI(RosterAPIView):
    """Roster entries, in assignment display order when ?assignment=<id>."""

    def get(self, request, slug):
        organization = self.get_organization(slug)
        if organization.roster is None:
            raise Http404("This classroom has no roster")

        entries = organization.roster.entries.select_related("user__github_profile")

        assignment_id = request.query_params.get("assignment")
        if assignment_id:
            if not assignment_id.isdigit():
                raise ValidationError({"assignment": "Must be an assignment id."})
            assignment = get_object_or_404(
                Assignment,
                id=assignment_id,
                organization=organization,
            )
            entries = entries.order_for_view(assignment)
        else:
            entries = entries.order_by("identifier")

        return Response(RosterEntrySerializer(entries, many=True).data)


class UnlinkedUserListAPI(RosterAPIView):

    def get(self, request, slug):
        organization = self.get_organization(slug)
        users = unlinked_users(organization)
        return Response(UnlinkedUserSerializer(users, many=True).data)
