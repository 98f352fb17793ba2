# rosters/services/linking.py
import logging

from django.contrib.auth import get_user_model
from django.db import transaction
from django.db.models import Q

from organizations.models import AssignmentRepo, RepoAccess
from rosters.exceptions import RosterLinkError
from rosters.models import RosterEntry

logger = logging.getLogger(__name__)


def unlinked_user_ids(organization):
    """
    An unlinked user is a user who:
    - has a repo for an assignment of the organization, or a repo access
      in the organization or one of its groups
    - is not linked to an entry of the organization's roster
    """
    assignment_users = set(
        AssignmentRepo.objects
        .filter(assignment__organization=organization, user__isnull=False)
        .values_list("user_id", flat=True)
        .distinct()
    )

    group_users = set(
        RepoAccess.objects
        .filter(
            Q(organization=organization)
            | Q(groups__grouping__organization=organization),
            user__isnull=False,
        )
        .values_list("user_id", flat=True)
        .distinct()
    )

    roster_users = set()
    if organization.roster_id is not None:
        roster_users = set(
            RosterEntry.objects
            .filter(roster_id=organization.roster_id)
            .linked()
            .values_list("user_id", flat=True)
        )

    return (assignment_users | group_users) - roster_users


def unlinked_users(organization, user_ids=None):
    if user_ids is None:
        user_ids = unlinked_user_ids(organization)

    return (
        get_user_model().objects
        .filter(id__in=user_ids)
        .select_related("github_profile")
        .order_by("id")
    )


def link_roster_entry(entry, user_id, *, organization):
    """
    Link `entry` to a user, who must be unlinked in `organization`.

    The roster's entries stay locked from the check to the save, and the
    `unique_roster_user` constraint rejects a second link of the same user.
    """
    with transaction.atomic():
        list(
            RosterEntry.objects
            .select_for_update()
            .filter(roster_id=entry.roster_id)
            .values_list("id", flat=True)
        )

        if user_id not in unlinked_user_ids(organization):
            raise RosterLinkError(
                f"User {user_id} is not an unlinked user of {organization}."
            )

        entry.user_id = user_id
        entry.save(update_fields=["user"])

    logger.info("Linked roster entry %s to user %s", entry.pk, user_id)
    return entry


def unlink_roster_entry(entry):
    with transaction.atomic():
        entry.user = None
        entry.save(update_fields=["user"])

    logger.info("Unlinked roster entry %s", entry.pk)
    return entry
