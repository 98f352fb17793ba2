# rosters/services/entries.py
import logging

from django.db import transaction

from organizations.models import Organization
from rosters.exceptions import LastRosterEntryError
from rosters.models import RosterEntry

logger = logging.getLogger(__name__)

# Single-entry deletes never take a roster below this many entries.
MIN_ROSTER_ENTRIES = 2
TOO_FEW_ENTRIES_MESSAGE = (
    f"You cannot remove a student from a roster with {MIN_ROSTER_ENTRIES} "
    "or fewer students!"
)


def can_delete_entry_from(roster):
    return roster.entries.count() > MIN_ROSTER_ENTRIES


@transaction.atomic
def delete_roster_entry(entry):
    # Lock the roster's entries so two deletes cannot both pass the check.
    remaining = list(
        RosterEntry.objects
        .select_for_update()
        .filter(roster_id=entry.roster_id)
        .values_list("id", flat=True)
    )

    if len(remaining) <= MIN_ROSTER_ENTRIES:
        raise LastRosterEntryError(TOO_FEW_ENTRIES_MESSAGE)

    entry.delete()
    logger.info("Deleted roster entry %s from roster %s", entry.identifier, entry.roster_id)


def detach_roster(organization):
    """
    Remove the organization's roster. The roster itself is only deleted
    once no other organization uses it.

    Returns True when the roster row was deleted.
    """
    roster = organization.roster
    if roster is None:
        return False

    roster_id = roster.pk
    deleted = False
    with transaction.atomic():
        organization.roster = None
        organization.save(update_fields=["roster"])

        if not Organization.objects.filter(roster=roster).exists():
            roster.delete()
            deleted = True

    logger.info(
        "Detached roster %s from %s (deleted=%s)",
        roster_id, organization.slug, deleted,
    )
    return deleted


def add_students(roster, identifiers):
    """Returns the created entries; existing identifiers are skipped."""
    entries = RosterEntry.objects.create_entries(
        identifiers=identifiers,
        roster=roster,
    )
    logger.info(
        "Added %s of %s students to roster %s",
        len(entries), len(identifiers), roster.pk,
    )
    return entries
