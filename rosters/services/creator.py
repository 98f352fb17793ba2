# rosters/services/creator.py
import logging
from dataclasses import dataclass
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import DatabaseError, transaction

from rosters.exceptions import IdentifierCreationError
from rosters.models import Roster, RosterEntry
from rosters.utils import pair_identifiers

logger = logging.getLogger(__name__)


class RosterCreator:
    """
    Creates a roster from newline separated identifiers and attaches it
    to an organization, all in one transaction.
    """

    DEFAULT_IDENTIFIER_NAME = "Identifiers"

    @dataclass
    class Result:
        roster: Roster
        error: Optional[str] = None

        @property
        def success(self):
            return self.error is None

    @classmethod
    def perform(
        cls,
        *,
        organization,
        identifiers,
        identifier_name=DEFAULT_IDENTIFIER_NAME,
        google_user_ids=None,
    ):
        roster = Roster(identifier_name=(identifier_name or "").strip())
        pairs = pair_identifiers(identifiers, google_user_ids)

        try:
            roster.full_clean()
            if not pairs:
                raise ValidationError(
                    {"identifiers": "Your roster needs at least one student identifier."}
                )

            with transaction.atomic():
                roster.save()
                RosterEntry.objects.create_entries(
                    identifiers=[identifier for identifier, _ in pairs],
                    google_user_ids=[google_user_id for _, google_user_id in pairs],
                    roster=roster,
                )

                organization.roster = roster
                organization.save(update_fields=["roster", "google_course_id"])

        except ValidationError as e:
            return cls.Result(roster=roster, error=" ".join(e.messages))

        except (IdentifierCreationError, DatabaseError) as e:
            logger.warning("Roster creation failed for %s: %s", organization.slug, e)
            # The transaction rolled back, the instance is unsaved again.
            roster.pk = None
            return cls.Result(
                roster=roster,
                error="An error has occured while creating the roster. Please try again.",
            )

        logger.info(
            "Created roster %s for %s with %s entries",
            roster.pk, organization.slug, len(pairs),
        )
        return cls.Result(roster=roster)
