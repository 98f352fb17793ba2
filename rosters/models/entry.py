# rosters/models/entry.py
from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import DatabaseError, models, transaction
from django.db.models import Case, Exists, IntegerField, OuterRef, Q, Value, When

from organizations.models import AssignmentRepo
from rosters.exceptions import IdentifierCreationError
from .roster import Roster


class RosterEntryQuerySet(models.QuerySet):
    RANK_ACCEPTED = 0
    RANK_LINKED = 1
    RANK_UNLINKED = 2

    def linked(self):
        return self.filter(user__isnull=False)

    def unlinked(self):
        return self.filter(user__isnull=True)

    def order_for_view(self, assignment):
        """
        Orders entries for an assignment page:
        first:  linked to a user who has a repo for this assignment
        second: linked but no repo yet
        last:   not linked

        The secondary sort on id keeps ties in the same order every time.
        """
        accepted = AssignmentRepo.objects.filter(
            assignment=assignment,
            user=OuterRef("user"),
        )

        return self.annotate(
            view_rank=Case(
                When(user__isnull=True, then=Value(self.RANK_UNLINKED)),
                When(Exists(accepted), then=Value(self.RANK_ACCEPTED)),
                default=Value(self.RANK_LINKED),
                output_field=IntegerField(),
            )
        ).order_by("view_rank", "id")


class RosterEntryManager(models.Manager.from_queryset(RosterEntryQuerySet)):

    def create_entries(self, *, identifiers, roster, google_user_ids=None):
        """
        Create one entry per identifier not already on the roster.

        Returns the created entries. Either all of them are written or,
        on any failure, none are and IdentifierCreationError is raised.
        """
        google_user_ids = list(google_user_ids or [])

        existing = set(
            self.filter(roster=roster, identifier__in=identifiers)
            .values_list("identifier", flat=True)
        )

        entries = []
        for index, identifier in enumerate(identifiers):
            if identifier in existing:
                continue
            existing.add(identifier)

            google_user_id = google_user_ids[index] if index < len(google_user_ids) else None
            entries.append(
                self.model(
                    roster=roster,
                    identifier=identifier,
                    google_user_id=google_user_id,
                )
            )

        try:
            with transaction.atomic():
                for entry in entries:
                    entry.full_clean()
                    entry.save()
        except (ValidationError, DatabaseError) as e:
            raise IdentifierCreationError(
                "Roster entries could not be created."
            ) from e

        return entries


class RosterEntry(models.Model):
    roster = models.ForeignKey(
        Roster,
        on_delete=models.CASCADE,
        related_name="entries"
    )
    identifier = models.CharField(max_length=255)
    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="roster_entries"
    )
    google_user_id = models.CharField(max_length=255, blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)

    objects = RosterEntryManager()

    class Meta:
        constraints = [
            models.UniqueConstraint(
                fields=["roster", "identifier"],
                name="unique_roster_identifier",
            ),
            models.UniqueConstraint(
                fields=["roster", "user"],
                condition=Q(user__isnull=False),
                name="unique_roster_user",
            ),
        ]
        indexes = [
            models.Index(
                fields=["roster", "user"],
                name="roster_entry_roster_user_idx",
            ),
        ]

    def __str__(self):
        return self.identifier

    @property
    def is_linked(self):
        return self.user_id is not None
