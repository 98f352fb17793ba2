from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from organizations.models import Organization
from rosters.exceptions import IdentifierCreationError
from rosters.services.creator import RosterCreator
from rosters.services.entries import add_students
from rosters.utils import split_identifiers


class Command(BaseCommand):
    help = "Import student identifiers (one per line) into a classroom roster"

    def add_arguments(self, parser):
        parser.add_argument("organization", help="Slug of the classroom")
        parser.add_argument("path", help="File with one identifier per line")
        parser.add_argument(
            "--identifier-name",
            default=RosterCreator.DEFAULT_IDENTIFIER_NAME,
            help="Used when a new roster is created",
        )

    def handle(self, *args, **options):
        try:
            organization = Organization.objects.get(slug=options["organization"])
        except Organization.DoesNotExist:
            raise CommandError(f"Classroom '{options['organization']}' does not exist")

        try:
            raw = Path(options["path"]).read_text(encoding="utf-8")
        except OSError as e:
            raise CommandError(f"Could not read {options['path']}: {e}")

        if organization.roster is None:
            result = RosterCreator.perform(
                organization=organization,
                identifier_name=options["identifier_name"],
                identifiers=raw,
            )
            if not result.success:
                raise CommandError(result.error)

            count = result.roster.entries.count()
            self.stdout.write(self.style.SUCCESS(
                f"Created roster for {organization.title} with {count} students"
            ))
            return

        identifiers = split_identifiers(raw)
        try:
            entries = add_students(organization.roster, identifiers)
        except IdentifierCreationError as e:
            raise CommandError(str(e))

        skipped = len(identifiers) - len(entries)
        self.stdout.write(self.style.SUCCESS(
            f"Added {len(entries)} students to {organization.title} ({skipped} already on the roster)"
        ))
