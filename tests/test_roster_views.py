"""Tests for roster pages"""

import csv
import io

import pytest
from django.contrib.messages import get_messages
from django.urls import reverse

from organizations.models import Grouping, Organization
from rosters.models import Roster, RosterEntry

pytestmark = pytest.mark.django_db


def flash(response):
    return [str(message) for message in get_messages(response.wsgi_request)]


def roster_url(organization, name="show", **kwargs):
    return reverse(f"rosters:{name}", kwargs={"slug": organization.slug, **kwargs})


class TestRosterAccess:

    def test_anonymous_is_sent_to_login(self, client, organization, roster):
        response = client.get(roster_url(organization))

        assert response.status_code == 302
        assert reverse("login") in response["Location"]

    def test_non_member_is_forbidden(self, client, organization, roster, django_user_model):
        client.force_login(django_user_model.objects.create_user(username="stranger"))

        assert client.get(roster_url(organization)).status_code == 403

    def test_feature_flag_off(self, teacher_client, organization, roster, settings):
        settings.STUDENT_IDENTIFIER_ENABLED = False

        assert teacher_client.get(roster_url(organization)).status_code == 404

    def test_missing_roster_redirects_to_new(self, teacher_client, organization):
        response = teacher_client.get(roster_url(organization))

        assert response.status_code == 302
        assert response["Location"] == roster_url(organization, "new")

    def test_unknown_entry_is_not_found(self, teacher_client, organization, roster):
        response = teacher_client.post(roster_url(organization, "unlink", entry_id=999999))

        assert response.status_code == 404

    def test_entry_of_another_roster_is_not_found(self, teacher_client, organization, roster):
        other = Roster.objects.create(identifier_name="Other")
        foreign = RosterEntry.objects.create(roster=other, identifier="foreign")

        response = teacher_client.post(roster_url(organization, "unlink", entry_id=foreign.id))

        assert response.status_code == 404

    def test_mutations_require_post(self, teacher_client, organization, roster):
        entry = roster.entries.first()

        response = teacher_client.get(roster_url(organization, "link", entry_id=entry.id))

        assert response.status_code == 405


class TestRosterShow:

    def test_lists_entries_and_unlinked_users(
        self, teacher_client, organization, roster, assignment, accept_assignment, make_student
    ):
        accept_assignment(assignment, make_student("octocat"))

        response = teacher_client.get(roster_url(organization))

        assert response.status_code == 200
        entries = list(response.context["roster_entries"])
        assert [e.identifier for e in entries] == [
            "alice@example.com", "bob@example.com", "carol@example.com"
        ]
        assert [u.username for u in response.context["current_unlinked_users"]] == ["octocat"]
        assert b"octocat" in response.content

    def test_entries_are_paginated(self, teacher_client, organization, roster, settings):
        settings.ROSTER_ENTRIES_PER_PAGE = 2

        response = teacher_client.get(roster_url(organization), {"roster_entries_page": 2})

        assert [e.identifier for e in response.context["roster_entries"]] == ["carol@example.com"]

    def test_csv_download(self, teacher_client, organization, roster):
        response = teacher_client.get(roster_url(organization), {"format": "csv"})

        assert response.status_code == 200
        assert response["Content-Type"] == "text/csv"
        assert response["Content-Disposition"] == 'attachment; filename="classroom_roster.csv"'
        rows = list(csv.reader(io.StringIO(response.content.decode())))
        assert rows[0] == ["identifier", "linked", "github_username", "github_id", "name"]
        assert [row[0] for row in rows[1:]] == [
            "alice@example.com", "bob@example.com", "carol@example.com"
        ]

    def test_csv_download_with_grouping(
        self, teacher_client, organization, roster, grouping, join_group, make_student
    ):
        student = make_student()
        join_group(grouping, "Team A", student)
        RosterEntry.objects.filter(roster=roster, identifier="bob@example.com").update(user=student)

        response = teacher_client.get(
            roster_url(organization), {"format": "csv", "grouping": grouping.id}
        )

        rows = list(csv.reader(io.StringIO(response.content.decode())))
        assert rows[0][-1] == "group_name"
        assert rows[2][0] == "bob@example.com"
        assert rows[2][-1] == "Team A"

    def test_csv_download_with_empty_grouping(self, teacher_client, organization, roster, grouping):
        response = teacher_client.get(
            roster_url(organization), {"format": "csv", "grouping": grouping.id}
        )

        rows = list(csv.reader(io.StringIO(response.content.decode())))
        assert rows[0][-1] == "group_name"
        assert all(len(row) == 6 for row in rows)

    def test_grouping_of_another_organization(self, teacher_client, organization, roster):
        other = Organization.objects.create(title="Other", slug="other")
        foreign = Grouping.objects.create(title="Theirs", slug="theirs", organization=other)

        response = teacher_client.get(roster_url(organization), {"grouping": foreign.id})

        assert response.status_code == 404


class TestRosterCreate:

    def test_new_form(self, teacher_client, organization):
        response = teacher_client.get(roster_url(organization, "new"))

        assert response.status_code == 200
        assert "form" in response.context

    def test_create(self, teacher_client, organization):
        response = teacher_client.post(
            roster_url(organization, "new"),
            {"identifier_name": "Email", "identifiers": "a@example.com\r\nb@example.com"},
        )

        assert response.status_code == 302
        assert response["Location"] == reverse("organizations:show", kwargs={"slug": organization.slug})
        organization.refresh_from_db()
        assert organization.roster.identifier_name == "Email"
        assert organization.roster.entries.count() == 2
        assert any("roster has been saved" in m for m in flash(response))

    def test_create_failure_renders_form(self, teacher_client, organization):
        response = teacher_client.post(
            roster_url(organization, "new"),
            {"identifier_name": "Email", "identifiers": "\r\n"},
        )

        assert response.status_code == 200
        assert response.context["error"]
        assert Roster.objects.count() == 0


class TestRosterRemove:

    def test_remove(self, teacher_client, organization, roster):
        response = teacher_client.post(roster_url(organization, "remove_organization"))

        assert response.status_code == 302
        assert response["Location"] == reverse("organizations:show", kwargs={"slug": organization.slug})
        assert not Roster.objects.filter(pk=roster.pk).exists()
        assert "Roster successfully deleted!" in flash(response)


class TestRosterLinking:

    def test_link(self, teacher_client, organization, roster, assignment, accept_assignment, make_student):
        student = make_student()
        accept_assignment(assignment, student)
        entry = roster.entries.first()

        response = teacher_client.post(
            roster_url(organization, "link", entry_id=entry.id), {"user_id": student.id}
        )

        assert response.status_code == 302
        assert response["Location"] == roster_url(organization)
        entry.refresh_from_db()
        assert entry.user == student
        assert "Student and GitHub account linked!" in flash(response)

    def test_link_user_outside_unlinked_set(self, teacher_client, organization, roster, make_student):
        entry = roster.entries.first()

        response = teacher_client.post(
            roster_url(organization, "link", entry_id=entry.id), {"user_id": make_student().id}
        )

        entry.refresh_from_db()
        assert entry.user is None
        assert "An error has occured, please try again." in flash(response)

    def test_link_with_garbage_user_id(self, teacher_client, organization, roster):
        entry = roster.entries.first()

        response = teacher_client.post(
            roster_url(organization, "link", entry_id=entry.id), {"user_id": "abc"}
        )

        assert response.status_code == 302
        assert "An error has occured, please try again." in flash(response)

    def test_unlink(self, teacher_client, organization, roster, make_student):
        entry = roster.entries.first()
        entry.user = make_student()
        entry.save()

        response = teacher_client.post(roster_url(organization, "unlink", entry_id=entry.id))

        entry.refresh_from_db()
        assert entry.user is None
        assert "Student and GitHub account unlinked!" in flash(response)


class TestRosterDeleteEntry:

    def test_delete(self, teacher_client, organization, roster):
        entry = roster.entries.first()

        response = teacher_client.post(roster_url(organization, "delete_entry", entry_id=entry.id))

        assert response["Location"] == roster_url(organization)
        assert not RosterEntry.objects.filter(pk=entry.pk).exists()
        assert "Student successfully removed from roster!" in flash(response)

    def test_delete_second_to_last_is_rejected(self, teacher_client, organization, roster):
        roster.entries.first().delete()
        entry = roster.entries.first()

        response = teacher_client.post(roster_url(organization, "delete_entry", entry_id=entry.id))

        assert response["Location"] == roster_url(organization)
        assert roster.entries.count() == 2
        assert "You cannot remove a student from a roster with 2 or fewer students!" in flash(response)


class TestRosterAddStudents:

    def test_all_new(self, teacher_client, organization, roster):
        response = teacher_client.post(
            roster_url(organization, "add_students"),
            {"identifiers": "dave@example.com\r\nerin@example.com"},
        )

        assert response["Location"] == roster_url(organization)
        assert roster.entries.count() == 5
        assert "Students created." in flash(response)

    def test_some_duplicates(self, teacher_client, organization, roster):
        response = teacher_client.post(
            roster_url(organization, "add_students"),
            {"identifiers": "dave@example.com\r\nalice@example.com"},
        )

        assert roster.entries.count() == 4
        assert "Students created. Some duplicates have been omitted." in flash(response)

    def test_nothing_new(self, teacher_client, organization, roster):
        response = teacher_client.post(
            roster_url(organization, "add_students"),
            {"identifiers": "alice@example.com\r\n\r\n"},
        )

        assert roster.entries.count() == 3
        assert "No students created." in flash(response)

    def test_invalid_identifier(self, teacher_client, organization, roster):
        response = teacher_client.post(
            roster_url(organization, "add_students"),
            {"identifiers": "z" * 300},
        )

        assert roster.entries.count() == 3
        assert "An error has occured. Please try again." in flash(response)
