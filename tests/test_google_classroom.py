"""Tests for the Google Classroom client and import pages"""

from unittest.mock import MagicMock, Mock, patch

import httplib2
import pytest
from django.contrib.messages import get_messages
from django.urls import reverse
from googleapiclient.errors import HttpError

from accounts.models import GoogleClassroomCredential
from rosters.exceptions import GoogleClassroomError
from rosters.services.google_classroom import GoogleClassroomClient, student_roster_pairs

pytestmark = pytest.mark.django_db


def student(user_id, full_name=None):
    profile = {"name": {"fullName": full_name}} if full_name else {}
    return {"userId": user_id, "profile": profile}


@pytest.fixture
def service():
    with patch("rosters.services.google_classroom.build") as build:
        build.return_value = MagicMock()
        yield build.return_value


class TestGoogleClassroomClient:

    def test_for_user_without_credential(self, teacher):
        assert GoogleClassroomClient.for_user(teacher) is None

    def test_for_user_with_credential(self, teacher, service):
        GoogleClassroomCredential.objects.create(user=teacher, token="token")

        client = GoogleClassroomClient.for_user(teacher)

        assert client.service is service

    def test_list_courses_follows_pages(self, service):
        service.courses().list().execute.side_effect = [
            {"courses": [{"id": "1", "name": "Algebra"}], "nextPageToken": "next"},
            {"courses": [{"id": "2", "name": "Biology"}]},
        ]

        courses = GoogleClassroomClient(credentials=Mock()).list_courses()

        assert [course["id"] for course in courses] == ["1", "2"]

    def test_list_course_students(self, service):
        service.courses().students().list().execute.return_value = {
            "students": [student("g1", "Ada Lovelace")],
        }

        students = GoogleClassroomClient(credentials=Mock()).list_course_students("42")

        assert students == [student("g1", "Ada Lovelace")]

    def test_http_error_is_wrapped(self, service):
        service.courses().list().execute.side_effect = HttpError(
            Mock(status=403, reason="Forbidden"), b"denied"
        )

        with pytest.raises(GoogleClassroomError) as exc_info:
            GoogleClassroomClient(credentials=Mock()).list_courses()

        assert exc_info.value.status_code == 403

    @pytest.mark.parametrize("error", [
        TimeoutError("timed out"),
        ConnectionResetError("reset by peer"),
        httplib2.ServerNotFoundError("classroom.googleapis.com"),
    ])
    def test_transport_error_is_wrapped(self, service, error):
        service.courses().list().execute.side_effect = error

        with pytest.raises(GoogleClassroomError):
            GoogleClassroomClient(credentials=Mock()).list_courses()

    def test_requests_are_retried_by_the_library(self, service):
        service.courses().list().execute.return_value = {"courses": []}

        GoogleClassroomClient(credentials=Mock()).list_courses()

        service.courses().list().execute.assert_called_once_with(
            num_retries=GoogleClassroomClient.NUM_RETRIES
        )

    def test_student_roster_pairs_fall_back_to_user_id(self):
        pairs = student_roster_pairs([student("g1", "Ada Lovelace"), student("g2")])

        assert pairs == [("Ada Lovelace", "g1"), ("g2", "g2")]


@pytest.fixture
def google_classroom():
    client = Mock(spec=GoogleClassroomClient)
    with patch("rosters.permissions.GoogleClassroomClient.for_user", return_value=client):
        yield client


def google_url(organization, name):
    return reverse(f"rosters:google_classroom_{name}", kwargs={"slug": organization.slug})


def org_url(organization):
    return reverse("organizations:show", kwargs={"slug": organization.slug})


class TestGoogleClassroomViews:

    def test_not_connected(self, teacher_client, organization):
        response = teacher_client.get(google_url(organization, "select"))

        assert response["Location"] == org_url(organization)
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        assert "Please connect your Google account before importing from Google Classroom." in messages

    def test_select(self, teacher_client, organization, google_classroom):
        google_classroom.list_courses.return_value = [
            {"id": "1", "name": "Algebra"},
            {"id": "2", "name": "Biology"},
        ]

        response = teacher_client.get(google_url(organization, "select"))

        assert response.status_code == 200
        assert [c["name"] for c in response.context["courses"]] == ["Algebra", "Biology"]

    def test_search_is_case_insensitive(self, teacher_client, organization, google_classroom):
        google_classroom.list_courses.return_value = [
            {"id": "1", "name": "Algebra"},
            {"id": "2", "name": "Biology"},
        ]

        response = teacher_client.get(google_url(organization, "search"), {"query": "BIO"})

        assert [c["name"] for c in response.context["courses"]] == ["Biology"]
        assert b"Algebra" not in response.content

    def test_google_failure(self, teacher_client, organization, google_classroom):
        google_classroom.list_courses.side_effect = GoogleClassroomError("boom")

        response = teacher_client.get(google_url(organization, "select"))

        assert response["Location"] == org_url(organization)
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        assert "We could not reach Google Classroom. Please try again." in messages

    def test_google_timeout(self, teacher_client, organization, service):
        service.courses().list().execute.side_effect = TimeoutError("timed out")
        client = GoogleClassroomClient(credentials=Mock())

        with patch("rosters.permissions.GoogleClassroomClient.for_user", return_value=client):
            response = teacher_client.get(google_url(organization, "select"))

        assert response["Location"] == org_url(organization)
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        assert "We could not reach Google Classroom. Please try again." in messages

    def test_import(self, teacher_client, organization, google_classroom):
        google_classroom.list_course_students.return_value = [
            student("g1", "Ada Lovelace"),
            student("g2", "Grace Hopper"),
        ]

        response = teacher_client.post(google_url(organization, "import"), {"course_id": "42"})

        assert response["Location"] == org_url(organization)
        google_classroom.list_course_students.assert_called_once_with("42")
        organization.refresh_from_db()
        assert organization.google_course_id == "42"
        entries = organization.roster.entries.order_by("identifier")
        assert [(e.identifier, e.google_user_id) for e in entries] == [
            ("Ada Lovelace", "g1"),
            ("Grace Hopper", "g2"),
        ]

    def test_import_without_students(self, teacher_client, organization, google_classroom):
        google_classroom.list_course_students.return_value = []

        response = teacher_client.post(google_url(organization, "import"), {"course_id": "42"})

        assert response["Location"] == org_url(organization)
        organization.refresh_from_db()
        assert organization.roster is None
        messages = [str(m) for m in get_messages(response.wsgi_request)]
        assert "No new students were found in your Google Classroom." in messages
