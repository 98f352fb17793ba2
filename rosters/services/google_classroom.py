"""Wrapper for the Google Classroom API calls used by roster imports."""

import logging
from typing import Any, Dict, List, Optional

import httplib2
from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import Resource, build
from googleapiclient.errors import HttpError

from accounts.models import GoogleClassroomCredential
from rosters.exceptions import GoogleClassroomError

logger = logging.getLogger(__name__)

# Network failures that never reached Google or got no answer back.
TRANSPORT_ERRORS = (TimeoutError, ConnectionError, httplib2.HttpLib2Error)


class GoogleClassroomClient:
    """Lists a teacher's courses and the students of one course."""

    SERVICE_NAME = "classroom"
    VERSION = "v1"
    PAGE_SIZE = 20
    NUM_RETRIES = 2

    def __init__(self, credentials):
        try:
            self.service: Resource = build(
                self.SERVICE_NAME,
                self.VERSION,
                credentials=credentials,
                cache_discovery=False,
            )
        except (HttpError, GoogleAuthError, *TRANSPORT_ERRORS) as e:
            logger.error("Failed to build Google Classroom service: %s", e)
            raise GoogleClassroomError(
                "Could not connect to Google Classroom."
            ) from e

    @classmethod
    def for_user(cls, user) -> Optional["GoogleClassroomClient"]:
        """Returns None when the user never authorized Google Classroom."""
        credential = GoogleClassroomCredential.objects.filter(user=user).first()
        if credential is None:
            return None
        return cls(credential.to_credentials())

    def _collect(self, request_for_page, key: str) -> List[Dict[str, Any]]:
        items = []
        page_token = None
        try:
            while True:
                response = request_for_page(page_token).execute(
                    num_retries=self.NUM_RETRIES
                )
                items.extend(response.get(key, []))

                page_token = response.get("nextPageToken")
                if not page_token:
                    break
        except HttpError as e:
            logger.error("Google Classroom request failed: %s %s", e.resp.status, e)
            raise GoogleClassroomError(
                f"Google Classroom request failed: {e.resp.status}",
                status_code=e.resp.status,
            ) from e
        except GoogleAuthError as e:
            logger.error("Google Classroom authorization failed: %s", e)
            raise GoogleClassroomError(
                "Your Google authorization has expired. Please reconnect your account."
            ) from e
        except TRANSPORT_ERRORS as e:
            logger.error("Google Classroom unreachable: %r", e)
            raise GoogleClassroomError(
                "Could not connect to Google Classroom."
            ) from e

        return items

    def list_courses(self) -> List[Dict[str, Any]]:
        """Active courses the authenticated user teaches."""
        courses = self._collect(
            lambda page_token: self.service.courses().list(
                teacherId="me",
                courseStates=["ACTIVE"],
                pageSize=self.PAGE_SIZE,
                pageToken=page_token,
            ),
            "courses",
        )
        logger.info("Fetched %s Google Classroom courses", len(courses))
        return courses

    def list_course_students(self, course_id: str) -> List[Dict[str, Any]]:
        students = self._collect(
            lambda page_token: self.service.courses().students().list(
                courseId=course_id,
                pageSize=self.PAGE_SIZE,
                pageToken=page_token,
            ),
            "students",
        )
        logger.info(
            "Fetched %s students from Google Classroom course %s",
            len(students), course_id,
        )
        return students


def student_roster_pairs(students):
    """(full name, Google user id) for each course student."""
    pairs = []
    for student in students:
        name = (
            student.get("profile", {})
            .get("name", {})
            .get("fullName")
        )
        pairs.append((name or student.get("userId", ""), student.get("userId")))
    return pairs
