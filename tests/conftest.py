"""Pytest configuration and shared fixtures"""

import pytest

from accounts.models import GitHubProfile
from organizations.models import (
    Assignment,
    AssignmentRepo,
    Group,
    Grouping,
    Organization,
    OrganizationMember,
    RepoAccess,
)
from rosters.models import Roster, RosterEntry


@pytest.fixture
def teacher(django_user_model):
    """Teacher who manages the sample organization"""
    return django_user_model.objects.create_user(
        username="teacher",
        email="teacher@example.com",
        password="password",
    )


@pytest.fixture
def organization(teacher):
    """Sample classroom managed by `teacher`"""
    org = Organization.objects.create(title="Intro to Git", slug="intro-to-git")
    OrganizationMember.objects.create(user=teacher, organization=org)
    return org


@pytest.fixture
def teacher_client(client, teacher):
    client.force_login(teacher)
    return client


@pytest.fixture
def make_student(django_user_model):
    """Factory for students with a GitHub profile"""
    counter = {"n": 0}

    def _make(login=None):
        counter["n"] += 1
        login = login or f"student{counter['n']}"
        user = django_user_model.objects.create_user(username=login)
        GitHubProfile.objects.create(
            user=user,
            github_id=1000 + counter["n"],
            login=login,
            name=login.title(),
        )
        return user

    return _make


@pytest.fixture
def roster(organization):
    """Roster with three unlinked entries attached to `organization`"""
    roster = Roster.objects.create(identifier_name="Email")
    for identifier in ("alice@example.com", "bob@example.com", "carol@example.com"):
        RosterEntry.objects.create(roster=roster, identifier=identifier)

    organization.roster = roster
    organization.save(update_fields=["roster"])
    return roster


@pytest.fixture
def assignment(organization):
    return Assignment.objects.create(
        title="Hello World",
        slug="hello-world",
        organization=organization,
    )


@pytest.fixture
def accept_assignment():
    """Record that `user` accepted `assignment`"""
    def _accept(assignment, user):
        return AssignmentRepo.objects.create(assignment=assignment, user=user)

    return _accept


@pytest.fixture
def grouping(organization):
    return Grouping.objects.create(
        title="Project teams",
        slug="project-teams",
        organization=organization,
    )


@pytest.fixture
def join_group(organization):
    """Put `user` in a group of `grouping`, creating the group on demand"""
    def _join(grouping, title, user):
        group, _ = Group.objects.get_or_create(grouping=grouping, title=title)
        repo_access = RepoAccess.objects.create(user=user, organization=organization)
        group.repo_accesses.add(repo_access)
        return group

    return _join
