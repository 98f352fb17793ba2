from .organization import Organization
from .membership import OrganizationMember
from .role import OrganizationRole
from .assignment import Assignment, AssignmentRepo
from .grouping import Grouping, Group, RepoAccess

__all__ = [
    "Organization",
    "OrganizationMember",
    "OrganizationRole",
    "Assignment",
    "AssignmentRepo",
    "Grouping",
    "Group",
    "RepoAccess",
]
