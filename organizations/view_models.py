# organizations/view_models.py
from accounts.utils.github import avatar_url_for, login_for, user_url_for


class AssignmentRepoView:
    """Presentation helpers for a student's repository on an assignment page."""

    AVATAR_SIZE = 96

    def __init__(self, assignment_repo):
        self.assignment_repo = assignment_repo

    @property
    def user(self):
        return self.assignment_repo.user

    def avatar_url(self):
        return avatar_url_for(self.user, self.AVATAR_SIZE)

    def user_login(self):
        return login_for(self.user)

    def user_url(self):
        return user_url_for(self.user)
