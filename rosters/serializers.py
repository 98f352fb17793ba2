from django.contrib.auth import get_user_model
from rest_framework import serializers

from accounts.utils.github import github_profile_for
from .models import RosterEntry


def _github_login(user):
    profile = github_profile_for(user)
    return profile.login if profile else None


class RosterEntrySerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(read_only=True, allow_null=True)
    github_login = serializers.SerializerMethodField()
    linked = serializers.BooleanField(source="is_linked", read_only=True)

    class Meta:
        model = RosterEntry
        fields = ("id", "identifier", "user_id", "github_login", "linked")

    def get_github_login(self, entry):
        return _github_login(entry.user)


class UnlinkedUserSerializer(serializers.ModelSerializer):
    github_login = serializers.SerializerMethodField()

    class Meta:
        model = get_user_model()
        fields = ("id", "username", "github_login")

    def get_github_login(self, user):
        return _github_login(user)
