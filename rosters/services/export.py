# rosters/services/export.py
import csv
import io

from accounts.utils.github import github_profile_for

HEADERS = ["identifier", "linked", "github_username", "github_id", "name"]


def user_to_group_map(grouping):
    """
    Maps user ids to group titles for a grouping.
    Without a grouping the mapping is empty.
    """
    mapping = {}
    if grouping is None:
        return mapping

    for group in grouping.groups.prefetch_related("repo_accesses"):
        for repo_access in group.repo_accesses.all():
            if repo_access.user_id is not None:
                mapping[repo_access.user_id] = group.title

    return mapping


def roster_rows(entries, user_to_group=None):
    """
    Yields the header row, then one row per entry. The group_name column
    is present whenever a mapping is passed, even an empty one.
    """
    with_groups = user_to_group is not None

    yield (HEADERS + ["group_name"]) if with_groups else list(HEADERS)

    for entry in entries:
        user = entry.user
        profile = github_profile_for(user)

        row = [
            entry.identifier,
            "yes" if user else "no",
            profile.login if profile else (user.get_username() if user else ""),
            profile.github_id if profile else "",
            (profile.name if profile else user.get_full_name()) if user else "",
        ]
        if with_groups:
            row.append(user_to_group.get(entry.user_id, "") if user else "")

        yield row


def write_roster_csv(stream, entries, user_to_group=None):
    writer = csv.writer(stream)
    for row in roster_rows(entries, user_to_group):
        writer.writerow(row)


def roster_to_csv(entries, user_to_group=None):
    buffer = io.StringIO()
    write_roster_csv(buffer, entries, user_to_group)
    return buffer.getvalue()
