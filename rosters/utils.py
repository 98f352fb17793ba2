def pair_identifiers(raw, google_user_ids=None):
    """
    Split newline separated identifiers into (identifier, google_user_id) pairs.

    Google user ids line up with the raw lines by position, so the pairing
    happens before blank lines and duplicates are dropped. The first
    occurrence of an identifier wins.
    """
    google_user_ids = list(google_user_ids or [])
    pairs = []
    seen = set()

    for index, line in enumerate((raw or "").splitlines()):
        identifier = line.strip()
        if not identifier or identifier in seen:
            continue
        seen.add(identifier)

        google_user_id = google_user_ids[index] if index < len(google_user_ids) else None
        pairs.append((identifier, google_user_id))

    return pairs


def split_identifiers(raw):
    return [identifier for identifier, _ in pair_identifiers(raw)]
