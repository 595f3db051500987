from datetime import datetime, timezone


def utcnow() -> datetime:
    # Python-side timestamps keep sub-second resolution on every backend
    return datetime.now(timezone.utc)
