from datetime import datetime, timezone


def utcnow() -> datetime:
    """Current UTC time as a naive datetime (what DateTime columns store)."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
