"""
Timestamp helpers
"""
from datetime import datetime, timezone


def utc_now() -> str:
    """Current UTC time as ISO 8601 with a trailing Z"""
    return datetime.now(timezone.utc).replace(tzinfo=None).isoformat() + "Z"
