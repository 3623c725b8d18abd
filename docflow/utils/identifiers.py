"""ID generation and timestamp utilities."""

import uuid
from datetime import datetime, timezone


def generate_doc_id() -> str:
    """Generate a unique document ID (UUID4)."""
    return str(uuid.uuid4())


def generate_session_id() -> str:
    """Generate a unique runner session ID (UUID4)."""
    return str(uuid.uuid4())


def generate_entry_id() -> str:
    """Generate a unique trace entry ID (UUID4)."""
    return str(uuid.uuid4())


def utc_timestamp() -> str:
    """Generate an ISO8601 UTC timestamp."""
    return datetime.now(timezone.utc).isoformat()
