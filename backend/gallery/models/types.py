"""
Shared column types and defaults
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY

# TEXT[] on PostgreSQL; SQLite has no arrays, so lists are stored as JSON text.
# A Python None is stored as SQL NULL on both.
StringArray = ARRAY(Text).with_variant(JSON(none_as_null=True), "sqlite")


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp with microseconds, for createdAt columns."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
