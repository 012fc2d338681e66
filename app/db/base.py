from datetime import datetime, timezone

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def utcnow() -> datetime:
    """Column default; Python-side so rows created in the same second still order."""
    return datetime.now(timezone.utc)
