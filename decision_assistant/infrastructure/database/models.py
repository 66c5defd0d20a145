"""SQLAlchemy ORM models for the decision history"""

import uuid
from datetime import datetime, timezone
from sqlalchemy import Column, DateTime, Text, JSON, Uuid
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class DecisionRecord(Base):
    """Finalized decision; kind-specific fields live in payload"""

    __tablename__ = "decision_record"

    id = Column(Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4)
    kind = Column(Text, nullable=False, index=True)
    context = Column(Text, nullable=False)
    payload = Column(JSON, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
