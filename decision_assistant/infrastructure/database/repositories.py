"""Data access layer for the decision history"""

import uuid
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy.orm import Session
from decision_assistant.infrastructure.database.models import DecisionRecord
from decision_assistant.domain.models import Decision
from decision_assistant.domain.history import decision_payload, decision_from_record


def _as_utc(value: datetime) -> datetime:
    # SQLite returns naive datetimes for timezone-aware columns
    return value.replace(tzinfo=timezone.utc) if value.tzinfo is None else value


class DecisionRepository:
    """
    History store for finalized decisions.

    Records are only created and deleted, never updated.
    """

    def __init__(self, db: Session):
        self.db = db

    def create_decision(self, decision: Decision) -> DecisionRecord:
        """Persist a finalized decision"""
        db_decision = DecisionRecord(
            id=uuid.UUID(decision.id),
            kind=decision.kind.value,
            context=decision.context,
            payload=decision_payload(decision),
            created_at=decision.created_at,
        )
        self.db.add(db_decision)
        self.db.flush()  # Surface constraint errors before commit
        return db_decision

    def list_decisions(self, limit: int = 50) -> List[Decision]:
        """Fetch most recent decisions first"""
        records = (
            self.db.query(DecisionRecord)
            .order_by(DecisionRecord.created_at.desc())
            .limit(limit)
            .all()
        )
        return [self._to_domain(record) for record in records]

    def get_decision(self, decision_id: uuid.UUID) -> Optional[Decision]:
        """Fetch a single decision by id"""
        record = self._get_record(decision_id)
        return self._to_domain(record) if record else None

    def delete_decision(self, decision_id: uuid.UUID) -> bool:
        """Delete a single decision, returns False if it did not exist"""
        record = self._get_record(decision_id)
        if record is None:
            return False
        self.db.delete(record)
        self.db.flush()
        return True

    def delete_all(self) -> int:
        """Clear the whole history, returns number of deleted records"""
        deleted = self.db.query(DecisionRecord).delete(synchronize_session=False)
        self.db.flush()
        return deleted

    def _get_record(self, decision_id: uuid.UUID) -> Optional[DecisionRecord]:
        return (
            self.db.query(DecisionRecord)
            .filter(DecisionRecord.id == decision_id)
            .first()
        )

    @staticmethod
    def _to_domain(record: DecisionRecord) -> Decision:
        return decision_from_record(
            kind=record.kind,
            decision_id=str(record.id),
            context=record.context,
            created_at=_as_utc(record.created_at),
            payload=record.payload,
        )
