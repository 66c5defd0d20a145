"""/v1/decisions - history of finalized decisions"""

import uuid
import logging
from datetime import datetime, timezone
from typing import Annotated, Optional
from fastapi import APIRouter, Body, Depends, HTTPException, Query, Request, Response
from sqlalchemy.orm import Session

from decision_assistant.api.v1.schemas import (
    ClearHistoryResponse,
    DecisionCreate,
    DecisionItem,
    HistoryResponse,
    WeightedResultSchema,
)
from decision_assistant.api.dependencies import get_decision_repository, get_request_id
from decision_assistant.config import settings
from decision_assistant.domain.history import decision_final_scores, decision_payload
from decision_assistant.domain.models import Decision
from decision_assistant.infrastructure.database.session import get_db
from decision_assistant.infrastructure.database.repositories import DecisionRepository
from decision_assistant.infrastructure.observability.logging import log_decision_saved
from decision_assistant.infrastructure.observability.metrics import decisions_deleted_counter, record_decision_saved

router = APIRouter()


def _parse_decision_id(decision_id: str) -> uuid.UUID:
    try:
        return uuid.UUID(decision_id)
    except ValueError:
        raise HTTPException(status_code=400, detail="Invalid decision ID format")


def _to_item(decision: Decision) -> DecisionItem:
    final_scores = decision_final_scores(decision)
    return DecisionItem(
        decision_id=decision.id,
        type=decision.kind,
        context=decision.context,
        created_at=decision.created_at.isoformat(),
        details=decision_payload(decision),
        final_scores=(
            [WeightedResultSchema(name=r.name, final_score=r.final_score) for r in final_scores]
            if final_scores is not None
            else None
        ),
    )


@router.get("/decisions", response_model=HistoryResponse)
def list_decisions(
    limit: Optional[int] = Query(None, ge=1, le=500, description="Maximum number of decisions"),
    repository: DecisionRepository = Depends(get_decision_repository),
):
    """
    Retrieve finalized decisions, most recent first.

    Weighted analyses include their final scores, recomputed on read.
    """
    decisions = repository.list_decisions(limit=limit or settings.history_page_size)
    return HistoryResponse(decisions=[_to_item(d) for d in decisions])


@router.post("/decisions", response_model=DecisionItem, status_code=201)
def create_decision(
    request: Request,
    request_body: Annotated[DecisionCreate, Body(discriminator="type")],
    db: Session = Depends(get_db),
    repository: DecisionRepository = Depends(get_decision_repository),
):
    """Finalize a decision and add it to history"""
    request_id = get_request_id(request)
    decision = request_body.to_domain(str(uuid.uuid4()), datetime.now(timezone.utc))

    try:
        repository.create_decision(decision)
        db.commit()
    except Exception as e:
        db.rollback()
        logging.error(f"Failed to save decision: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    record_decision_saved(decision.kind.value)
    log_decision_saved(request_id, decision.id, decision.kind.value)

    return _to_item(decision)


@router.get("/decisions/{decision_id}", response_model=DecisionItem)
def get_decision(
    decision_id: str,
    repository: DecisionRepository = Depends(get_decision_repository),
):
    """Retrieve a single decision"""
    decision = repository.get_decision(_parse_decision_id(decision_id))
    if not decision:
        raise HTTPException(status_code=404, detail="Decision not found")
    return _to_item(decision)


@router.delete("/decisions/{decision_id}", status_code=204)
def delete_decision(
    decision_id: str,
    db: Session = Depends(get_db),
    repository: DecisionRepository = Depends(get_decision_repository),
):
    """Remove a single decision from history"""
    if not repository.delete_decision(_parse_decision_id(decision_id)):
        raise HTTPException(status_code=404, detail="Decision not found")
    db.commit()
    decisions_deleted_counter.inc()
    return Response(status_code=204)


@router.delete("/decisions", response_model=ClearHistoryResponse)
def clear_decisions(
    db: Session = Depends(get_db),
    repository: DecisionRepository = Depends(get_decision_repository),
):
    """Remove every decision from history"""
    deleted = repository.delete_all()
    db.commit()
    decisions_deleted_counter.inc(deleted)
    return ClearHistoryResponse(deleted=deleted)
