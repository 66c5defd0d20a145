"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from sqlalchemy.orm import Session
from decision_assistant.infrastructure.clients.advice import AdviceClient
from decision_assistant.infrastructure.database.repositories import DecisionRepository
from decision_assistant.infrastructure.database.session import get_db


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_advice_client() -> AdviceClient:
    """Provide AI advice client instance"""
    return AdviceClient()


def get_decision_repository(db: Session = Depends(get_db)) -> DecisionRepository:
    """Provide the history store bound to the request's session"""
    return DecisionRepository(db)
