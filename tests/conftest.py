"""Pytest fixtures for testing"""

import pytest
from typing import Generator
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from decision_assistant.api.main import create_app
from decision_assistant.api.dependencies import get_advice_client
from decision_assistant.infrastructure.clients.advice import AdviceClient
from decision_assistant.infrastructure.database.models import Base
from decision_assistant.infrastructure.database.session import get_db
from decision_assistant.domain.models import Criterion, ScoredOption


# Test database
TEST_DATABASE_URL = "sqlite:///./test.db"
engine = create_engine(TEST_DATABASE_URL, connect_args={"check_same_thread": False})
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class FakeAdviceClient(AdviceClient):
    """Advice client that records prompts instead of calling the AI service"""

    def __init__(self, reply: str = "**Recommendation:** go for it.", error: Exception | None = None):
        super().__init__(base_url="http://advice.test", api_key="test-key")
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def complete(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def db() -> Generator[Session, None, None]:
    """Create test database and session"""
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def advice_client() -> FakeAdviceClient:
    return FakeAdviceClient()


@pytest.fixture
def client(db: Session, advice_client: FakeAdviceClient) -> TestClient:
    """Create FastAPI test client with test database and fake advice service"""
    app = create_app()

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_advice_client] = lambda: advice_client
    return TestClient(app)


@pytest.fixture
def car_criteria() -> list[Criterion]:
    """Balanced criteria for choosing a car"""
    return [
        Criterion(name="Price", weight=40),
        Criterion(name="Safety", weight=35),
        Criterion(name="Comfort", weight=25),
    ]


@pytest.fixture
def car_options() -> list[ScoredOption]:
    return [
        ScoredOption(name="Hatchback", scores={"Price": 9, "Safety": 6, "Comfort": 5}),
        ScoredOption(name="SUV", scores={"Price": 5, "Safety": 9, "Comfort": 8}),
        ScoredOption(name="Sedan", scores={"Price": 7, "Safety": 8}),
    ]
