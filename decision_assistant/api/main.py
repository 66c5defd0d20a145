"""FastAPI application factory"""

from contextlib import asynccontextmanager
from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from decision_assistant.api.middleware import RequestIDMiddleware, MetricsMiddleware
from decision_assistant.api.v1 import advice, financial, weighted, history
from decision_assistant.infrastructure.database.session import init_db
from decision_assistant.infrastructure.observability.logging import setup_logging
from decision_assistant.config import settings

# Setup structured logging
setup_logging(settings.log_level)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    yield


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Decision Assistant",
        description="Decision support: financial comparisons, weighted scoring, AI advice and decision history",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(advice.router, prefix="/v1", tags=["advice"])
    app.include_router(financial.router, prefix="/v1", tags=["financial"])
    app.include_router(weighted.router, prefix="/v1", tags=["weighted"])
    app.include_router(history.router, prefix="/v1", tags=["history"])

    return app


app = create_app()
