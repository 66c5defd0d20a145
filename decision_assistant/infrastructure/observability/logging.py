"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from decision_assistant.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_advice_request(
    request_id: str,
    operation: str,
    succeeded: bool,
    duration_ms: float,
) -> None:
    """Log structured outcome of an AI advice call"""
    logging.info(
        "Advice request completed",
        extra={
            "request_id": request_id,
            "step": "advice_complete",
            "operation": operation,
            "outcome": "success" if succeeded else "failure",
            "duration_ms": duration_ms,
        },
    )


def log_decision_saved(request_id: str, decision_id: str, kind: str) -> None:
    """Log a finalized decision added to history"""
    logging.info(
        "Decision saved",
        extra={
            "request_id": request_id,
            "step": "decision_saved",
            "decision_id": decision_id,
            "decision_kind": kind,
        },
    )
