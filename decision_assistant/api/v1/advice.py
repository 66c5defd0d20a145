"""POST /v1/yes-no/advice, /v1/multiple-choice/advice - AI advice endpoints"""

import time
import logging
from typing import Awaitable, TypeVar
from fastapi import APIRouter, Depends, HTTPException, Request

from decision_assistant.api.v1.schemas import AdviceContext, AdviceResponse, MultipleChoiceAdviceRequest
from decision_assistant.api.dependencies import get_advice_client, get_request_id
from decision_assistant.infrastructure.clients.advice import AdviceClient
from decision_assistant.domain.exceptions import AdviceServiceError
from decision_assistant.infrastructure.observability.metrics import record_advice
from decision_assistant.infrastructure.observability.logging import log_advice_request

router = APIRouter()

ADVICE_FAILED_MESSAGE = "Failed to get AI advice. Please try again."

T = TypeVar("T")


async def request_advice(operation: str, request_id: str, call: Awaitable[T]) -> T:
    """
    Await an advice call with metrics and structured logging.

    Advice failures never leak details to the user: they become a 503 with a
    generic message, the cause is logged.
    """
    start_time = time.time()
    succeeded = False
    try:
        result = await call
        succeeded = True
        return result

    except AdviceServiceError as e:
        logging.error(f"Advice service error: {e}", extra={"request_id": request_id, "operation": operation})
        raise HTTPException(status_code=503, detail=ADVICE_FAILED_MESSAGE)

    finally:
        duration_ms = (time.time() - start_time) * 1000
        record_advice(operation, succeeded)
        log_advice_request(request_id, operation, succeeded, duration_ms)


@router.post("/yes-no/advice", response_model=AdviceResponse)
async def yes_no_advice(
    request_body: AdviceContext,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Advice for a yes/no decision"""
    advice = await request_advice(
        "yes_no",
        get_request_id(request),
        advice_client.yes_no_advice(request_body.context),
    )
    return AdviceResponse(advice=advice)


@router.post("/multiple-choice/advice", response_model=AdviceResponse)
async def multiple_choice_advice(
    request_body: MultipleChoiceAdviceRequest,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Advice for choosing among two or more described options"""
    advice = await request_advice(
        "multiple_choice",
        get_request_id(request),
        advice_client.multiple_choice_advice(
            request_body.context,
            [option.to_domain() for option in request_body.options],
        ),
    )
    return AdviceResponse(advice=advice)
