"""POST /v1/financial/* - financing vs consortium comparison and financial advice"""

import logging
from fastapi import APIRouter, Depends, Request

from decision_assistant.api.v1.advice import request_advice
from decision_assistant.api.v1.schemas import (
    AdviceContext,
    AdviceResponse,
    CriterionSuggestionSchema,
    FinancialAnalysisAdviceRequest,
    FinancialSpendingAdviceRequest,
    FinancialTotalsRequest,
    FinancialTotalsResponse,
    OptionCost,
    SuggestionsResponse,
)
from decision_assistant.api.dependencies import get_advice_client, get_request_id
from decision_assistant.config import settings
from decision_assistant.domain.financial import (
    compute_financial_totals,
    consortium_monthly_payment,
    financing_monthly_payment,
)
from decision_assistant.infrastructure.clients.advice import AdviceClient
from decision_assistant.infrastructure.observability.metrics import uncomputable_totals_counter
from decision_assistant.utils.number_utils import round_money

router = APIRouter()


@router.post("/financial/totals", response_model=FinancialTotalsResponse)
def get_financial_totals(request_body: FinancialTotalsRequest, request: Request):
    """
    Total cost of financing and consortium for the given terms.

    Uncomputable totals are reported as 0 unless STRICT_NUMERIC_RESULTS is
    enabled, in which case they are null. The computable flags are always exact.
    """
    financing = request_body.financing.to_domain()
    consortium = request_body.consortium.to_domain()

    exact = compute_financial_totals(financing, consortium, strict=True)
    reported = exact if settings.strict_numeric_results else compute_financial_totals(financing, consortium)

    for option, total in (("financing", exact.financing_total), ("consortium", exact.consortium_total)):
        if total is None:
            uncomputable_totals_counter.labels(option=option).inc()
            logging.warning(
                f"Uncomputable {option} total",
                extra={"request_id": get_request_id(request), "option": option},
            )

    cheaper_option = None
    difference = None
    if exact.financing_total is not None and exact.consortium_total is not None:
        difference = round_money(abs(exact.financing_total - exact.consortium_total))
        if exact.financing_total < exact.consortium_total:
            cheaper_option = "financing"
        elif exact.consortium_total < exact.financing_total:
            cheaper_option = "consortium"

    return FinancialTotalsResponse(
        financing=OptionCost(
            total=round_money(reported.financing_total),
            monthly_payment=round_money(financing_monthly_payment(financing)),
            computable=exact.financing_total is not None,
        ),
        consortium=OptionCost(
            total=round_money(reported.consortium_total),
            monthly_payment=round_money(consortium_monthly_payment(consortium)),
            computable=exact.consortium_total is not None,
        ),
        cheaper_option=cheaper_option,
        difference=difference,
    )


@router.post("/financial/advice", response_model=AdviceResponse)
async def financial_spending_advice(
    request_body: FinancialSpendingAdviceRequest,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Advice on financing vs consortium, with computed totals as context"""
    advice = await request_advice(
        "financial_spending",
        get_request_id(request),
        advice_client.financial_spending_advice(
            request_body.context,
            request_body.financing.to_domain(),
            request_body.consortium.to_domain(),
        ),
    )
    return AdviceResponse(advice=advice)


@router.post("/financial/analysis/advice", response_model=AdviceResponse)
async def financial_analysis_advice(
    request_body: FinancialAnalysisAdviceRequest,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Advice on a decision described by its fixed and variable costs"""
    advice = await request_advice(
        "financial_analysis",
        get_request_id(request),
        advice_client.financial_analysis_advice(
            request_body.context,
            request_body.fixed_cost,
            request_body.variable_cost,
        ),
    )
    return AdviceResponse(advice=advice)


@router.post("/financial/weights", response_model=SuggestionsResponse)
async def financial_weight_suggestions(
    request_body: AdviceContext,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Suggested financial criteria and weights for a decision context"""
    suggestions = await request_advice(
        "financial_weights",
        get_request_id(request),
        advice_client.financial_weight_suggestions(request_body.context),
    )
    return SuggestionsResponse(
        suggestions=[CriterionSuggestionSchema(name=s.name, weight=s.weight, rationale=s.rationale) for s in suggestions],
        total_weight=sum(s.weight for s in suggestions),
    )
