"""POST /v1/weighted/* - weighted criteria analysis"""

from fastapi import APIRouter, Depends, Request

from decision_assistant.api.v1.advice import request_advice
from decision_assistant.api.v1.schemas import (
    AdviceContext,
    AdviceResponse,
    CriterionSuggestionSchema,
    SuggestionsResponse,
    WeightedAdviceRequest,
    WeightedResultSchema,
    WeightedScoreRequest,
    WeightedScoreResponse,
)
from decision_assistant.api.dependencies import get_advice_client, get_request_id
from decision_assistant.domain.scoring import best_option, rank_results, score_options, total_weight, weights_balanced
from decision_assistant.infrastructure.clients.advice import AdviceClient

router = APIRouter()


@router.post("/weighted/score", response_model=WeightedScoreResponse)
def score_weighted_options(request_body: WeightedScoreRequest):
    """
    Final weighted score of each option.

    Results keep the input order; ranking is the same results best first.
    Weights that do not add up to 100 are reported, not rejected.
    """
    criteria = [c.to_domain() for c in request_body.criteria]
    options = [o.to_domain() for o in request_body.options]

    results = score_options(criteria, options)
    best = best_option(results)

    return WeightedScoreResponse(
        results=[WeightedResultSchema(name=r.name, final_score=r.final_score) for r in results],
        ranking=[WeightedResultSchema(name=r.name, final_score=r.final_score) for r in rank_results(results)],
        total_weight=total_weight(criteria),
        weights_balanced=weights_balanced(criteria),
        best_option=best.name if best else None,
    )


@router.post("/weighted/suggestions", response_model=SuggestionsResponse)
async def weighted_suggestions(
    request_body: AdviceContext,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Suggested criteria and weights for a decision context"""
    suggestions = await request_advice(
        "weighted_suggestions",
        get_request_id(request),
        advice_client.weighted_suggestions(request_body.context),
    )
    return SuggestionsResponse(
        suggestions=[CriterionSuggestionSchema(name=s.name, weight=s.weight, rationale=s.rationale) for s in suggestions],
        total_weight=sum(s.weight for s in suggestions),
    )


@router.post("/weighted/advice", response_model=AdviceResponse)
async def weighted_advice(
    request_body: WeightedAdviceRequest,
    request: Request,
    advice_client: AdviceClient = Depends(get_advice_client),
):
    """Narrated recommendation over the computed weighted scores"""
    criteria = [c.to_domain() for c in request_body.criteria]
    options = [o.to_domain() for o in request_body.options]
    results = score_options(criteria, options)

    advice = await request_advice(
        "weighted_advice",
        get_request_id(request),
        advice_client.weighted_advice(request_body.context, criteria, options, results),
    )
    return AdviceResponse(advice=advice)
