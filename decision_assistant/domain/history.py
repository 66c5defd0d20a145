"""Translation between decision variants and their stored kind-specific payload"""

from datetime import datetime
from typing import Any, Dict, List, Optional
from decision_assistant.domain.models import (
    Criterion,
    Decision,
    DecisionKind,
    FinancialAnalysisDecision,
    FinancialSpendingDecision,
    MultipleChoiceDecision,
    ScoredOption,
    WeightedAnalysisDecision,
    WeightedResult,
    YesNoDecision,
)
from decision_assistant.domain.exceptions import UnknownDecisionKindError
from decision_assistant.domain.scoring import score_options


def decision_payload(decision: Decision) -> Dict[str, Any]:
    """Kind-specific fields of a decision as a JSON-serializable dict"""
    if isinstance(decision, YesNoDecision):
        return {"decision": decision.decision}

    if isinstance(decision, (MultipleChoiceDecision, FinancialSpendingDecision)):
        return {"options": list(decision.options), "decision": decision.decision}

    if isinstance(decision, FinancialAnalysisDecision):
        return {"fixed_cost": decision.fixed_cost, "variable_cost": decision.variable_cost}

    if isinstance(decision, WeightedAnalysisDecision):
        return {
            "criteria": [{"name": c.name, "weight": c.weight} for c in decision.criteria],
            "options": [{"name": o.name, "scores": dict(o.scores)} for o in decision.options],
            "decision": decision.decision,
        }

    raise UnknownDecisionKindError(f"Cannot serialize decision of type {type(decision).__name__}")


def decision_from_record(
    kind: str,
    decision_id: str,
    context: str,
    created_at: datetime,
    payload: Dict[str, Any],
) -> Decision:
    """
    Rebuild the decision variant for a stored record.

    Raises:
        UnknownDecisionKindError: kind is not one of DecisionKind
    """
    try:
        kind = DecisionKind(kind)
    except ValueError as e:
        raise UnknownDecisionKindError(f"Unknown decision kind: {kind!r}") from e

    base = {"id": decision_id, "context": context, "created_at": created_at}

    if kind is DecisionKind.YES_NO:
        return YesNoDecision(**base, decision=payload["decision"])

    if kind is DecisionKind.MULTIPLE_CHOICE:
        return MultipleChoiceDecision(**base, options=list(payload["options"]), decision=payload["decision"])

    if kind is DecisionKind.FINANCIAL_SPENDING:
        return FinancialSpendingDecision(**base, options=list(payload["options"]), decision=payload["decision"])

    if kind is DecisionKind.FINANCIAL_ANALYSIS:
        return FinancialAnalysisDecision(
            **base,
            fixed_cost=payload["fixed_cost"],
            variable_cost=payload["variable_cost"],
        )

    if kind is DecisionKind.WEIGHTED_ANALYSIS:
        return WeightedAnalysisDecision(
            **base,
            criteria=[Criterion(name=c["name"], weight=c["weight"]) for c in payload["criteria"]],
            options=[ScoredOption(name=o["name"], scores=dict(o["scores"])) for o in payload["options"]],
            decision=payload["decision"],
        )

    raise UnknownDecisionKindError(f"Unhandled decision kind: {kind.value}")


def decision_final_scores(decision: Decision) -> Optional[List[WeightedResult]]:
    """Recompute weighted scores for display; None for kinds without scores"""
    if isinstance(decision, WeightedAnalysisDecision):
        return score_options(decision.criteria, decision.options)
    return None
