"""Pydantic schemas for API request/response validation"""

from datetime import datetime
from typing import Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field, field_validator
from decision_assistant.domain.models import (
    AdviceOption,
    ConsortiumTerms,
    Criterion,
    DecisionKind,
    FINANCIAL_SPENDING_OPTIONS,
    FinancialAnalysisDecision,
    FinancialSpendingDecision,
    FinancingTerms,
    MultipleChoiceDecision,
    ScoredOption,
    WeightedAnalysisDecision,
    YesNoDecision,
)

CONTEXT_MIN_LENGTH = 10


class AdviceContext(BaseModel):
    """Free-text decision context shared by every advice request"""

    context: str = Field(..., min_length=CONTEXT_MIN_LENGTH, description="What the decision is about")


# --- Financial comparison ---


class FinancingTermsSchema(BaseModel):
    total_value: float = Field(..., ge=0, description="Asset value")
    down_payment: float = Field(0, ge=0, description="Down payment")
    interest_rate: float = Field(..., ge=0, description="Monthly interest rate in percent")
    installments: int = Field(..., ge=1, description="Number of monthly installments")

    def to_domain(self) -> FinancingTerms:
        return FinancingTerms(
            total_value=self.total_value,
            down_payment=self.down_payment,
            interest_rate_monthly_percent=self.interest_rate,
            installment_count=self.installments,
        )


class ConsortiumTermsSchema(BaseModel):
    total_value: float = Field(..., ge=0, description="Credit value")
    admin_fee: float = Field(..., ge=0, description="Administrative fee in percent")
    installments: int = Field(..., ge=1, description="Number of monthly installments")

    def to_domain(self) -> ConsortiumTerms:
        return ConsortiumTerms(
            total_value=self.total_value,
            admin_fee_percent=self.admin_fee,
            installment_count=self.installments,
        )


class FinancialTotalsRequest(BaseModel):
    """Request body for POST /v1/financial/totals"""

    financing: FinancingTermsSchema
    consortium: ConsortiumTermsSchema


class OptionCost(BaseModel):
    total: Optional[float]
    monthly_payment: Optional[float]
    computable: bool


class FinancialTotalsResponse(BaseModel):
    """Response for POST /v1/financial/totals"""

    financing: OptionCost
    consortium: OptionCost
    cheaper_option: Optional[Literal["financing", "consortium"]] = None
    difference: Optional[float] = None


class FinancialSpendingAdviceRequest(AdviceContext):
    financing: FinancingTermsSchema
    consortium: ConsortiumTermsSchema


class FinancialAnalysisAdviceRequest(AdviceContext):
    fixed_cost: float = Field(..., ge=0)
    variable_cost: float = Field(..., ge=0)


# --- Advice ---


class AdviceOptionSchema(BaseModel):
    value: str = Field(..., min_length=1, description="Option text")
    description: str = ""

    def to_domain(self) -> AdviceOption:
        return AdviceOption(value=self.value, description=self.description)


class MultipleChoiceAdviceRequest(AdviceContext):
    options: List[AdviceOptionSchema] = Field(..., min_length=2)

    @field_validator("options", mode="before")
    @classmethod
    def drop_blank_options(cls, options):
        # Empty form rows are discarded before counting
        if isinstance(options, list):
            return [o for o in options if not (isinstance(o, dict) and not str(o.get("value", "")).strip())]
        return options


class AdviceResponse(BaseModel):
    advice: str


class CriterionSuggestionSchema(BaseModel):
    name: str
    weight: int
    rationale: str


class SuggestionsResponse(BaseModel):
    suggestions: List[CriterionSuggestionSchema]
    total_weight: int


# --- Weighted analysis ---


class CriterionSchema(BaseModel):
    name: str = Field(..., min_length=1)
    weight: int = Field(..., ge=0, le=100, description="Integer percentage weight")

    def to_domain(self) -> Criterion:
        return Criterion(name=self.name, weight=self.weight)


class ScoredOptionSchema(BaseModel):
    name: str = Field(..., min_length=1)
    scores: Dict[str, float] = Field(default_factory=dict, description="Score per criterion name")

    def to_domain(self) -> ScoredOption:
        return ScoredOption(name=self.name, scores=dict(self.scores))


def _unique_criteria(criteria: List[CriterionSchema]) -> List[CriterionSchema]:
    names = [c.name for c in criteria]
    if len(names) != len(set(names)):
        raise ValueError("Criterion names must be unique")
    return criteria


class WeightedScoreRequest(BaseModel):
    """Request body for POST /v1/weighted/score"""

    criteria: List[CriterionSchema]
    options: List[ScoredOptionSchema]

    @field_validator("criteria")
    @classmethod
    def unique_criteria(cls, criteria):
        return _unique_criteria(criteria)


class WeightedResultSchema(BaseModel):
    name: str
    final_score: float


class WeightedScoreResponse(BaseModel):
    """Response for POST /v1/weighted/score"""

    results: List[WeightedResultSchema]
    ranking: List[WeightedResultSchema]
    total_weight: int
    weights_balanced: bool
    best_option: Optional[str] = None


class WeightedAdviceRequest(AdviceContext, WeightedScoreRequest):
    options: List[ScoredOptionSchema] = Field(..., min_length=2)


# --- Decision history ---


class YesNoDecisionCreate(BaseModel):
    type: Literal["yes_no"]
    context: str = Field(..., min_length=CONTEXT_MIN_LENGTH)
    decision: Literal["yes", "no"]

    def to_domain(self, decision_id: str, created_at: datetime) -> YesNoDecision:
        return YesNoDecision(id=decision_id, context=self.context, created_at=created_at, decision=self.decision)


class MultipleChoiceDecisionCreate(BaseModel):
    type: Literal["multiple_choice"]
    context: str = Field(..., min_length=CONTEXT_MIN_LENGTH)
    options: List[str] = Field(..., min_length=2)
    decision: str = Field(..., min_length=1)

    def to_domain(self, decision_id: str, created_at: datetime) -> MultipleChoiceDecision:
        return MultipleChoiceDecision(
            id=decision_id,
            context=self.context,
            created_at=created_at,
            options=self.options,
            decision=self.decision,
        )


class FinancialSpendingDecisionCreate(BaseModel):
    type: Literal["financial_spending"]
    context: str = Field(..., min_length=CONTEXT_MIN_LENGTH)
    options: List[str] = Field(default_factory=lambda: list(FINANCIAL_SPENDING_OPTIONS))
    decision: str = Field(..., min_length=1)

    def to_domain(self, decision_id: str, created_at: datetime) -> FinancialSpendingDecision:
        return FinancialSpendingDecision(
            id=decision_id,
            context=self.context,
            created_at=created_at,
            options=self.options,
            decision=self.decision,
        )


class FinancialAnalysisDecisionCreate(BaseModel):
    type: Literal["financial_analysis"]
    context: str = Field(..., min_length=CONTEXT_MIN_LENGTH)
    fixed_cost: float = Field(..., ge=0)
    variable_cost: float = Field(..., ge=0)

    def to_domain(self, decision_id: str, created_at: datetime) -> FinancialAnalysisDecision:
        return FinancialAnalysisDecision(
            id=decision_id,
            context=self.context,
            created_at=created_at,
            fixed_cost=self.fixed_cost,
            variable_cost=self.variable_cost,
        )


class WeightedAnalysisDecisionCreate(BaseModel):
    type: Literal["weighted_analysis"]
    context: str = Field(..., min_length=CONTEXT_MIN_LENGTH)
    criteria: List[CriterionSchema] = Field(..., min_length=1)
    options: List[ScoredOptionSchema] = Field(..., min_length=2)
    decision: str = Field(..., min_length=1)

    @field_validator("criteria")
    @classmethod
    def unique_criteria(cls, criteria):
        return _unique_criteria(criteria)

    def to_domain(self, decision_id: str, created_at: datetime) -> WeightedAnalysisDecision:
        return WeightedAnalysisDecision(
            id=decision_id,
            context=self.context,
            created_at=created_at,
            criteria=[c.to_domain() for c in self.criteria],
            options=[o.to_domain() for o in self.options],
            decision=self.decision,
        )


DecisionCreate = Union[
    YesNoDecisionCreate,
    MultipleChoiceDecisionCreate,
    FinancialSpendingDecisionCreate,
    FinancialAnalysisDecisionCreate,
    WeightedAnalysisDecisionCreate,
]


class DecisionItem(BaseModel):
    """Single decision in history"""

    decision_id: str
    type: DecisionKind
    context: str
    created_at: str
    details: dict
    final_scores: Optional[List[WeightedResultSchema]] = None


class HistoryResponse(BaseModel):
    """Response for GET /v1/decisions"""

    decisions: List[DecisionItem]


class ClearHistoryResponse(BaseModel):
    deleted: int
