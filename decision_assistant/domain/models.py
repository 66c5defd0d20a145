"""Domain models - pure Python dataclasses representing decision inputs, results and history"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Union


@dataclass(frozen=True)
class FinancingTerms:
    """Fixed-rate loan paid in equal monthly installments after a down payment"""

    total_value: float
    down_payment: float
    interest_rate_monthly_percent: float
    installment_count: int


@dataclass(frozen=True)
class ConsortiumTerms:
    """Pooled purchase charging a flat administrative fee on the total value"""

    total_value: float
    admin_fee_percent: float
    installment_count: int


@dataclass
class FinancialTotals:
    """Total cost of each option; None means the value could not be computed"""

    financing_total: Optional[float]
    consortium_total: Optional[float]


@dataclass(frozen=True)
class Criterion:
    """Named evaluation dimension with an integer percentage weight (0-100)"""

    name: str
    weight: int


@dataclass
class ScoredOption:
    """Option being evaluated, with one score per criterion name"""

    name: str
    scores: Dict[str, float] = field(default_factory=dict)


@dataclass
class WeightedResult:
    """Aggregate weighted score of a single option"""

    name: str
    final_score: float


@dataclass
class AdviceOption:
    """Multiple choice option sent to the advice service"""

    value: str
    description: str = ""


@dataclass
class CriterionSuggestion:
    """Criterion proposed by the advice service"""

    name: str
    weight: int
    rationale: str


class DecisionKind(str, Enum):
    """Closed set of decision kinds kept in history"""

    YES_NO = "yes_no"
    MULTIPLE_CHOICE = "multiple_choice"
    FINANCIAL_SPENDING = "financial_spending"
    FINANCIAL_ANALYSIS = "financial_analysis"
    WEIGHTED_ANALYSIS = "weighted_analysis"


FINANCIAL_SPENDING_OPTIONS = ["Financing", "Consortium"]


@dataclass
class BaseDecision:
    """Attributes shared by every finalized decision"""

    id: str
    context: str
    created_at: datetime


@dataclass
class YesNoDecision(BaseDecision):
    kind: ClassVar[DecisionKind] = DecisionKind.YES_NO

    decision: str  # "yes" or "no"


@dataclass
class MultipleChoiceDecision(BaseDecision):
    kind: ClassVar[DecisionKind] = DecisionKind.MULTIPLE_CHOICE

    options: List[str]
    decision: str


@dataclass
class FinancialSpendingDecision(BaseDecision):
    kind: ClassVar[DecisionKind] = DecisionKind.FINANCIAL_SPENDING

    decision: str
    options: List[str] = field(default_factory=lambda: list(FINANCIAL_SPENDING_OPTIONS))


@dataclass
class FinancialAnalysisDecision(BaseDecision):
    kind: ClassVar[DecisionKind] = DecisionKind.FINANCIAL_ANALYSIS

    fixed_cost: float
    variable_cost: float


@dataclass
class WeightedAnalysisDecision(BaseDecision):
    kind: ClassVar[DecisionKind] = DecisionKind.WEIGHTED_ANALYSIS

    criteria: List[Criterion]
    options: List[ScoredOption]
    decision: str


Decision = Union[
    YesNoDecision,
    MultipleChoiceDecision,
    FinancialSpendingDecision,
    FinancialAnalysisDecision,
    WeightedAnalysisDecision,
]
