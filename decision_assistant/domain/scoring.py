"""Weighted decision scoring engine - aggregates per-criterion scores by weight"""

from typing import List, Optional, Sequence
from decision_assistant.domain.models import Criterion, ScoredOption, WeightedResult

# Weights are integer percentages; a balanced decision sums to exactly this
FULL_WEIGHT = 100


def score_option(criteria: Sequence[Criterion], option: ScoredOption) -> float:
    """
    Weighted sum of a single option's scores.

    Missing scores count as 0; scores for names that are not criteria are ignored.
    """
    return sum(
        (option.scores.get(criterion.name, 0) * (criterion.weight / FULL_WEIGHT) for criterion in criteria),
        0.0,
    )


def score_options(criteria: Sequence[Criterion], options: Sequence[ScoredOption]) -> List[WeightedResult]:
    """
    Main entry point: final weighted score of every option.

    Requirements:
    - Output order matches input options order (no sorting)
    - No normalization: weights that do not sum to 100 still produce the raw
      weighted sum, the caller decides whether to warn
    """
    return [
        WeightedResult(name=option.name, final_score=score_option(criteria, option))
        for option in options
    ]


def total_weight(criteria: Sequence[Criterion]) -> int:
    """Sum of all criterion weights"""
    return sum(criterion.weight for criterion in criteria)


def weights_balanced(criteria: Sequence[Criterion]) -> bool:
    """Advisory check that weights add up to 100%"""
    return total_weight(criteria) == FULL_WEIGHT


def rank_results(results: Sequence[WeightedResult]) -> List[WeightedResult]:
    """Results ordered best first; ties keep their input order"""
    return sorted(results, key=lambda r: r.final_score, reverse=True)


def best_option(results: Sequence[WeightedResult]) -> Optional[WeightedResult]:
    """Highest scoring result, or None when there are no options"""
    ranked = rank_results(results)
    return ranked[0] if ranked else None
