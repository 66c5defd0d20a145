"""Unit tests for weighted decision scoring"""

import pytest
from decision_assistant.domain.models import Criterion, ScoredOption, WeightedResult
from decision_assistant.domain.scoring import (
    best_option,
    rank_results,
    score_options,
    total_weight,
    weights_balanced,
)


def test_score_options_price_and_safety():
    """Test weighted sum of two criteria"""
    criteria = [Criterion(name="Price", weight=60), Criterion(name="Safety", weight=40)]
    options = [ScoredOption(name="Car A", scores={"Price": 8, "Safety": 5})]

    results = score_options(criteria, options)

    assert len(results) == 1
    assert results[0].name == "Car A"
    assert results[0].final_score == pytest.approx(8 * 0.6 + 5 * 0.4)  # 6.8


def test_score_options_preserves_input_order(car_criteria, car_options):
    """Test results follow input order, not score order"""
    results = score_options(car_criteria, car_options)

    assert [r.name for r in results] == ["Hatchback", "SUV", "Sedan"]
    # SUV scores highest but stays second
    assert results[1].final_score > results[0].final_score


def test_score_options_missing_score_counts_as_zero(car_criteria, car_options):
    """Test unscored criteria contribute nothing"""
    sedan = score_options(car_criteria, car_options)[2]

    # No Comfort score: 7 * 0.40 + 8 * 0.35
    assert sedan.final_score == pytest.approx(5.6)


def test_score_options_zero_weights():
    """Test every score is 0 when all weights are 0"""
    criteria = [Criterion(name="Price", weight=0), Criterion(name="Safety", weight=0)]
    options = [
        ScoredOption(name="A", scores={"Price": 10, "Safety": 10}),
        ScoredOption(name="B", scores={"Price": 3}),
    ]

    assert all(r.final_score == 0 for r in score_options(criteria, options))


@pytest.mark.parametrize("score", [0, 3.5, 7, 10])
def test_score_options_single_full_weight_criterion(score):
    """Test a single criterion at 100% returns the raw score"""
    criteria = [Criterion(name="Quality", weight=100)]
    options = [ScoredOption(name="Only", scores={"Quality": score})]

    assert score_options(criteria, options)[0].final_score == pytest.approx(score)


def test_score_options_unbalanced_weights_not_normalized():
    """Test weights summing to 110 return the raw weighted sum without error"""
    criteria = [Criterion(name="Price", weight=60), Criterion(name="Safety", weight=50)]
    options = [ScoredOption(name="Car A", scores={"Price": 10, "Safety": 10})]

    results = score_options(criteria, options)

    assert results[0].final_score == pytest.approx(11.0)
    assert total_weight(criteria) == 110
    assert weights_balanced(criteria) is False


def test_score_options_ignores_unknown_criteria():
    """Test scores for names that are not criteria are ignored"""
    criteria = [Criterion(name="Price", weight=100)]
    options = [ScoredOption(name="A", scores={"Price": 4, "Color": 10})]

    assert score_options(criteria, options)[0].final_score == pytest.approx(4)


def test_score_options_empty_inputs():
    """Test empty criteria or options never raise"""
    assert score_options([], []) == []
    assert score_options([], [ScoredOption(name="A")])[0].final_score == 0


def test_weights_balanced(car_criteria):
    assert total_weight(car_criteria) == 100
    assert weights_balanced(car_criteria) is True


def test_rank_results_best_first_with_stable_ties():
    """Test ranking sorts by score and keeps input order for ties"""
    results = [
        WeightedResult(name="A", final_score=5.0),
        WeightedResult(name="B", final_score=7.5),
        WeightedResult(name="C", final_score=5.0),
    ]

    ranked = rank_results(results)

    assert [r.name for r in ranked] == ["B", "A", "C"]
    # Input untouched
    assert [r.name for r in results] == ["A", "B", "C"]


def test_best_option(car_criteria, car_options):
    best = best_option(score_options(car_criteria, car_options))
    assert best is not None
    assert best.name == "SUV"


def test_best_option_no_results():
    assert best_option([]) is None
