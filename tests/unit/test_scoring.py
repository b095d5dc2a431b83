"""Unit tests for the Data Maturity Assessment scoring algorithm.

Tests cover:
- score_dimension averaging, exclusion, completion ratio, preconditions
- score_overall over assessed subdomains only
- tier_for boundary resolution
- score_assessment end-to-end scenarios
- Purity: repeated calls give identical results
"""

import pytest

from dma_maturity_assessment.core.errors import (
    ScoringPreconditionError,
    TierConfigurationError,
)
from dma_maturity_assessment.core.models import Answer, DimensionScore
from dma_maturity_assessment.core.questions import QUESTION_BANK, question_counts
from dma_maturity_assessment.core.scoring import MaturityScorer


def _answer(
    dimension_id: str,
    score_value: float,
    question_id: str = "Q",
    is_excluded: bool = False,
) -> Answer:
    return Answer(
        question_id=question_id,
        dimension_id=dimension_id,
        score_value=score_value,
        is_excluded=is_excluded,
    )


def _dimension(
    dimension_id: str,
    average_score: float,
    questions_answered: int,
    total_questions: int = 3,
) -> DimensionScore:
    return DimensionScore(
        dimension_id=dimension_id,
        average_score=average_score,
        questions_answered=questions_answered,
        completion_ratio=questions_answered / total_questions,
        total_questions=total_questions,
    )


# ---------------------------------------------------------------------------
# score_dimension
# ---------------------------------------------------------------------------


class TestScoreDimension:
    """Tests for MaturityScorer.score_dimension."""

    def test_mean_of_scored_answers(self, scorer: MaturityScorer) -> None:
        answers = [_answer("quality", 3, "Q7"), _answer("quality", 5, "Q8")]
        score = scorer.score_dimension("quality", answers, 3)
        assert score.average_score == 4.0
        assert score.questions_answered == 2
        assert score.completion_ratio == pytest.approx(2 / 3)
        assert score.total_questions == 3
        assert score.maturity_tier_name == "Advanced"

    def test_no_answers_is_not_assessed(self, scorer: MaturityScorer) -> None:
        """A subdomain with no scored answers reports zeros and no tier."""
        score = scorer.score_dimension("quality", [_answer("security", 4)], 3)
        assert score.average_score == 0.0
        assert score.questions_answered == 0
        assert score.completion_ratio == 0.0
        assert score.maturity_tier_name is None
        assert not score.is_assessed

    def test_only_excluded_answers_is_not_assessed(self, scorer: MaturityScorer) -> None:
        answers = [
            _answer("quality", 0, "Q7", is_excluded=True),
            _answer("quality", 0, "Q8", is_excluded=True),
        ]
        score = scorer.score_dimension("quality", answers, 3)
        assert score.questions_answered == 0
        assert score.average_score == 0.0

    def test_excluded_answer_matches_omitting_it(self, scorer: MaturityScorer) -> None:
        """An NA answer must not change the average or count, whatever value it carried."""
        scored = [_answer("talent", 4, "Q30"), _answer("talent", 4, "Q31")]
        with_na = scored + [_answer("talent", 3, "Q32", is_excluded=True)]

        without = scorer.score_dimension("talent", scored, 3)
        including = scorer.score_dimension("talent", with_na, 3)

        assert including == without
        assert including.questions_answered == 2
        assert including.average_score == 4.0

    def test_other_dimension_answers_ignored(self, scorer: MaturityScorer) -> None:
        answers = [_answer("strategy", 1, "Q17"), _answer("security", 5, "Q20")]
        assert scorer.score_dimension("security", answers, 3).average_score == 5.0
        assert scorer.score_dimension("strategy", answers, 3).average_score == 1.0

    def test_completion_ratio_clamped_to_one(self, scorer: MaturityScorer) -> None:
        answers = [_answer("culture", 3, f"Q{i}") for i in range(4)]
        score = scorer.score_dimension("culture", answers, 2)
        assert score.completion_ratio == 1.0

    def test_zero_catalog_questions_gives_zero_completion(self, scorer: MaturityScorer) -> None:
        score = scorer.score_dimension("culture", [_answer("culture", 3)], 0)
        assert score.completion_ratio == 0.0
        assert score.questions_answered == 1
        assert score.average_score == 3.0

    def test_negative_question_count_raises(self, scorer: MaturityScorer) -> None:
        with pytest.raises(ScoringPreconditionError, match="must be >= 0"):
            scorer.score_dimension("culture", [], -1)

    def test_accepts_generator_input(self, scorer: MaturityScorer) -> None:
        answers = (_answer("quality", v, f"Q{v}") for v in (2, 4))
        assert scorer.score_dimension("quality", answers, 3).average_score == 3.0


# ---------------------------------------------------------------------------
# score_overall
# ---------------------------------------------------------------------------


class TestScoreOverall:
    """Tests for MaturityScorer.score_overall."""

    def test_unassessed_dimension_does_not_pull_score_down(
        self, scorer: MaturityScorer
    ) -> None:
        dimensions = [_dimension("a", 4.0, 2), _dimension("b", 0.0, 0)]
        result = scorer.score_overall(dimensions)
        assert result.overall_score == 4.0
        assert result.dimensions_assessed == 1

    def test_mean_of_assessed_dimension_averages(self, scorer: MaturityScorer) -> None:
        dimensions = [_dimension("a", 4.0, 2), _dimension("b", 2.0, 1)]
        assert scorer.score_overall(dimensions).overall_score == 3.0

    def test_nothing_assessed_gives_zero_and_lowest_tier(self, scorer: MaturityScorer) -> None:
        dimensions = [_dimension("a", 0.0, 0), _dimension("b", 0.0, 0)]
        result = scorer.score_overall(dimensions)
        assert result.overall_score == 0.0
        assert result.maturity_tier_name == "Initial"
        assert result.total_questions_answered == 0

    def test_empty_dimension_list(self, scorer: MaturityScorer) -> None:
        result = scorer.score_overall([])
        assert result.overall_score == 0.0
        assert result.maturity_tier_name == "Initial"
        assert result.total_questions == 0

    def test_total_questions_defaults_to_dimension_totals(
        self, scorer: MaturityScorer
    ) -> None:
        dimensions = [_dimension("a", 4.0, 2, total_questions=2), _dimension("b", 0.0, 0, 3)]
        assert scorer.score_overall(dimensions).total_questions == 5

    def test_total_questions_override(self, scorer: MaturityScorer) -> None:
        dimensions = [_dimension("a", 4.0, 2, total_questions=2)]
        assert scorer.score_overall(dimensions, total_questions=35).total_questions == 35

    def test_tier_uses_unrounded_score(self, scorer: MaturityScorer) -> None:
        """2.666... displays as 2.7 but stays in Developing."""
        dimensions = [_dimension("a", 8 / 3, 3)]
        result = scorer.score_overall(dimensions)
        assert result.display_score == 2.7
        assert result.maturity_tier_name == "Developing"


# ---------------------------------------------------------------------------
# tier_for
# ---------------------------------------------------------------------------


class TestTierFor:
    """Boundary behaviour of MaturityScorer.tier_for."""

    @pytest.mark.parametrize(
        ("score", "expected"),
        [
            (0.0, "Initial"),
            (1.0, "Initial"),
            (1.89, "Initial"),
            (1.9, "Developing"),
            (2.69, "Developing"),
            (2.7, "Defined"),
            (3.49, "Defined"),
            (3.5, "Advanced"),
            (4.29, "Advanced"),
            (4.3, "Optimized"),
            (5.0, "Optimized"),
        ],
    )
    def test_boundaries(self, scorer: MaturityScorer, score: float, expected: str) -> None:
        assert scorer.tier_for(score) == expected

    @pytest.mark.parametrize("score", [-0.1, 5.01])
    def test_score_outside_table_raises(self, scorer: MaturityScorer, score: float) -> None:
        with pytest.raises(TierConfigurationError, match="No maturity tier covers"):
            scorer.tier_for(score)


# ---------------------------------------------------------------------------
# score_assessment
# ---------------------------------------------------------------------------


class TestScoreAssessment:
    """End-to-end scenarios for MaturityScorer.score_assessment."""

    def test_mixed_assessed_and_unassessed_dimensions(self, scorer: MaturityScorer) -> None:
        answers = [
            _answer("A", 3, "A1"),
            _answer("A", 5, "A2"),
            _answer("C", 2, "C1"),
        ]
        scores = scorer.score_assessment(answers, {"A": 2, "B": 3, "C": 1})
        by_dimension = scores.by_dimension()

        assert by_dimension["A"].average_score == 4.0
        assert by_dimension["A"].completion_ratio == 1.0
        assert by_dimension["B"].questions_answered == 0
        assert by_dimension["B"].completion_ratio == 0.0
        assert by_dimension["C"].average_score == 2.0
        assert scores.overall.overall_score == 3.0
        assert scores.overall.total_questions_answered == 3
        assert scores.overall.total_questions == 6
        assert scores.overall.maturity_tier_name == "Defined"

    def test_dimension_order_follows_question_counts(self, scorer: MaturityScorer) -> None:
        scores = scorer.score_assessment([], {"z": 1, "a": 1, "m": 1})
        assert [s.dimension_id for s in scores.dimension_scores] == ["z", "a", "m"]

    def test_all_maximum_answers_reach_highest_tier(self, scorer: MaturityScorer) -> None:
        answers = [
            Answer(question_id=q.question_id, dimension_id=q.dimension, score_value=5)
            for q in QUESTION_BANK
        ]
        scores = scorer.score_assessment(answers, question_counts())
        assert scores.overall.overall_score == 5.0
        assert scores.overall.maturity_tier_name == "Optimized"
        assert scores.overall.total_questions_answered == len(QUESTION_BANK)
        assert scores.overall.completion_rate == 100

    def test_all_minimum_answers_stay_initial(self, scorer: MaturityScorer) -> None:
        answers = [
            Answer(question_id=q.question_id, dimension_id=q.dimension, score_value=1)
            for q in QUESTION_BANK
        ]
        scores = scorer.score_assessment(answers, question_counts())
        assert scores.overall.overall_score == 1.0
        assert scores.overall.maturity_tier_name == "Initial"

    def test_no_answers(self, scorer: MaturityScorer) -> None:
        scores = scorer.score_assessment([], question_counts())
        assert scores.overall.overall_score == 0.0
        assert scores.overall.maturity_tier_name == "Initial"
        assert scores.overall.total_questions == 35
        assert all(not s.is_assessed for s in scores.dimension_scores)

    def test_answers_outside_catalog_ignored(self, scorer: MaturityScorer) -> None:
        answers = [_answer("A", 4, "A1"), _answer("unknown", 1, "X1")]
        scores = scorer.score_assessment(answers, {"A": 1})
        assert scores.overall.overall_score == 4.0
        assert scores.overall.total_questions_answered == 1

    def test_repeated_scoring_is_identical(self, scorer: MaturityScorer) -> None:
        answers = [
            _answer("A", 3, "A1"),
            _answer("A", 4, "A2"),
            _answer("B", 2, "B1", is_excluded=True),
            _answer("C", 1, "C1"),
        ]
        counts = {"A": 2, "B": 1, "C": 4}
        first = scorer.score_assessment(answers, counts)
        second = scorer.score_assessment(answers, counts)
        assert first == second

    @pytest.mark.parametrize("value", [1, 2, 3, 4, 5])
    def test_overall_score_within_scale(self, scorer: MaturityScorer, value: int) -> None:
        answers = [
            Answer(question_id=q.question_id, dimension_id=q.dimension, score_value=value)
            for q in QUESTION_BANK[::2]
        ]
        overall = scorer.score_assessment(answers, question_counts()).overall
        assert 0.0 <= overall.overall_score <= 5.0


class TestBoundaryMeans:
    """Overall means that are exactly on a tier boundary land in the higher tier."""

    @pytest.mark.parametrize(
        ("options", "expected_score", "expected_tier"),
        [
            (
                {"Q4": 5, "Q5": 5, "Q6": 1, "Q10": 4, "Q11": 3, "Q12": 4,
                 "Q17": 5, "Q18": 1, "Q33": 2, "Q34": 4, "Q35": 5},
                3.5,
                "Advanced",
            ),
            (
                {"Q7": 5, "Q8": 5, "Q14": 3, "Q15": 4, "Q16": 4, "Q20": 4, "Q21": 3,
                 "Q26": 5, "Q27": 5, "Q30": 5, "Q31": 3, "Q32": 5},
                4.3,
                "Optimized",
            ),
            (
                {"Q1": 4, "Q2": 4, "Q3": 3, "Q4": 3, "Q5": 2, "Q6": 2, "Q7": 3, "Q8": 2,
                 "Q10": 3, "Q11": 3, "Q12": 3, "Q14": 2, "Q15": 2},
                2.7,
                "Defined",
            ),
        ],
    )
    def test_exact_boundary_mean(
        self,
        scorer: MaturityScorer,
        options: dict[str, int],
        expected_score: float,
        expected_tier: str,
    ) -> None:
        answers = [Answer.from_option(qid, option) for qid, option in options.items()]
        overall = scorer.score_assessment(answers, question_counts()).overall
        assert overall.overall_score == expected_score
        assert overall.display_score == expected_score
        assert overall.maturity_tier_name == expected_tier

    def test_dimension_score_keeps_exact_sum(self, scorer: MaturityScorer) -> None:
        answers = [_answer("A", 5, "A1"), _answer("A", 5, "A2"), _answer("A", 1, "A3")]
        score = scorer.score_dimension("A", answers, 3)
        assert score.score_sum == 11
        assert score.average_score == pytest.approx(11 / 3)

    def test_records_without_sum_fall_back_to_average(self, scorer: MaturityScorer) -> None:
        dimensions = [_dimension("a", 3.5, 2), _dimension("b", 4.5, 2)]
        assert scorer.score_overall(dimensions).overall_score == 4.0


class TestScorerConstruction:
    def test_invalid_tier_table_rejected(self) -> None:
        with pytest.raises(TierConfigurationError):
            MaturityScorer(tiers=[])

    def test_tiers_sorted_ascending(self, scorer: MaturityScorer) -> None:
        mins = [tier.min_score for tier in scorer.tiers]
        assert mins == sorted(mins)
        assert scorer.lowest_tier().name == "Initial"
