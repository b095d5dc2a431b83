"""Data maturity scoring algorithm.

Answers are on a 1-5 scale. Each subdomain score is the plain mean of its
non-excluded answers. The overall score is the mean of subdomain scores,
taken over assessed subdomains only: a subdomain nobody answered is left
out of the mean rather than counted as 0. The overall score maps onto a
named maturity tier via the configured tier table.

Tier lookup always uses the unrounded overall score. Rounding to one
decimal happens only at presentation time (``OverallResult.display_score``).
Means are accumulated as exact fractions and converted to float once, so a
mean that is exactly on a tier boundary lands on the boundary value.

This module is intentionally independent of the web and settings layers so
that the scoring logic can be unit-tested without any infrastructure.
"""

from collections.abc import Iterable, Mapping, Sequence
from fractions import Fraction

from dma_maturity_assessment.core.errors import ScoringPreconditionError
from dma_maturity_assessment.core.models import (
    Answer,
    AssessmentScores,
    DimensionScore,
    OverallResult,
)
from dma_maturity_assessment.core.tiers import (
    DEFAULT_MATURITY_TIERS,
    MaturityTier,
    tier_for,
    validate_tier_table,
)
from dma_maturity_assessment.observability import get_logger

logger = get_logger(__name__)


def _exact_average(score: DimensionScore) -> Fraction:
    if score.score_sum is None:
        return Fraction(score.average_score)
    return Fraction(score.score_sum) / score.questions_answered


class MaturityScorer:
    """Scoring engine for the Data Maturity Assessment.

    Holds a validated tier table and nothing else, so one instance can be
    shared across concurrent requests.

    Args:
        tiers: Maturity tier table. Validated on construction.

    Raises:
        TierConfigurationError: If the tier table does not partition 0-5.
    """

    def __init__(self, tiers: Sequence[MaturityTier] = DEFAULT_MATURITY_TIERS) -> None:
        self._tiers: tuple[MaturityTier, ...] = validate_tier_table(tiers)

    @property
    def tiers(self) -> tuple[MaturityTier, ...]:
        """The tier table, sorted by ascending min_score."""
        return self._tiers

    def tier_for(self, score: float) -> str:
        """Return the name of the tier containing the score.

        A score on a shared boundary belongs to the higher tier.

        Raises:
            TierConfigurationError: If no tier contains the score.
        """
        return tier_for(score, self._tiers).name

    def lowest_tier(self) -> MaturityTier:
        return self._tiers[0]

    def score_dimension(
        self,
        dimension_id: str,
        answers: Iterable[Answer],
        total_questions_in_dimension: int,
    ) -> DimensionScore:
        """Compute the score for a single subdomain.

        Args:
            dimension_id: Subdomain to score.
            answers: The full answer set; filtered internally.
            total_questions_in_dimension: Catalog question count for the subdomain.

        Returns:
            DimensionScore. With no scored answers the average, count, and
            completion are all 0 and the tier name is None.

        Raises:
            ScoringPreconditionError: If the question count is negative.
        """
        if total_questions_in_dimension < 0:
            raise ScoringPreconditionError(
                f"total_questions_in_dimension must be >= 0, got "
                f"{total_questions_in_dimension!r} for dimension {dimension_id!r}"
            )

        scores = [
            answer.score_value
            for answer in answers
            if answer.dimension_id == dimension_id and not answer.is_excluded
        ]

        if not scores:
            return DimensionScore(
                dimension_id=dimension_id,
                average_score=0.0,
                questions_answered=0,
                completion_ratio=0.0,
                total_questions=total_questions_in_dimension,
                maturity_tier_name=None,
            )

        answered = len(scores)
        total = sum(Fraction(score) for score in scores)
        average = float(total / answered)

        if total_questions_in_dimension == 0:
            logger.warning(
                "Answers present for dimension with no catalog questions",
                dimension_id=dimension_id,
                questions_answered=answered,
            )
            completion = 0.0
        else:
            completion = min(max(answered / total_questions_in_dimension, 0.0), 1.0)

        return DimensionScore(
            dimension_id=dimension_id,
            average_score=average,
            questions_answered=answered,
            completion_ratio=completion,
            total_questions=total_questions_in_dimension,
            maturity_tier_name=self.tier_for(average),
            score_sum=float(total),
        )

    def score_overall(
        self,
        dimension_scores: Sequence[DimensionScore],
        total_questions: int | None = None,
    ) -> OverallResult:
        """Aggregate subdomain scores into the overall result.

        Args:
            dimension_scores: One DimensionScore per catalog subdomain,
                including unassessed ones.
            total_questions: Catalog question total. Defaults to the sum of
                the subdomain totals.

        Returns:
            OverallResult. With nothing assessed the score is 0 and the tier
            is the lowest one.
        """
        assessed = [score for score in dimension_scores if score.questions_answered > 0]

        if assessed:
            exact_mean = sum(_exact_average(score) for score in assessed) / len(assessed)
            overall_score = float(exact_mean)
        else:
            overall_score = 0.0

        if total_questions is None:
            total_questions = sum(score.total_questions for score in dimension_scores)

        return OverallResult(
            overall_score=overall_score,
            maturity_tier_name=self.tier_for(overall_score),
            total_questions_answered=sum(score.questions_answered for score in dimension_scores),
            total_questions=total_questions,
            dimensions_assessed=len(assessed),
        )

    def score_assessment(
        self,
        answers: Sequence[Answer],
        question_counts: Mapping[str, int],
        total_questions: int | None = None,
    ) -> AssessmentScores:
        """Run the full scoring pipeline for one respondent.

        Args:
            answers: All answers submitted for the session.
            question_counts: Catalog question count per subdomain; its key
                order is the order of the returned dimension scores.
            total_questions: Optional override for the catalog total.

        Returns:
            AssessmentScores with every subdomain in question_counts.
        """
        unknown = sorted({a.dimension_id for a in answers} - set(question_counts))
        if unknown:
            logger.warning(
                "Ignoring answers for dimensions outside the catalog",
                dimensions=unknown,
            )

        dimension_scores = tuple(
            self.score_dimension(dimension_id, answers, count)
            for dimension_id, count in question_counts.items()
        )
        overall = self.score_overall(dimension_scores, total_questions)

        logger.info(
            "Assessment scoring complete",
            overall_score=overall.display_score,
            maturity_tier=overall.maturity_tier_name,
            dimensions_assessed=overall.dimensions_assessed,
            questions_answered=overall.total_questions_answered,
            total_questions=overall.total_questions,
        )

        return AssessmentScores(dimension_scores=dimension_scores, overall=overall)
