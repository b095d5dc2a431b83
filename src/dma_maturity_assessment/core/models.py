"""Value records for DMA scoring.

``Answer`` is the only input record and validates itself on construction,
so malformed scores are rejected at the boundary instead of inside the
averaging loop. The score records are derived, immutable, and recomputed
for every scoring request.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass

from dma_maturity_assessment.core.errors import InvalidAnswerError
from dma_maturity_assessment.core.questions import (
    EXCLUDED_OPTIONS,
    QUESTIONS_BY_ID,
    AssessmentQuestion,
)
from dma_maturity_assessment.core.tiers import SCORE_MAX

_PERCENT: float = 100.0


@dataclass(frozen=True)
class Answer:
    """One respondent's answer to one question.

    Excluded answers (Not Applicable / Not Sure) always carry a score of 0;
    any other value passed for an excluded answer is discarded.

    Attributes:
        question_id: Question identifier (e.g., 'Q7').
        dimension_id: Subdomain the question is scored under.
        score_value: Score in (0, 5] for scored answers, 0 for excluded ones.
        is_excluded: True for NA/NS answers.

    Raises:
        InvalidAnswerError: If an identifier is empty or a scored answer's
            value is not a number in (0, 5].
    """

    question_id: str
    dimension_id: str
    score_value: float
    is_excluded: bool = False

    def __post_init__(self) -> None:
        if not self.question_id:
            raise InvalidAnswerError("question_id must be a non-empty string")
        if not self.dimension_id:
            raise InvalidAnswerError(
                f"dimension_id must be a non-empty string for question {self.question_id!r}"
            )

        if self.is_excluded:
            object.__setattr__(self, "score_value", 0)
            return

        if isinstance(self.score_value, bool) or not isinstance(self.score_value, (int, float)):
            raise InvalidAnswerError(
                f"score_value must be a number, got {self.score_value!r} "
                f"for question {self.question_id!r}"
            )
        if not (0 < self.score_value <= SCORE_MAX):
            raise InvalidAnswerError(
                f"score_value must be greater than 0 and at most {SCORE_MAX:g}, "
                f"got {self.score_value!r} for question {self.question_id!r}"
            )

    @classmethod
    def from_option(
        cls,
        question_id: str,
        option: int | str,
        catalog: Mapping[str, AssessmentQuestion] = QUESTIONS_BY_ID,
    ) -> "Answer":
        """Build an Answer from a selected option key.

        Args:
            question_id: Question identifier present in the catalog.
            option: Scored option 1-5 (int or numeric string) or an excluded
                option key ('na' or 'ns', case-insensitive).
            catalog: Question lookup used to resolve the subdomain.

        Returns:
            A validated Answer.

        Raises:
            InvalidAnswerError: If the question is unknown or the option is
                not a recognised key.
        """
        question = catalog.get(question_id)
        if question is None:
            raise InvalidAnswerError(f"Unknown question_id {question_id!r}")

        if isinstance(option, str):
            key = option.strip().lower()
            if key in EXCLUDED_OPTIONS:
                return cls(
                    question_id=question_id,
                    dimension_id=question.dimension,
                    score_value=0,
                    is_excluded=True,
                )
            if not (key.isascii() and key.isdecimal()):
                raise InvalidAnswerError(
                    f"Unrecognised option {option!r} for question {question_id!r}"
                )
            option = int(key)

        if isinstance(option, bool) or not isinstance(option, int):
            raise InvalidAnswerError(
                f"Unrecognised option {option!r} for question {question_id!r}"
            )

        return cls(
            question_id=question_id,
            dimension_id=question.dimension,
            score_value=option,
            is_excluded=False,
        )


@dataclass(frozen=True)
class DimensionScore:
    """Derived score for one subdomain.

    ``questions_answered == 0`` means the subdomain was not assessed; its
    ``average_score`` of 0 is a placeholder, not a measured score.
    ``score_sum`` holds the sum of scored values so the overall mean can be
    taken exactly; it is None for records built without it.
    """

    dimension_id: str
    average_score: float
    questions_answered: int
    completion_ratio: float
    total_questions: int = 0
    maturity_tier_name: str | None = None
    score_sum: float | None = None

    @property
    def is_assessed(self) -> bool:
        return self.questions_answered > 0

    @property
    def percentage_score(self) -> float:
        return self.average_score / SCORE_MAX * _PERCENT


@dataclass(frozen=True)
class OverallResult:
    """Aggregate result across all assessed subdomains.

    Attributes:
        overall_score: Unrounded mean of assessed subdomain averages.
        maturity_tier_name: Tier containing the unrounded overall score.
        total_questions_answered: Non-excluded answers across all subdomains.
        total_questions: Questions in the catalog for this assessment.
        dimensions_assessed: Subdomains with at least one scored answer.
    """

    overall_score: float
    maturity_tier_name: str
    total_questions_answered: int
    total_questions: int
    dimensions_assessed: int = 0

    @property
    def display_score(self) -> float:
        """Overall score rounded to one decimal place, for presentation only."""
        return round(self.overall_score, 1)

    @property
    def percentage_score(self) -> float:
        return self.overall_score / SCORE_MAX * _PERCENT

    @property
    def completion_rate(self) -> int:
        """Answered questions as a whole-number percentage of the total."""
        if self.total_questions <= 0:
            return 0
        return math.floor(self.total_questions_answered / self.total_questions * _PERCENT + 0.5)


@dataclass(frozen=True)
class AssessmentScores:
    """Full scoring output: per-subdomain scores in catalog order plus the overall result."""

    dimension_scores: tuple[DimensionScore, ...]
    overall: OverallResult

    def by_dimension(self) -> dict[str, DimensionScore]:
        return {score.dimension_id: score for score in self.dimension_scores}
