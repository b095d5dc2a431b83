"""Pydantic request/response schemas for the DMA scoring API.

All API inputs and outputs are strictly typed Pydantic v2 models.
No raw dicts are returned from any endpoint.
"""

from typing import Self

from pydantic import BaseModel, Field, model_validator

from dma_maturity_assessment.core.insights import FocusAreas
from dma_maturity_assessment.core.models import AssessmentScores, DimensionScore
from dma_maturity_assessment.core.questions import SUBDOMAINS_BY_ID
from dma_maturity_assessment.core.tiers import MaturityTier


# ---------------------------------------------------------------------------
# Catalog
# ---------------------------------------------------------------------------


class SubdomainSchema(BaseModel):
    """A scoreable subdomain."""

    subdomain_id: str
    name: str
    description: str
    domain_group: str
    display_order: int
    question_count: int


class QuestionSchema(BaseModel):
    """A single assessment question returned to the client."""

    question_id: str
    dimension: str
    title: str
    description: str


class CatalogResponse(BaseModel):
    """The full question catalog.

    Attributes:
        subdomains: Subdomains in display order.
        questions: All questions.
        scored_options: Option keys that carry a score.
        excluded_options: Option keys that are excluded from scoring, with labels.
        total_questions: Number of questions in the catalog.
    """

    subdomains: list[SubdomainSchema]
    questions: list[QuestionSchema]
    scored_options: list[int]
    excluded_options: dict[str, str]
    total_questions: int


class RoleSchema(BaseModel):
    """A respondent role and the subdomains it is asked about."""

    role_id: str
    title: str
    description: str
    examples: list[str]
    estimated_time: str
    subdomains: list[str]
    question_count: int


class RolesResponse(BaseModel):
    roles: list[RoleSchema]


class MaturityTierSchema(BaseModel):
    """One row of the maturity tier table."""

    level: int
    name: str
    min_score: float
    max_score: float
    description: str

    @classmethod
    def from_tier(cls, tier: MaturityTier) -> "MaturityTierSchema":
        return cls(
            level=tier.level,
            name=tier.name,
            min_score=tier.min_score,
            max_score=tier.max_score,
            description=tier.description,
        )


class MaturityLevelsResponse(BaseModel):
    levels: list[MaturityTierSchema]


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


class AnswerSubmission(BaseModel):
    """A selected option for one question.

    Attributes:
        question_id: Question identifier (e.g., 'Q12').
        option: Scored option 1-5, or 'na' / 'ns' for an excluded answer.
    """

    question_id: str = Field(..., min_length=1, max_length=20)
    option: int | str


class ScoreRequest(BaseModel):
    """Request body for scoring a set of answers.

    Attributes:
        answers: Selected options, at most one per question.
        role_id: Optional respondent role. Scoring and completion are then
            limited to the subdomains presented to that role.
        total_questions: Optional catalog total override, e.g. for quick
            assessments that present a subset of the questions.
    """

    answers: list[AnswerSubmission] = Field(default_factory=list)
    role_id: str | None = Field(default=None, min_length=1, max_length=50)
    total_questions: int | None = Field(default=None, ge=0)


class RecommendationPromptRequest(ScoreRequest):
    """Request body for the recommendation prompt.

    ``role_name`` defaults to the title of ``role_id``; one of the two is required.
    """

    role_name: str | None = Field(default=None, min_length=1, max_length=200)

    @model_validator(mode="after")
    def _require_role(self) -> Self:
        if self.role_name is None and self.role_id is None:
            raise ValueError("role_name or role_id is required")
        return self


class DimensionScoreSchema(BaseModel):
    """Score for one subdomain."""

    dimension_id: str
    name: str
    average_score: float
    percentage_score: float
    questions_answered: int
    total_questions: int
    completion_ratio: float
    is_assessed: bool
    maturity_tier_name: str | None

    @classmethod
    def from_score(cls, score: DimensionScore) -> "DimensionScoreSchema":
        subdomain = SUBDOMAINS_BY_ID.get(score.dimension_id)
        return cls(
            dimension_id=score.dimension_id,
            name=subdomain.name if subdomain is not None else score.dimension_id,
            average_score=round(score.average_score, 2),
            percentage_score=round(score.percentage_score, 1),
            questions_answered=score.questions_answered,
            total_questions=score.total_questions,
            completion_ratio=round(score.completion_ratio, 4),
            is_assessed=score.is_assessed,
            maturity_tier_name=score.maturity_tier_name,
        )


class OverallResultSchema(BaseModel):
    """Overall result.

    ``overall_score`` is rounded for display; ``raw_overall_score`` is the
    value the tier was looked up with.
    """

    overall_score: float
    raw_overall_score: float
    percentage_score: float
    maturity_tier_name: str
    total_questions_answered: int
    total_questions: int
    completion_rate: int
    dimensions_assessed: int


class FocusAreasSchema(BaseModel):
    weak: list[DimensionScoreSchema]
    strong: list[DimensionScoreSchema]

    @classmethod
    def from_focus_areas(cls, focus: FocusAreas) -> "FocusAreasSchema":
        return cls(
            weak=[DimensionScoreSchema.from_score(score) for score in focus.weak],
            strong=[DimensionScoreSchema.from_score(score) for score in focus.strong],
        )


class ScoreResponse(BaseModel):
    """Full scoring result for a set of answers."""

    overall: OverallResultSchema
    dimension_scores: list[DimensionScoreSchema]
    focus_areas: FocusAreasSchema

    @classmethod
    def from_scores(
        cls,
        scores: AssessmentScores,
        focus: FocusAreas,
        precision: int = 1,
    ) -> "ScoreResponse":
        overall = scores.overall
        return cls(
            overall=OverallResultSchema(
                overall_score=round(overall.overall_score, precision),
                raw_overall_score=overall.overall_score,
                percentage_score=round(overall.percentage_score, 1),
                maturity_tier_name=overall.maturity_tier_name,
                total_questions_answered=overall.total_questions_answered,
                total_questions=overall.total_questions,
                completion_rate=overall.completion_rate,
                dimensions_assessed=overall.dimensions_assessed,
            ),
            dimension_scores=[
                DimensionScoreSchema.from_score(score) for score in scores.dimension_scores
            ],
            focus_areas=FocusAreasSchema.from_focus_areas(focus),
        )


class RecommendationPromptResponse(BaseModel):
    """Rendered recommendation prompt and the features it was built from."""

    prompt: str
    overall_score: float
    maturity_tier_name: str
    focus_areas: FocusAreasSchema
