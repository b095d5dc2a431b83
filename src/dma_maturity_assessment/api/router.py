"""FastAPI router for the Data Maturity Assessment scoring API.

All routes are thin: they parse inputs, build answers, delegate to
MaturityScorer, and serialise responses. No scoring logic lives here.

API prefix: /api/v1/assessments
"""

from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, status

from dma_maturity_assessment.adapters.recommendation_prompt import (
    RecommendationPromptBuilder,
)
from dma_maturity_assessment.api.schemas import (
    CatalogResponse,
    FocusAreasSchema,
    MaturityLevelsResponse,
    MaturityTierSchema,
    QuestionSchema,
    RecommendationPromptRequest,
    RecommendationPromptResponse,
    RoleSchema,
    RolesResponse,
    ScoreRequest,
    ScoreResponse,
    SubdomainSchema,
)
from dma_maturity_assessment.core.errors import InvalidAnswerError, UnknownRoleError
from dma_maturity_assessment.core.insights import find_focus_areas
from dma_maturity_assessment.core.models import Answer, AssessmentScores
from dma_maturity_assessment.core.questions import (
    EXCLUDED_OPTIONS,
    QUESTION_BANK,
    ROLES,
    SCORED_OPTIONS,
    SUBDOMAINS,
    Role,
    get_role,
    question_counts,
)
from dma_maturity_assessment.core.scoring import MaturityScorer
from dma_maturity_assessment.observability import get_logger
from dma_maturity_assessment.settings import Settings

logger = get_logger(__name__)

router = APIRouter(prefix="/assessments", tags=["Data Maturity Assessment"])


# ---------------------------------------------------------------------------
# Dependency factories
# ---------------------------------------------------------------------------


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


@lru_cache
def _build_scorer() -> MaturityScorer:
    return MaturityScorer(get_settings().tier_table())


def get_scorer() -> MaturityScorer:
    """Return the shared scorer built from the configured tier table.

    Raises:
        TierConfigurationError: If the configured tier table is invalid.
    """
    return _build_scorer()


def _resolve_role(role_id: str | None) -> Role | None:
    """Look up the requested role.

    Raises:
        HTTPException: 422 if the role id is not in the role catalog.
    """
    if role_id is None:
        return None
    try:
        return get_role(role_id)
    except UnknownRoleError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from exc


def _build_answers(body: ScoreRequest, role: Role | None = None) -> list[Answer]:
    """Convert submitted options into validated answers.

    Raises:
        HTTPException: 422 for unknown questions, bad options, duplicates, or
            questions outside the role's subdomains.
    """
    seen: set[str] = set()
    answers: list[Answer] = []
    for submission in body.answers:
        if submission.question_id in seen:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=f"Duplicate answer for question {submission.question_id!r}",
            )
        seen.add(submission.question_id)
        try:
            answers.append(Answer.from_option(submission.question_id, submission.option))
        except InvalidAnswerError as exc:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=str(exc),
            ) from exc
        if role is not None and answers[-1].dimension_id not in role.subdomains:
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=(
                    f"Question {submission.question_id!r} is not presented "
                    f"to role {role.role_id!r}"
                ),
            )
    return answers


def _score(body: ScoreRequest, scorer: MaturityScorer) -> AssessmentScores:
    role = _resolve_role(body.role_id)
    answers = _build_answers(body, role)
    return scorer.score_assessment(
        answers,
        question_counts(role.role_id if role is not None else None),
        total_questions=body.total_questions,
    )


# ---------------------------------------------------------------------------
# Catalog endpoints
# ---------------------------------------------------------------------------


@router.get(
    "/questions",
    response_model=CatalogResponse,
    summary="List subdomains, questions, and answer options",
)
async def get_questions() -> CatalogResponse:
    """Return the full question catalog in display order."""
    counts = question_counts()
    return CatalogResponse(
        subdomains=[
            SubdomainSchema(
                subdomain_id=s.subdomain_id,
                name=s.name,
                description=s.description,
                domain_group=s.domain_group,
                display_order=s.display_order,
                question_count=counts[s.subdomain_id],
            )
            for s in SUBDOMAINS
        ],
        questions=[
            QuestionSchema(
                question_id=q.question_id,
                dimension=q.dimension,
                title=q.title,
                description=q.description,
            )
            for q in QUESTION_BANK
        ],
        scored_options=list(SCORED_OPTIONS),
        excluded_options=dict(EXCLUDED_OPTIONS),
        total_questions=len(QUESTION_BANK),
    )


@router.get(
    "/roles",
    response_model=RolesResponse,
    summary="List respondent roles and the subdomains each is asked about",
)
async def get_roles() -> RolesResponse:
    return RolesResponse(
        roles=[
            RoleSchema(
                role_id=role.role_id,
                title=role.title,
                description=role.description,
                examples=list(role.examples),
                estimated_time=role.estimated_time,
                subdomains=list(role.subdomains),
                question_count=sum(question_counts(role.role_id).values()),
            )
            for role in ROLES
        ]
    )


@router.get(
    "/maturity-levels",
    response_model=MaturityLevelsResponse,
    summary="List the maturity tier table",
)
async def get_maturity_levels(
    scorer: MaturityScorer = Depends(get_scorer),
) -> MaturityLevelsResponse:
    """Return the configured tier table, lowest tier first."""
    return MaturityLevelsResponse(
        levels=[MaturityTierSchema.from_tier(tier) for tier in scorer.tiers]
    )


# ---------------------------------------------------------------------------
# Scoring endpoints
# ---------------------------------------------------------------------------


@router.post(
    "/score",
    response_model=ScoreResponse,
    summary="Score a set of answers",
)
async def score_answers(
    body: ScoreRequest,
    scorer: MaturityScorer = Depends(get_scorer),
    settings: Settings = Depends(get_settings),
) -> ScoreResponse:
    """Compute subdomain scores, the overall score, tier, and focus areas.

    Subdomains with no scored answers are reported as not assessed and are
    left out of the overall score.
    """
    scores = _score(body, scorer)
    focus = find_focus_areas(
        scores.dimension_scores,
        weak_below=settings.weak_area_threshold,
        strong_from=settings.strong_area_threshold,
        limit=settings.focus_area_limit,
    )
    return ScoreResponse.from_scores(
        scores,
        focus,
        precision=settings.score_display_precision,
    )


@router.post(
    "/recommendation-prompt",
    response_model=RecommendationPromptResponse,
    summary="Render the recommendation-generator prompt for a set of answers",
)
async def recommendation_prompt(
    body: RecommendationPromptRequest,
    scorer: MaturityScorer = Depends(get_scorer),
    settings: Settings = Depends(get_settings),
) -> RecommendationPromptResponse:
    """Score the answers and render the prompt handed to the recommendation generator."""
    scores = _score(body, scorer)
    role_name = body.role_name or get_role(body.role_id).title
    prompt = RecommendationPromptBuilder(settings).render(
        scores,
        role_name=role_name,
        tiers=scorer.tiers,
    )

    logger.info(
        "Recommendation prompt built",
        role_name=role_name,
        role_id=body.role_id,
        overall_score=scores.overall.display_score,
        maturity_tier=scores.overall.maturity_tier_name,
    )

    return RecommendationPromptResponse(
        prompt=prompt.text,
        overall_score=round(scores.overall.overall_score, settings.score_display_precision),
        maturity_tier_name=scores.overall.maturity_tier_name,
        focus_areas=FocusAreasSchema.from_focus_areas(prompt.focus_areas),
    )
