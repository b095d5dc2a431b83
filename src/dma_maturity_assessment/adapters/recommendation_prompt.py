"""Recommendation prompt builder.

Turns a scored assessment into the text prompt consumed by the external
recommendation generator. Only the prompt is produced here; calling the
language model is the generator's job.
"""

from dataclasses import dataclass

from jinja2 import Environment, StrictUndefined

from dma_maturity_assessment.core.insights import FocusAreas, find_focus_areas
from dma_maturity_assessment.core.models import AssessmentScores
from dma_maturity_assessment.core.questions import SUBDOMAINS_BY_ID
from dma_maturity_assessment.core.tiers import MaturityTier
from dma_maturity_assessment.observability import get_logger
from dma_maturity_assessment.settings import Settings

logger = get_logger(__name__)

_PROMPT_TEMPLATE = """\
You are an expert data maturity consultant analyzing an organization's data maturity assessment results.

# MATURITY LEVELS
{% for tier in tiers %}
- {{ tier.name }} ({{ "%.1f"|format(tier.min_score) }}-{{ "%.1f"|format(tier.max_score) }}){{ (": " ~ tier.description) if tier.description else "" }}
{% endfor %}

# ASSESSMENT RESULTS

**User Role:** {{ role_name }}

**Overall Assessment:**
- Overall Maturity Score: {{ "%.1f"|format(overall.display_score) }}/5.0
- Maturity Level: {{ overall.maturity_tier_name }}
- Questions Answered: {{ overall.total_questions_answered }}/{{ overall.total_questions }}

**Subdomain Performance:**
{% for score in assessed %}
- {{ name(score.dimension_id) }}: {{ "%.1f"|format(score.average_score) }}/5.0 - {{ score.maturity_tier_name }}
{% else %}
- No subdomains assessed
{% endfor %}

**Weakest Areas (Priority for Improvement):**
{% for score in focus.weak %}
- {{ name(score.dimension_id) }}: {{ "%.1f"|format(score.average_score) }}/5.0
{% else %}
No significant weak areas identified
{% endfor %}

**Strongest Areas:**
{% for score in focus.strong %}
- {{ name(score.dimension_id) }}: {{ "%.1f"|format(score.average_score) }}/5.0
{% else %}
No significant strong areas identified
{% endfor %}

# YOUR TASK

1. Maturity Level Summary: 2-3 sentences explaining what the current maturity level means, with 3 key indicators.
2. General Recommendations (5 items): organization-wide improvements, focusing on the weakest areas.
3. Role-Specific Recommendations (5 items): actions someone in the "{{ role_name }}" role can directly influence.

Return ONLY valid JSON with keys maturitySummary, general and role.
"""


@dataclass(frozen=True)
class RecommendationPrompt:
    """Rendered prompt plus the features it was built from."""

    text: str
    focus_areas: FocusAreas


def _subdomain_name(dimension_id: str) -> str:
    subdomain = SUBDOMAINS_BY_ID.get(dimension_id)
    return subdomain.name if subdomain is not None else dimension_id


class RecommendationPromptBuilder:
    """Builds recommendation-generator prompts from assessment scores."""

    def __init__(self, settings: Settings) -> None:
        """Initialise with service settings.

        Args:
            settings: Service settings with focus-area thresholds.
        """
        self._settings = settings
        environment = Environment(
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
            autoescape=False,
        )
        self._template = environment.from_string(_PROMPT_TEMPLATE)

    def render(
        self,
        scores: AssessmentScores,
        role_name: str,
        tiers: tuple[MaturityTier, ...],
    ) -> RecommendationPrompt:
        """Render the prompt for one scored assessment.

        Args:
            scores: Output of MaturityScorer.score_assessment.
            role_name: Respondent's role, used for role-specific recommendations.
            tiers: Tier table to describe in the prompt.

        Returns:
            RecommendationPrompt with the prompt text and focus areas.
        """
        focus = find_focus_areas(
            scores.dimension_scores,
            weak_below=self._settings.weak_area_threshold,
            strong_from=self._settings.strong_area_threshold,
            limit=self._settings.focus_area_limit,
        )
        text = self._template.render(
            tiers=tiers,
            role_name=role_name,
            overall=scores.overall,
            assessed=[score for score in scores.dimension_scores if score.is_assessed],
            focus=focus,
            name=_subdomain_name,
        )

        logger.debug(
            "Recommendation prompt rendered",
            role_name=role_name,
            weak_area_count=len(focus.weak),
            strong_area_count=len(focus.strong),
            prompt_length=len(text),
        )
        return RecommendationPrompt(text=text, focus_areas=focus)
