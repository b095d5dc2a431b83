"""Focus-area extraction from subdomain scores.

Weak areas are the lowest-scoring assessed subdomains below the Defined
threshold; strong areas are the highest-scoring ones at Advanced or above.
Both lists feed the recommendation generator as input features.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from dma_maturity_assessment.core.models import DimensionScore

DEFAULT_WEAK_BELOW: float = 2.7
DEFAULT_STRONG_FROM: float = 3.5
DEFAULT_FOCUS_LIMIT: int = 3


@dataclass(frozen=True)
class FocusAreas:
    """Subdomains to prioritise (weak) and to build on (strong)."""

    weak: tuple[DimensionScore, ...]
    strong: tuple[DimensionScore, ...]


def find_focus_areas(
    dimension_scores: Sequence[DimensionScore],
    weak_below: float = DEFAULT_WEAK_BELOW,
    strong_from: float = DEFAULT_STRONG_FROM,
    limit: int = DEFAULT_FOCUS_LIMIT,
) -> FocusAreas:
    """Pick the weakest and strongest assessed subdomains.

    Unassessed subdomains are never reported as weak: their zero average
    is not a measured score.

    Args:
        dimension_scores: Scores for every subdomain.
        weak_below: Averages strictly below this are weak.
        strong_from: Averages at or above this are strong.
        limit: Maximum entries in each list.

    Returns:
        FocusAreas with weak sorted ascending and strong sorted descending.
    """
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit!r}")
    if weak_below > strong_from:
        raise ValueError(
            f"weak_below ({weak_below}) must not exceed strong_from ({strong_from})"
        )

    assessed = [score for score in dimension_scores if score.is_assessed]

    weak = sorted(
        (score for score in assessed if score.average_score < weak_below),
        key=lambda score: score.average_score,
    )
    strong = sorted(
        (score for score in assessed if score.average_score >= strong_from),
        key=lambda score: score.average_score,
        reverse=True,
    )
    return FocusAreas(weak=tuple(weak[:limit]), strong=tuple(strong[:limit]))
