"""Maturity tier table and score-to-tier lookup.

Tier ranges are inclusive on both ends over the 0-5 answer scale. Adjacent
tiers share their boundary value (Developing ends at 2.7 and Defined starts
at 2.7). A score that lands exactly on a shared boundary maps to the higher
tier:

    Level  Name        Range
    -----  ----------  ----------
    1      Initial     0.0 - 1.9
    2      Developing  1.9 - 2.7
    3      Defined     2.7 - 3.5
    4      Advanced    3.5 - 4.3
    5      Optimized   4.3 - 5.0
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from dma_maturity_assessment.core.errors import TierConfigurationError

SCORE_MIN: float = 0.0
SCORE_MAX: float = 5.0


@dataclass(frozen=True)
class MaturityTier:
    """A named maturity level covering an inclusive score range.

    Attributes:
        level: Ordinal position of the tier, 1 being the lowest.
        name: Display name (e.g., 'Defined').
        min_score: Inclusive lower bound on the 0-5 scale.
        max_score: Inclusive upper bound on the 0-5 scale.
        description: One-line characterisation of organisations at this tier.
    """

    level: int
    name: str
    min_score: float
    max_score: float
    description: str = ""

    def contains(self, score: float) -> bool:
        return self.min_score <= score <= self.max_score


DEFAULT_MATURITY_TIERS: tuple[MaturityTier, ...] = (
    MaturityTier(
        level=1,
        name="Initial",
        min_score=0.0,
        max_score=1.9,
        description="Ad-hoc, reactive approaches with minimal formalization",
    ),
    MaturityTier(
        level=2,
        name="Developing",
        min_score=1.9,
        max_score=2.7,
        description="Basic capabilities with inconsistent implementation",
    ),
    MaturityTier(
        level=3,
        name="Defined",
        min_score=2.7,
        max_score=3.5,
        description="Standardized approaches with documented processes",
    ),
    MaturityTier(
        level=4,
        name="Advanced",
        min_score=3.5,
        max_score=4.3,
        description="Enterprise-wide integration with proactive management",
    ),
    MaturityTier(
        level=5,
        name="Optimized",
        min_score=4.3,
        max_score=5.0,
        description="Innovative approaches with continuous improvement",
    ),
)


def sort_tiers(tiers: Sequence[MaturityTier]) -> tuple[MaturityTier, ...]:
    """Return the tiers ordered by ascending min_score."""
    return tuple(sorted(tiers, key=lambda tier: (tier.min_score, tier.level)))


def validate_tier_table(tiers: Sequence[MaturityTier]) -> tuple[MaturityTier, ...]:
    """Check that the tier table partitions the full 0-5 scale.

    Neighbouring tiers must share their boundary exactly: a gap would leave
    scores without a tier and an overlap would make the lookup ambiguous.

    Args:
        tiers: Tier table in any order.

    Returns:
        The tiers sorted by ascending min_score.

    Raises:
        TierConfigurationError: If the table is empty, has an inverted range,
            repeats a name or level, or does not exactly cover 0-5.
    """
    if not tiers:
        raise TierConfigurationError("Maturity tier table is empty")

    names = [tier.name for tier in tiers]
    if len(set(names)) != len(names):
        raise TierConfigurationError(f"Duplicate tier names in {names!r}")

    levels = [tier.level for tier in tiers]
    if len(set(levels)) != len(levels):
        raise TierConfigurationError(f"Duplicate tier levels in {levels!r}")

    for tier in tiers:
        if tier.min_score > tier.max_score:
            raise TierConfigurationError(
                f"Tier {tier.name!r} has min_score {tier.min_score} "
                f"greater than max_score {tier.max_score}"
            )

    ordered = sort_tiers(tiers)

    if not math.isclose(ordered[0].min_score, SCORE_MIN):
        raise TierConfigurationError(
            f"Lowest tier {ordered[0].name!r} starts at {ordered[0].min_score}, "
            f"expected {SCORE_MIN}"
        )
    if not math.isclose(ordered[-1].max_score, SCORE_MAX):
        raise TierConfigurationError(
            f"Highest tier {ordered[-1].name!r} ends at {ordered[-1].max_score}, "
            f"expected {SCORE_MAX}"
        )

    for lower, upper in zip(ordered, ordered[1:]):
        if not math.isclose(lower.max_score, upper.min_score):
            kind = "gap" if upper.min_score > lower.max_score else "overlap"
            raise TierConfigurationError(
                f"Tier table has a {kind} between {lower.name!r} "
                f"(max {lower.max_score}) and {upper.name!r} (min {upper.min_score})"
            )

    return ordered


def tier_for(score: float, tiers: Sequence[MaturityTier]) -> MaturityTier:
    """Return the tier whose range contains the score.

    Walks the tiers in ascending order and keeps the last match, so a score
    on a shared boundary resolves to the higher tier.

    Args:
        score: Score on the 0-5 scale. Pass the unrounded value.
        tiers: Tier table sorted by ascending min_score.

    Returns:
        The matching MaturityTier.

    Raises:
        TierConfigurationError: If no tier contains the score.
    """
    match: MaturityTier | None = None
    for tier in tiers:
        if tier.contains(score):
            match = tier
    if match is None:
        raise TierConfigurationError(f"No maturity tier covers score {score!r}")
    return match
