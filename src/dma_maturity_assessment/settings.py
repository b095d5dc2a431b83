"""Service settings for the DMA scoring service.

Values are read from the environment with the DMA_ prefix. The maturity
tier table can be overridden as JSON, e.g.::

    DMA_MATURITY_TIERS='[{"level": 1, "name": "Initial", "min_score": 0, "max_score": 5}]'
"""

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dma_maturity_assessment.core.tiers import DEFAULT_MATURITY_TIERS, MaturityTier


class MaturityTierConfig(BaseModel):
    """One configured row of the maturity tier table."""

    level: int = Field(..., ge=1)
    name: str = Field(..., min_length=1)
    min_score: float
    max_score: float
    description: str = ""

    def to_tier(self) -> MaturityTier:
        return MaturityTier(
            level=self.level,
            name=self.name,
            min_score=self.min_score,
            max_score=self.max_score,
            description=self.description,
        )


def _default_tier_configs() -> list[MaturityTierConfig]:
    return [
        MaturityTierConfig(
            level=tier.level,
            name=tier.name,
            min_score=tier.min_score,
            max_score=tier.max_score,
            description=tier.description,
        )
        for tier in DEFAULT_MATURITY_TIERS
    ]


class Settings(BaseSettings):
    """Settings for dma-maturity-assessment.

    Environment variable prefix: DMA_
    """

    service_name: str = "dma-maturity-assessment"

    # Logging
    log_level: str = "INFO"
    log_json: bool = False

    # Scoring configuration
    maturity_tiers: list[MaturityTierConfig] = Field(default_factory=_default_tier_configs)
    score_display_precision: int = Field(default=1, ge=0, le=4)

    # Focus areas fed to the recommendation generator
    weak_area_threshold: float = 2.7
    strong_area_threshold: float = 3.5
    focus_area_limit: int = Field(default=3, ge=1)

    model_config = SettingsConfigDict(env_prefix="DMA_")

    def tier_table(self) -> list[MaturityTier]:
        """Return the configured tier table as core MaturityTier records."""
        return [config.to_tier() for config in self.maturity_tiers]
