"""DMA Maturity Assessment service entry point."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from dma_maturity_assessment import __version__
from dma_maturity_assessment.api.router import get_scorer, get_settings, router
from dma_maturity_assessment.observability import configure_logging, get_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Manage application startup and shutdown lifecycle.

    The tier table is validated here so that a bad configuration stops the
    service at startup instead of failing individual scoring requests.

    Args:
        app: The FastAPI application instance.

    Yields:
        None
    """
    settings = get_settings()
    configure_logging(settings.log_level, json_logs=settings.log_json)
    scorer = get_scorer()
    logger.info(
        "Service starting",
        service_name=settings.service_name,
        version=__version__,
        tiers=[tier.name for tier in scorer.tiers],
    )
    yield
    logger.info("Service stopping", service_name=settings.service_name)


def create_app() -> FastAPI:
    """Build the FastAPI application with all routers mounted."""
    application = FastAPI(
        title="dma-maturity-assessment",
        version=__version__,
        lifespan=lifespan,
    )
    application.include_router(router, prefix="/api/v1")
    return application


app: FastAPI = create_app()
