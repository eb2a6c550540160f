import logging
from contextlib import asynccontextmanager
from datetime import timedelta

from dotenv import load_dotenv
load_dotenv()  # Load .env file before importing settings

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded

from core.config import settings
from core.database import SessionLocal, init_db
from core.rate_limiter import limiter, rate_limit_exceeded_handler, RateLimits
from src.calendar_bc.holiday.infrastructure.services import (
    HolidayCacheManager,
    build_holiday_provider,
)

logger = logging.getLogger(__name__)


def build_holiday_manager() -> HolidayCacheManager:
    """Holiday manager shared by every request for the process lifetime."""
    return HolidayCacheManager(
        provider=build_holiday_provider(settings),
        session_factory=SessionLocal,
        stale_after=timedelta(hours=settings.HOLIDAY_STALE_HOURS),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and the holiday manager on startup."""
    init_db()
    if getattr(app.state, "holiday_manager", None) is None:
        app.state.holiday_manager = build_holiday_manager()
    logger.info(f"Holiday provider: {app.state.holiday_manager.provider.name}")

    yield

    logger.info("Calendar API shutting down")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    app = FastAPI(
        title="Dopamine Calendar API",
        description="Personal calendar with events, custom emojis, holiday overlays and JSON backups",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.FRONTEND_URL],
        allow_credentials=False,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    # Rate limiting
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # Register routers
    from adapters.http.api.calendar.routers import (
        holiday_router,
        event_router,
        calendar_router,
        emoji_router,
        settings_router,
        snapshot_router,
    )
    app.include_router(holiday_router, prefix="/api/v1")
    app.include_router(event_router, prefix="/api/v1")
    app.include_router(calendar_router, prefix="/api/v1")
    app.include_router(emoji_router, prefix="/api/v1")
    app.include_router(settings_router, prefix="/api/v1")
    app.include_router(snapshot_router, prefix="/api/v1")

    @app.get("/health")
    @limiter.limit(RateLimits.HEALTH)
    async def health_check(request: Request):
        """Health check endpoint."""
        manager = getattr(request.app.state, "holiday_manager", None)
        return {
            "status": "healthy",
            "environment": settings.ENVIRONMENT,
            "holiday_provider": manager.provider.name if manager else None,
            "holiday_cache_entries": len(manager.memory) if manager else 0,
        }

    return app


app = create_app()
