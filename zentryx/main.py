import logging
from contextlib import asynccontextmanager

import redis.asyncio as redis
import sentry_sdk
from fastapi import FastAPI
from redis.exceptions import RedisError

from zentryx.config import settings
from zentryx.services.dashboard_service import DashboardSession

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# Initialize Sentry
if settings.SENTRY_DSN:
    sentry_sdk.init(
        dsn=settings.SENTRY_DSN,
        environment=settings.ENVIRONMENT,
        traces_sample_rate=0.2 if settings.ENVIRONMENT == "production" else 1.0,
        send_default_pii=False,
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: build the dashboard, connect Redis, start ticking
    app.state.dashboard = DashboardSession.from_settings(settings)

    app.state.redis = redis.from_url(settings.REDIS_URL, decode_responses=True)
    try:
        await app.state.redis.ping()
    except (RedisError, OSError):
        logger.warning("Redis unavailable at %s; rate limiting disabled", settings.REDIS_URL)
        await app.state.redis.close()
        app.state.redis = None

    app.state.scheduler = None
    if settings.TICKER_ENABLED:
        app.state.scheduler = app.state.dashboard.scheduler(
            countdown_period=settings.COUNTDOWN_TICK_SECONDS,
            stopwatch_period=settings.STOPWATCH_TICK_MS / 1000,
        )
        app.state.scheduler.start()

    yield

    # Shutdown
    if app.state.scheduler is not None:
        await app.state.scheduler.stop()
    if app.state.redis is not None:
        await app.state.redis.close()


app = FastAPI(
    title="Zentryx API",
    version="0.1.0",
    lifespan=lifespan,
)

# Middleware
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from zentryx.middleware.rate_limit import RateLimitMiddleware  # noqa: E402

app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=r"http://(localhost|127\.0\.0\.1)(:\d+)?",
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RateLimitMiddleware)

from zentryx.middleware.error_handler import register_error_handlers  # noqa: E402

register_error_handlers(app)

# Routers
from zentryx.routers.coach import router as coach_router  # noqa: E402
from zentryx.routers.schedule import router as schedule_router  # noqa: E402
from zentryx.routers.stats import router as stats_router  # noqa: E402
from zentryx.routers.tasks import router as tasks_router  # noqa: E402
from zentryx.routers.timers import router as timers_router  # noqa: E402

app.include_router(timers_router)
app.include_router(tasks_router)
app.include_router(stats_router)
app.include_router(schedule_router)
app.include_router(coach_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
