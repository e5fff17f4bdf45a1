from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Focus cycle defaults for a new dashboard session
    FOCUS_MINUTES: int = 25
    SHORT_BREAK_MINUTES: int = 5
    LONG_BREAK_MINUTES: int = 15
    CYCLES_BEFORE_LONG: int = 4

    # Tick scheduler
    TICKER_ENABLED: bool = True
    COUNTDOWN_TICK_SECONDS: float = 1.0
    STOPWATCH_TICK_MS: int = 100

    # Coach
    COACH_REPLY_DELAY_MS: int = 300
    COACH_DAILY_LIMIT: int = 200

    REDIS_URL: str = "redis://localhost:6379/0"
    RATE_LIMIT_PER_MINUTE: int = 100

    # Observability
    SENTRY_DSN: str = ""
    LOG_LEVEL: str = "INFO"

    ENVIRONMENT: str = "development"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
