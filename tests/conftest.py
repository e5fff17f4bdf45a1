from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from zentryx.main import app
from zentryx.models.focus_cycle import CycleConfig
from zentryx.services.clock_service import FixedClock
from zentryx.services.dashboard_service import DashboardSession


class FakePipeline:
    """Queues sorted-set commands and applies them on execute()."""

    def __init__(self, redis: "FakeRedis"):
        self._redis = redis
        self._ops: list[tuple[str, tuple]] = []

    def zremrangebyscore(self, key: str, lo: float, hi: float) -> None:
        self._ops.append(("zremrangebyscore", (key, lo, hi)))

    def zadd(self, key: str, mapping: dict[str, float]) -> None:
        self._ops.append(("zadd", (key, mapping)))

    def zcard(self, key: str) -> None:
        self._ops.append(("zcard", (key,)))

    def expire(self, key: str, seconds: int) -> None:
        self._ops.append(("expire", (key, seconds)))

    async def execute(self) -> list:
        results = []
        for name, args in self._ops:
            results.append(getattr(self._redis, f"_{name}")(*args))
        self._ops = []
        return results


class FakeRedis:
    """In-memory Redis mock for testing."""

    def __init__(self):
        self._store: dict[str, str] = {}
        self._zsets: dict[str, dict[str, float]] = {}
        self._ttls: dict[str, int] = {}

    async def get(self, key: str) -> str | None:
        return self._store.get(key)

    async def set(self, key: str, value: str, ex: int | None = None) -> None:
        self._store[key] = str(value)
        if ex:
            self._ttls[key] = ex

    async def incr(self, key: str) -> int:
        val = int(self._store.get(key, "0")) + 1
        self._store[key] = str(val)
        return val

    async def expire(self, key: str, seconds: int) -> None:
        self._ttls[key] = seconds

    async def ping(self) -> bool:
        return True

    async def close(self) -> None:
        pass

    def pipeline(self) -> FakePipeline:
        return FakePipeline(self)

    def _zremrangebyscore(self, key: str, lo: float, hi: float) -> int:
        zset = self._zsets.get(key, {})
        stale = [member for member, score in zset.items() if lo <= score <= hi]
        for member in stale:
            del zset[member]
        return len(stale)

    def _zadd(self, key: str, mapping: dict[str, float]) -> int:
        zset = self._zsets.setdefault(key, {})
        added = sum(1 for member in mapping if member not in zset)
        zset.update(mapping)
        return added

    def _zcard(self, key: str) -> int:
        return len(self._zsets.get(key, {}))

    def _expire(self, key: str, seconds: int) -> bool:
        self._ttls[key] = seconds
        return True


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(hour=9)


@pytest.fixture
def dashboard(clock: FixedClock) -> DashboardSession:
    return DashboardSession(
        config=CycleConfig(
            focus_minutes=25,
            short_break_minutes=5,
            long_break_minutes=15,
            cycles_before_long=4,
        ),
        clock=clock,
        coach_reply_delay_seconds=0,
    )


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
async def client(dashboard: DashboardSession, fake_redis: FakeRedis) -> AsyncGenerator[AsyncClient, None]:
    app.state.dashboard = dashboard
    app.state.redis = fake_redis

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
