from datetime import datetime, timedelta, timezone

import fakeredis
import pytest
from redis.exceptions import ConnectionError as RedisConnectionError

from task_manager.db.store import StoreClient
from task_manager.mcp.registry import build_mcp_server
from task_manager.services.project_service import ProjectService
from task_manager.services.task_service import TaskService


class TickingClock:
    """Returns a strictly increasing UTC time on every call."""

    def __init__(self, start: datetime = datetime(2026, 10, 17, 9, 0, tzinfo=timezone.utc),
                 step: timedelta = timedelta(seconds=1)) -> None:
        self.current = start
        self.step = step

    def __call__(self) -> datetime:
        value = self.current
        self.current += self.step
        return value


class UnreachableRedis:
    """Stands in for a Redis handle whose server is gone."""

    async def ping(self):
        raise RedisConnectionError("Connection refused")

    async def hgetall(self, key):
        raise RedisConnectionError("Connection refused")

    async def smembers(self, key):
        raise RedisConnectionError("Connection refused")

    async def aclose(self):
        return None


@pytest.fixture
async def redis_client():
    client = fakeredis.FakeAsyncRedis(server=fakeredis.FakeServer(), decode_responses=True)
    yield client
    await client.aclose()


@pytest.fixture
async def store(redis_client):
    store = StoreClient(redis_client=redis_client)
    await store.connect()
    return store


@pytest.fixture
def unreachable_store():
    return StoreClient(redis_client=UnreachableRedis())


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def projects(store, clock):
    return ProjectService(store, clock=clock)


@pytest.fixture
def tasks(store, clock):
    return TaskService(store, clock=clock)


@pytest.fixture
def mcp_server(projects, tasks):
    return build_mcp_server(projects, tasks)
