import importlib

import pytest
from redis.backoff import NoBackoff

from task_manager.db.store import StoreClient
from task_manager.errors import StoreUnavailable
from task_manager.services.project_service import ProjectService


async def test_connect_is_idempotent(redis_client) -> None:
    store = StoreClient(redis_client=redis_client)
    await store.connect()
    await store.connect()
    assert store.redis is redis_client
    await store.health_check()


async def test_health_check_reports_unreachable_store(unreachable_store) -> None:
    with pytest.raises(StoreUnavailable):
        await unreachable_store.health_check()


async def test_commands_against_unreachable_store_raise_store_unavailable(unreachable_store) -> None:
    service = ProjectService(unreachable_store)
    with pytest.raises(StoreUnavailable):
        await service.get_project("anything")
    with pytest.raises(StoreUnavailable):
        await service.list_projects()


async def test_handle_is_unavailable_before_connect_and_after_close(redis_client) -> None:
    store = StoreClient("redis://localhost:6379/0")
    assert not store.connected
    with pytest.raises(StoreUnavailable):
        store.redis

    store = StoreClient(redis_client=redis_client)
    await store.close()
    with pytest.raises(StoreUnavailable):
        store.redis


def test_store_requires_url_or_client() -> None:
    with pytest.raises(ValueError):
        StoreClient()


def test_tls_urls_skip_certificate_verification_by_default() -> None:
    client = StoreClient("rediss://cache.example.com:6380")._build_client()
    kwargs = client.connection_pool.connection_kwargs
    assert kwargs["ssl_cert_reqs"] == "none"
    assert kwargs["decode_responses"] is True


def test_store_module_imports_cleanly() -> None:
    module = importlib.import_module("task_manager.db.store")
    assert module.StoreClient.redis.__doc__ == "The live Redis handle."


async def test_reconnect_after_close_reuses_injected_client(redis_client) -> None:
    store = StoreClient(redis_client=redis_client)
    await store.connect()
    await store.close()
    assert not store.connected

    await store.connect()
    await store.health_check()
    assert store.redis is redis_client


def test_commands_retry_once_without_backoff() -> None:
    client = StoreClient("redis://localhost:6379/0")._build_client()
    retry = client.connection_pool.connection_kwargs["retry"]
    assert retry._retries == 1
    assert isinstance(retry._backoff, NoBackoff)
