from __future__ import annotations

import json

import pytest
from pydantic import ValidationError
from redis.exceptions import ConnectionError as RedisConnectionError

from todo_agent.cache.redis_client import RedisKeys, redis_client
from todo_agent.config import Settings, get_settings
from todo_agent.metadata.store import (
    InMemoryMetadataStore,
    RedisMetadataStore,
    create_metadata_store,
)

from .fakes import FakeRedis


def test_metadata_key_layout() -> None:
    assert RedisKeys.metadata("worker-1", "todo-list") == "meta:worker-1:todo-list"


@pytest.mark.asyncio
async def test_redis_store_round_trips_json_with_ttl() -> None:
    redis = FakeRedis()
    store = RedisMetadataStore(redis, ttl=60)

    await store.write("todo-list", {"items": [], "note": "中文"}, "w1")

    raw = redis.data["meta:w1:todo-list"]
    assert "中文" in raw
    assert redis.expiry["meta:w1:todo-list"] == 60
    assert await store.read("todo-list", "w1") == {"items": [], "note": "中文"}


@pytest.mark.asyncio
async def test_redis_store_zero_ttl_means_no_expiry() -> None:
    redis = FakeRedis()
    store = RedisMetadataStore(redis, ttl=0)

    await store.write("todo-list", {"items": []}, "w1")

    assert redis.expiry["meta:w1:todo-list"] is None


@pytest.mark.asyncio
async def test_redis_store_missing_key_reads_none() -> None:
    store = RedisMetadataStore(FakeRedis(), ttl=60)
    assert await store.read("todo-list", "nobody") is None


@pytest.mark.asyncio
async def test_redis_store_raises_on_corrupt_document() -> None:
    redis = FakeRedis()
    redis.data["meta:w1:todo-list"] = "{not json"
    store = RedisMetadataStore(redis, ttl=60)

    with pytest.raises(json.JSONDecodeError):
        await store.read("todo-list", "w1")


@pytest.mark.asyncio
async def test_redis_store_propagates_redis_errors() -> None:
    redis = FakeRedis()
    redis.error = RedisConnectionError("connection refused")
    store = RedisMetadataStore(redis, ttl=60)

    with pytest.raises(RedisConnectionError):
        await store.read("todo-list", "w1")
    with pytest.raises(RedisConnectionError):
        await store.write("todo-list", {"items": []}, "w1")


@pytest.mark.asyncio
async def test_in_memory_store_does_not_share_documents() -> None:
    store = InMemoryMetadataStore()
    document = {"items": [{"id": "task-1"}]}

    await store.write("todo-list", document, "w1")
    document["items"].append({"id": "task-2"})

    loaded = await store.read("todo-list", "w1")
    assert loaded == {"items": [{"id": "task-1"}]}

    loaded["items"].clear()
    assert await store.read("todo-list", "w1") == {"items": [{"id": "task-1"}]}
    assert await store.read("todo-list", "w2") is None


def test_factory_selects_backend() -> None:
    memory = create_metadata_store(Settings(METADATA_BACKEND="memory"))
    assert isinstance(memory, InMemoryMetadataStore)

    redis_store = create_metadata_store(Settings(METADATA_BACKEND="redis", METADATA_TTL=30))
    assert isinstance(redis_store, RedisMetadataStore)
    assert redis_store.ttl == 30


@pytest.mark.parametrize(
    "overrides",
    [{"METADATA_BACKEND": "sqlite"}, {"METADATA_TTL": -1}],
)
def test_settings_reject_invalid_metadata_config(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_factory_builds_redis_client_from_given_settings() -> None:
    store = create_metadata_store(
        Settings(
            METADATA_BACKEND="redis",
            REDIS_URL="redis://cache.internal:6380/3",
            REDIS_MAX_CONNECTIONS=4,
        )
    )

    assert isinstance(store, RedisMetadataStore)
    pool = store.redis.connection_pool
    assert pool.connection_kwargs["host"] == "cache.internal"
    assert pool.connection_kwargs["port"] == 6380
    assert pool.connection_kwargs["db"] == 3
    assert pool.max_connections == 4


def test_factory_reuses_shared_client_for_global_settings() -> None:
    store = create_metadata_store(get_settings())

    assert isinstance(store, RedisMetadataStore)
    assert store.redis is redis_client
