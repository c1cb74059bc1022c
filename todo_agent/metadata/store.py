"""
Worker 元数据存储层

每个 worker 下按字符串 key 存放任意 JSON 文档，Key = meta:{worker_id}:{key}。
本层只做读写透传，不做并发控制：同一 key 的并发写入以最后一次为准。

错误策略：
- Redis 不可用 / 文档无法解析时记录错误日志并向上抛出，由调用方决定如何处理
"""

import copy
import json
from typing import Any, Protocol

import redis.asyncio as aioredis
import structlog
from redis.exceptions import RedisError

from todo_agent.cache.redis_client import RedisKeys, create_redis_client, redis_client
from todo_agent.config import Settings, get_settings

log = structlog.get_logger()


class MetadataStore(Protocol):
    """按 (worker_id, key) 读写 JSON 文档的外部存储"""

    async def read(self, key: str, worker_id: str) -> Any | None: ...

    async def write(self, key: str, document: Any, worker_id: str) -> None: ...


class RedisMetadataStore:
    """基于 Redis String 的元数据存储，文档以 JSON 序列化"""

    def __init__(self, redis: aioredis.Redis, ttl: int | None = None):
        self.redis = redis
        self.ttl = get_settings().METADATA_TTL if ttl is None else ttl

    async def read(self, key: str, worker_id: str) -> Any | None:
        """读取文档，不存在时返回 None"""
        redis_key = RedisKeys.metadata(worker_id, key)
        try:
            raw = await self.redis.get(redis_key)
        except RedisError as e:
            log.error("元数据读取失败", worker_id=worker_id, key=key, error=str(e))
            raise
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            log.error("元数据文档不是合法 JSON", worker_id=worker_id, key=key, error=str(e))
            raise

    async def write(self, key: str, document: Any, worker_id: str) -> None:
        """覆盖写入文档，TTL > 0 时设置过期时间"""
        redis_key = RedisKeys.metadata(worker_id, key)
        payload = json.dumps(document, ensure_ascii=False)
        try:
            await self.redis.set(redis_key, payload, ex=self.ttl or None)
        except RedisError as e:
            log.error("元数据写入失败", worker_id=worker_id, key=key, error=str(e))
            raise
        log.debug("元数据已写入", worker_id=worker_id, key=key, size=len(payload))


class InMemoryMetadataStore:
    """进程内元数据存储（本地开发 / 测试），读写均深拷贝，避免调用方共享可变对象"""

    def __init__(self) -> None:
        self._docs: dict[tuple[str, str], Any] = {}

    async def read(self, key: str, worker_id: str) -> Any | None:
        doc = self._docs.get((worker_id, key))
        return copy.deepcopy(doc) if doc is not None else None

    async def write(self, key: str, document: Any, worker_id: str) -> None:
        self._docs[(worker_id, key)] = copy.deepcopy(document)


def create_metadata_store(settings: Settings | None = None) -> MetadataStore:
    """按 METADATA_BACKEND 创建元数据存储"""
    settings = settings or get_settings()
    if settings.METADATA_BACKEND == "memory":
        log.info("使用进程内元数据存储")
        return InMemoryMetadataStore()

    # 全局配置复用共享连接池，其余按传入配置新建客户端
    client = redis_client if settings is get_settings() else create_redis_client(settings)
    return RedisMetadataStore(client, ttl=settings.METADATA_TTL)
