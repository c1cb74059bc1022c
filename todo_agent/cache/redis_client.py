"""
Redis 客户端：连接池 + Key 统一管理
"""

import redis.asyncio as aioredis

from todo_agent.config import Settings, get_settings


class RedisKeys:
    """
    Redis Key 统一管理，避免散弹式硬编码
    命名规范：{业务域}:{标识}:{资源类型}
    """

    # ── Worker 元数据 ──
    @staticmethod
    def metadata(worker_id: str, key: str) -> str:
        """Worker 级元数据文档 (TTL 由 METADATA_TTL 控制)"""
        return f"meta:{worker_id}:{key}"


def create_redis_client(settings: Settings) -> aioredis.Redis:
    """按配置创建 Redis 客户端（独立连接池）"""
    pool = aioredis.ConnectionPool.from_url(
        settings.REDIS_URL,
        max_connections=settings.REDIS_MAX_CONNECTIONS,
        decode_responses=True,
        socket_timeout=5,
        socket_connect_timeout=5,
        retry_on_timeout=True,
    )
    return aioredis.Redis(connection_pool=pool)


redis_client = create_redis_client(get_settings())
