"""
元数据模块：worker 级 JSON 文档存储

Todo 列表等会话状态都通过 MetadataStore 读写，后端可在 Redis 与进程内实现间切换。
"""

from todo_agent.metadata.store import (
    InMemoryMetadataStore,
    MetadataStore,
    RedisMetadataStore,
    create_metadata_store,
)

__all__ = [
    "InMemoryMetadataStore",
    "MetadataStore",
    "RedisMetadataStore",
    "create_metadata_store",
]
