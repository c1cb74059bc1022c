"""
Worker ID ContextVar

与 session_id 的 ContextVar 模式一致：
- ContextVar 保证 asyncio 并发隔离
- set_worker_id 返回 Token，finally 块用 reset_worker_id 精确还原
- 未绑定时回落到配置中的 DEFAULT_WORKER_ID
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token

import structlog

from todo_agent.config import get_settings

_worker_var: ContextVar[str] = ContextVar("worker_id", default="")


def get_worker_id() -> str:
    """读取当前 async 上下文的 worker_id，未绑定时返回默认 worker"""
    return _worker_var.get() or get_settings().DEFAULT_WORKER_ID


def set_worker_id(worker_id: str) -> Token:
    """设置 worker_id，返回还原用的 Token"""
    return _worker_var.set(worker_id)


def reset_worker_id(token: Token) -> None:
    """精确还原到设置前的值（与 Token 配套使用）"""
    _worker_var.reset(token)


@contextmanager
def worker_scope(worker_id: str) -> Iterator[str]:
    """在 with 块内绑定 worker_id，同时注入 structlog 上下文"""
    token = set_worker_id(worker_id)
    with structlog.contextvars.bound_contextvars(worker_id=worker_id):
        try:
            yield worker_id
        finally:
            reset_worker_id(token)
