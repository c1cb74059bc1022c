"""
运行时装配入口：配置 → 日志 → 元数据存储 → TodoListStore → 工具 Registry
"""

from dataclasses import dataclass

import structlog

from todo_agent.config import Settings, get_settings
from todo_agent.metadata.store import MetadataStore, create_metadata_store
from todo_agent.observability.logging_config import setup_logging
from todo_agent.todo.store import TodoListStore
from todo_agent.tools.builtin_tools import create_builtin_registry
from todo_agent.tools.registry import ToolRegistry

log = structlog.get_logger()


@dataclass
class TodoRuntime:
    settings: Settings
    metadata: MetadataStore
    todo_store: TodoListStore
    tool_registry: ToolRegistry


def create_todo_runtime(settings: Settings | None = None) -> TodoRuntime:
    """按配置装配 Todo 运行时组件"""
    settings = settings or get_settings()
    setup_logging(env=settings.ENV, level=settings.LOG_LEVEL)

    metadata = create_metadata_store(settings)
    todo_store = TodoListStore(metadata)
    registry = create_builtin_registry(todo_store)

    log.info(
        "Todo 运行时已就绪",
        app=settings.APP_NAME,
        backend=settings.METADATA_BACKEND,
        tools=registry.tool_names,
    )
    return TodoRuntime(
        settings=settings,
        metadata=metadata,
        todo_store=todo_store,
        tool_registry=registry,
    )
