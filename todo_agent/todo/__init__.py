"""
Todo 模块：worker 级任务列表管理

提供基于 MetadataStore 持久化的 TodoListStore 与相关 schema，
供 todo_write / todo_update / todo_read 工具以及推理循环的 Todo 注入使用。
"""

from todo_agent.todo.schemas import (
    TodoItem,
    TodoItemUpdate,
    TodoList,
    TodoUpdateFailure,
    TodoUpdateResult,
    TodoUpdateSuccess,
)
from todo_agent.todo.store import TodoListStore, format_todo_list

__all__ = [
    "TodoItem",
    "TodoItemUpdate",
    "TodoList",
    "TodoListStore",
    "TodoUpdateFailure",
    "TodoUpdateResult",
    "TodoUpdateSuccess",
    "format_todo_list",
]
