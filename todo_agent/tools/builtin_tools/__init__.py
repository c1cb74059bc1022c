"""
内置工具集：注册所有 Todo 工具到 ToolRegistry

使用方式：
    from todo_agent.tools.builtin_tools import create_builtin_registry
    registry = create_builtin_registry(todo_store)
"""

from todo_agent.todo.store import TodoListStore
from todo_agent.tools.builtin_tools.todo_read import TodoReadTool
from todo_agent.tools.builtin_tools.todo_update import TodoUpdateTool
from todo_agent.tools.builtin_tools.todo_write import TodoWriteTool
from todo_agent.tools.registry import ToolRegistry


def create_builtin_registry(todo_store: TodoListStore) -> ToolRegistry:
    """创建并注册所有内置工具的 Registry 实例"""
    registry = ToolRegistry()

    registry.register(TodoWriteTool(todo_store))
    registry.register(TodoUpdateTool(todo_store))
    registry.register(TodoReadTool(todo_store))

    return registry
