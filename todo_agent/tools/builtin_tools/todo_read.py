"""
TodoReadTool：读取 Todo 列表

执行逻辑：读取当前 worker 的 Todo → 返回完整快照和各状态计数
"""

from pydantic import BaseModel

from todo_agent.todo.store import TodoListStore, format_todo_list
from todo_agent.tools.base import BaseTool, ToolResult


class _EmptyParams(BaseModel):
    """无参数"""


class TodoReadTool(BaseTool):
    """读取当前 worker 的 Todo 列表"""

    def __init__(self, todo_store: TodoListStore):
        self.todo_store = todo_store

    @property
    def name(self) -> str:
        return "todo_read"

    @property
    def description(self) -> str:
        return (
            "Read the current todo list. Use it when unsure what to do next "
            "or to confirm overall progress. Takes no arguments."
        )

    @property
    def params_model(self) -> type[BaseModel]:
        return _EmptyParams

    async def execute(self, args: dict) -> ToolResult:
        todo_list = await self.todo_store.get_list()
        if todo_list is None:
            return ToolResult.success(title="No todo list", todos=None, snapshot="")

        items = todo_list.items
        in_progress = sum(1 for t in items if t.status == "in_progress")
        pending = sum(1 for t in items if t.status == "pending")
        completed = sum(1 for t in items if t.status == "completed")
        title = (
            f"{in_progress} in progress, {pending} pending, "
            f"{completed} completed ({len(items)} total)"
        )

        return ToolResult.success(
            title=title,
            todos=todo_list.model_dump(by_alias=True),
            snapshot=format_todo_list(todo_list),
        )
