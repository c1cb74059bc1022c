"""
TodoWriteTool：新建 Todo 列表

执行逻辑：接收任务描述列表 → TodoListStore.initialize() 整体替换 → 返回状态快照
"""

from pydantic import BaseModel, Field

from todo_agent.todo.store import TodoListStore, format_todo_list
from todo_agent.tools.base import BaseTool, ToolResult


class _Params(BaseModel):
    descriptions: list[str] = Field(
        description="Task descriptions in execution order. Replaces any existing todo list."
    )


class TodoWriteTool(BaseTool):
    """新建当前 worker 的 Todo 列表"""

    def __init__(self, todo_store: TodoListStore):
        self.todo_store = todo_store

    @property
    def name(self) -> str:
        return "todo_write"

    @property
    def description(self) -> str:
        return (
            "Create the todo list for the current task. Call this before starting any "
            "multi-step work. Every task starts as 'pending' and gets an id task-1, task-2, ...\n"
            "Calling it again replaces the whole list."
        )

    @property
    def params_model(self) -> type[BaseModel]:
        return _Params

    async def execute(self, args: dict) -> ToolResult:
        params = _Params.model_validate(args)
        todo_list = await self.todo_store.initialize(params.descriptions)
        return ToolResult.success(
            title=f"{len(todo_list.items)} tasks created",
            todos=todo_list.model_dump(by_alias=True),
            snapshot=format_todo_list(todo_list),
        )
