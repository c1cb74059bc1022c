"""
TodoUpdateTool：批量更新 Todo 状态

执行逻辑：接收 {id, status, description?} 列表 → TodoListStore.update_items()
全部成功才落盘；失败时返回错误信息和更新前的列表快照，LLM 据此修正下一次调用。
"""

from pydantic import BaseModel, Field

from todo_agent.todo.schemas import TodoItemUpdate, TodoUpdateFailure
from todo_agent.todo.store import TodoListStore, format_todo_list
from todo_agent.tools.base import BaseTool, ToolResult


class _Params(BaseModel):
    updates: list[TodoItemUpdate] = Field(
        min_length=1,
        description="Updates applied together; if any one fails, none are applied.",
    )


class TodoUpdateTool(BaseTool):
    """批量更新当前 worker 的 Todo 条目"""

    def __init__(self, todo_store: TodoListStore):
        self.todo_store = todo_store

    @property
    def name(self) -> str:
        return "todo_update"

    @property
    def description(self) -> str:
        return (
            "Update one or more tasks in the current todo list by id.\n"
            "- Mark a task 'in_progress' right before working on it (only one at a time)\n"
            "- Mark it 'completed' immediately after finishing it\n"
            "- Optionally pass a new description to refine the task"
        )

    @property
    def params_model(self) -> type[BaseModel]:
        return _Params

    async def execute(self, args: dict) -> ToolResult:
        params = _Params.model_validate(args)
        result = await self.todo_store.update_items(params.updates)

        if isinstance(result, TodoUpdateFailure):
            current = result.current_list
            return ToolResult.fail(
                result.error,
                todos=current.model_dump(by_alias=True) if current else None,
                snapshot=format_todo_list(current),
            )

        updated = result.updated_list
        return ToolResult.success(
            title=f"{len(params.updates)} tasks updated",
            todos=updated.model_dump(by_alias=True),
            snapshot=format_todo_list(updated),
        )
