"""
Todo 列表存储层

每个 worker 一份 Todo 列表，存放在 MetadataStore 的固定 key（todo-list）下。
所有操作都是「读 → 内存中校验/变换 → 整体覆盖写」，不加锁：
同一 worker 的并发更新以最后一次写入为准。

批量更新语义：
- 全部成功才落盘；任一 id 不存在或违反「最多一个 in_progress」规则时整批丢弃
- 预期内的失败以 TodoUpdateFailure 返回，其他异常直接向上抛出
"""

import time
from collections.abc import Callable, Iterable, Sequence

import structlog

from todo_agent.execution.worker_context import get_worker_id
from todo_agent.metadata.store import MetadataStore
from todo_agent.todo.schemas import (
    TodoItem,
    TodoItemUpdate,
    TodoList,
    TodoStatus,
    TodoUpdateFailure,
    TodoUpdateResult,
    TodoUpdateSuccess,
)

log = structlog.get_logger()

TODO_METADATA_KEY = "todo-list"

NO_LIST_ERROR = "No todo list exists. Please create one first."
TOO_MANY_IN_PROGRESS_ERROR = "Only one task can be in progress at a time."


class TodoListValidationError(Exception):
    """Todo 列表违反业务规则"""


def now_ms() -> int:
    return int(time.time() * 1000)


def validate_todo_list(todo_list: TodoList) -> None:
    """规则 1：任意时刻最多只有一个 in_progress 任务"""
    if todo_list.in_progress_count() > 1:
        raise TodoListValidationError(TOO_MANY_IN_PROGRESS_ERROR)


def format_todo_list(todo_list: TodoList | None) -> str:
    """渲染为 markdown 片段，列表为空时返回空字符串"""
    if not todo_list or not todo_list.items:
        return ""

    markdown = "## Todo List\n"
    for item in todo_list.items:
        markdown += f"- id:{item.id} ({item.status}) {item.description}\n"
    return markdown


class TodoListStore:
    """worker 级 Todo 列表的读写与批量更新"""

    def __init__(
        self,
        metadata: MetadataStore,
        default_worker: Callable[[], str] = get_worker_id,
        clock: Callable[[], int] = now_ms,
    ):
        self.metadata = metadata
        self.default_worker = default_worker
        self.clock = clock

    def _resolve(self, worker_id: str | None) -> str:
        return worker_id if worker_id is not None else self.default_worker()

    async def get_list(self, worker_id: str | None = None) -> TodoList | None:
        """读取当前列表；不存在或文档缺少 items 时视为无列表"""
        document = await self.metadata.read(TODO_METADATA_KEY, self._resolve(worker_id))
        if not isinstance(document, dict) or not isinstance(document.get("items"), list):
            return None
        return TodoList.model_validate(document)

    async def save_list(self, todo_list: TodoList, worker_id: str | None = None) -> None:
        """原样写入，不做校验（调用方负责）"""
        await self.metadata.write(
            TODO_METADATA_KEY,
            todo_list.model_dump(by_alias=True),
            self._resolve(worker_id),
        )

    async def initialize(
        self, descriptions: Iterable[str], worker_id: str | None = None
    ) -> TodoList:
        """按描述新建列表，整体替换该 worker 之前的列表"""
        worker_id = self._resolve(worker_id)
        now = self.clock()
        todo_list = TodoList(
            items=[
                TodoItem(
                    id=f"task-{index}",
                    description=description,
                    status="pending",
                    created_at=now,
                    updated_at=now,
                )
                for index, description in enumerate(descriptions, start=1)
            ],
            last_updated=now,
        )
        await self.save_list(todo_list, worker_id)
        log.info("Todo 列表已初始化", worker_id=worker_id, count=len(todo_list.items))
        return todo_list

    async def update_item(
        self,
        id: str,
        status: TodoStatus,
        description: str | None = None,
        worker_id: str | None = None,
    ) -> TodoUpdateResult:
        """单条更新，等价于只含一条的批量更新"""
        return await self.update_items(
            [TodoItemUpdate(id=id, status=status, description=description)],
            worker_id,
        )

    async def update_items(
        self, updates: Sequence[TodoItemUpdate], worker_id: str | None = None
    ) -> TodoUpdateResult:
        """批量更新：全部应用并通过校验后整体落盘，否则保持原列表不变"""
        worker_id = self._resolve(worker_id)
        todo_list = await self.get_list(worker_id)
        if todo_list is None:
            return TodoUpdateFailure(error=NO_LIST_ERROR, current_list=None)

        now = self.clock()
        updated_items = list(todo_list.items)

        for update in updates:
            index = next(
                (i for i, item in enumerate(updated_items) if item.id == update.id),
                None,
            )
            if index is None:
                log.info("Todo 更新失败：任务不存在", worker_id=worker_id, task_id=update.id)
                return TodoUpdateFailure(
                    error=f"Task id {update.id} was not found.",
                    current_list=todo_list,
                )

            current = updated_items[index]
            updated_items[index] = current.model_copy(
                update={
                    "status": update.status,
                    "description": (
                        update.description
                        if update.description is not None
                        else current.description
                    ),
                    "updated_at": now,
                }
            )

        updated_list = TodoList(items=updated_items, last_updated=now)

        try:
            validate_todo_list(updated_list)
        except TodoListValidationError as e:
            log.info("Todo 更新被拒绝", worker_id=worker_id, reason=str(e))
            return TodoUpdateFailure(error=str(e), current_list=todo_list)

        await self.save_list(updated_list, worker_id)
        log.debug("Todo 列表已更新", worker_id=worker_id, updates=len(updates))
        return TodoUpdateSuccess(updated_list=updated_list)

    async def get_current_list_formatted(self, worker_id: str | None = None) -> str:
        """读取当前列表并渲染为 markdown，无列表时返回空字符串"""
        return format_todo_list(await self.get_list(worker_id))
