"""
Todo 数据模型

存储文档沿用 camelCase 字段名（createdAt / updatedAt / lastUpdated），
Python 侧使用 snake_case 属性，写入时 model_dump(by_alias=True)。
时间戳统一为 epoch 毫秒。
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

TodoStatus = Literal["pending", "in_progress", "completed"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TodoItem(_CamelModel):
    """单个 Todo 条目"""

    id: str  # task-<序号>，从 1 开始
    description: str
    status: TodoStatus = "pending"
    created_at: int  # 创建时间，之后不再修改
    updated_at: int  # 每次变更刷新


class TodoList(_CamelModel):
    """worker 级 Todo 列表，items 保持创建顺序"""

    items: list[TodoItem] = Field(default_factory=list)
    last_updated: int = 0  # 最后一次成功写入的时间，旧文档缺失时为 0

    def in_progress_count(self) -> int:
        return sum(1 for item in self.items if item.status == "in_progress")


class TodoItemUpdate(BaseModel):
    """单条更新：description 为 None 时保留原描述"""

    id: str
    status: TodoStatus
    description: str | None = None


# ── 批量更新结果（判别联合，success 字段区分两种结果） ──


class TodoUpdateSuccess(BaseModel):
    success: Literal[True] = True
    updated_list: TodoList


class TodoUpdateFailure(BaseModel):
    success: Literal[False] = False
    error: str
    current_list: TodoList | None = None  # 失败前的原始列表，无列表时为 None


TodoUpdateResult = Annotated[
    Union[TodoUpdateSuccess, TodoUpdateFailure],
    Field(discriminator="success"),
]
