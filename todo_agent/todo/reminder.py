"""
Todo 提醒注入：在每次推理前，将最新 Todo 列表追加到 system prompt 末尾。

注入策略：
- 有列表时：剥离上次注入的状态块后，追加 format_todo_list() 渲染的 markdown
- 无列表或列表为空时：剥离状态块，还原干净的 system prompt
- 幂等：按 TODO_REMINDER_MARKER 截断后重新追加

只修改 messages[0]（role=system），不追加新消息。
"""

from todo_agent.prompts.markers import TODO_REMINDER_END_MARKER, TODO_REMINDER_MARKER
from todo_agent.todo.store import TodoListStore


def strip_todo_reminder(content: str) -> str:
    if TODO_REMINDER_MARKER in content:
        return content[: content.index(TODO_REMINDER_MARKER)]
    return content


async def inject_todo_reminder(
    messages: list[dict],
    todo_store: TodoListStore,
    worker_id: str | None = None,
) -> list[dict]:
    """返回注入后的新消息列表，原列表不被修改"""
    if not messages or messages[0].get("role") != "system":
        return messages

    base = strip_todo_reminder(messages[0]["content"])
    rendered = await todo_store.get_current_list_formatted(worker_id)

    if not rendered:
        if messages[0]["content"] == base:
            return messages  # 未变化，直接返回原列表
        updated = list(messages)
        updated[0] = {**messages[0], "content": base}
        return updated

    block = (
        f"{TODO_REMINDER_MARKER}\n"
        f"Current todo list (auto-synced, check progress and continue):\n"
        f"{rendered}"
        f"{TODO_REMINDER_END_MARKER}"
    )
    updated = list(messages)
    updated[0] = {**messages[0], "content": base + block}
    return updated
