"""
工具注册中心：统一管理所有工具的注册、Schema 获取和执行分发

execute 使用 asyncio.wait_for 做超时保护，任何异常都转换为标准化的失败结果，
保证工具调用不会中断推理循环。
"""

import asyncio

import structlog

from todo_agent.tools.base import BaseTool, ToolResult

log = structlog.get_logger()


class ToolRegistry:
    """工具注册中心"""

    def __init__(self):
        self._tools: dict[str, BaseTool] = {}

    def register(self, tool: BaseTool) -> None:
        """注册一个工具实例"""
        self._tools[tool.name] = tool
        log.debug("工具已注册", tool=tool.name, timeout_ms=tool.timeout_ms)

    def get_all_schemas(self) -> list[dict]:
        """获取所有已注册工具的 OpenAI function calling schema"""
        return [tool.schema() for tool in self._tools.values()]

    async def execute(self, name: str, arguments: dict) -> str:
        """
        执行工具，返回 JSON 字符串结果。

        始终返回标准化的 ToolResult JSON：
        - 成功: {"status": "success", ...data}
        - 失败: {"status": "error", "error": "...", ...data}
        """
        tool = self._tools.get(name)
        if not tool:
            return ToolResult.fail(f"Unknown tool: {name}").to_json()

        try:
            result = await asyncio.wait_for(
                tool.execute(arguments),
                timeout=tool.timeout_ms / 1000,
            )
            return result.to_json()
        except asyncio.TimeoutError:
            log.warning("工具执行超时", tool=name, timeout_ms=tool.timeout_ms)
            return ToolResult.fail(f"Tool {name} timed out after {tool.timeout_ms}ms").to_json()
        except asyncio.CancelledError:
            # 系统级中断信号，必须向上传播，不可吞掉
            log.warning("工具执行被取消", tool=name)
            raise
        except Exception as e:
            log.error("工具执行异常", tool=name, error=str(e), exc_info=True)
            return ToolResult.fail(f"Tool execution failed: {e}").to_json()

    @property
    def tool_names(self) -> list[str]:
        """获取所有已注册工具名称"""
        return list(self._tools.keys())

    @property
    def tool_count(self) -> int:
        """已注册工具总数"""
        return len(self._tools)
