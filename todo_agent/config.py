"""
全局配置模块：通过 pydantic-settings 读取 .env 环境变量
"""

from functools import lru_cache
from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用全局配置，从 .env 文件加载"""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── 元数据存储 ──
    METADATA_BACKEND: str = "redis"  # redis | memory
    METADATA_TTL: int = 86400 * 7  # 元数据 Key TTL（秒），0 表示不过期

    # ── Redis ──
    REDIS_URL: str = "redis://localhost:6379/0"
    REDIS_MAX_CONNECTIONS: int = 10

    # ── Worker ──
    DEFAULT_WORKER_ID: str = "default"  # 上下文未绑定 worker 时使用

    # ── 工具 ──
    DEFAULT_TOOL_TIMEOUT_MS: int = 10000

    # ── 应用 ──
    ENV: str = "development"  # development | production
    APP_NAME: str = "todo-agent"
    LOG_LEVEL: str = "INFO"

    @model_validator(mode="after")
    def _check_metadata_backend(self) -> "Settings":
        """元数据后端只支持 redis / memory，TTL 不能为负"""
        if self.METADATA_BACKEND not in ("redis", "memory"):
            raise ValueError(
                f"METADATA_BACKEND 只支持 redis 或 memory，当前值: {self.METADATA_BACKEND}"
            )
        if self.METADATA_TTL < 0:
            raise ValueError("METADATA_TTL 不能为负数")
        return self


@lru_cache
def get_settings() -> Settings:
    """单例获取配置（带缓存）"""
    return Settings()
