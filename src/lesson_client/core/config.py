"""基于 Pydantic Settings 的客户端配置，支持环境变量与 .env 分层加载。"""

from functools import lru_cache
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    全局配置。环境变量前缀 LESSON_，优先级：环境变量 > .env > 默认值。
    """

    model_config = SettingsConfigDict(
        env_prefix="LESSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    env: Literal["development", "staging", "production"] = "development"
    log_level: str = "INFO"
    # 日志目录，按小时轮转；client.log 为全部级别，error.log 仅 ERROR
    log_dir: str = "./logs"

    # 后端 API 地址，各资源模块只拼接路径
    api_host: str = "http://lesson.devtesting.top"
    # 单次请求超时（毫秒），超时后取消请求并抛出 code=-1
    request_timeout_ms: int = 30000

    # 不携带 Authorization 的接口路径后缀，逗号分隔
    auth_whitelist: str = "/auth/login,/auth/register"
    # 401 时交给会话过期回调的登录路由
    login_route: str = "/login"

    # 本地持久化存储（token、用户信息、当前校区），相当于浏览器的 cookie / localStorage
    storage_path: str = "./data/client_storage.json"

    # 课程列表 GET 缓存有效期（毫秒），0 表示关闭
    course_cache_ttl_ms: int = 30000

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        allowed = ("DEBUG", "INFO", "WARNING", "ERROR")
        u = v.upper()
        if u not in allowed:
            raise ValueError(f"log_level must be one of {allowed}")
        return u

    @field_validator("request_timeout_ms")
    @classmethod
    def validate_request_timeout_ms(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("request_timeout_ms must be > 0")
        return v

    @field_validator("course_cache_ttl_ms")
    @classmethod
    def validate_course_cache_ttl_ms(cls, v: int) -> int:
        if v < 0:
            raise ValueError("course_cache_ttl_ms must be >= 0")
        return v

    @field_validator("api_host")
    @classmethod
    def strip_api_host(cls, v: str) -> str:
        return v.strip().rstrip("/")

    def get_auth_whitelist(self) -> tuple[str, ...]:
        """返回免鉴权路径后缀，去掉空白与末尾斜杠。"""
        if not self.auth_whitelist or not self.auth_whitelist.strip():
            return ()
        return tuple(
            p.strip().rstrip("/") for p in self.auth_whitelist.split(",") if p.strip()
        )

    @property
    def request_timeout_seconds(self) -> float:
        return self.request_timeout_ms / 1000

    @property
    def is_production(self) -> bool:
        return self.env == "production"


@lru_cache
def get_settings() -> Settings:
    """获取单例配置，便于测试时覆盖。"""
    return Settings()
