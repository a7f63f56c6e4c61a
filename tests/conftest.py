"""全局测试 fixtures：配置、内存存储、MockTransport 客户端与响应信封工厂。"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from lesson_client.core.auth import AuthTokenAccessor, CampusContext
from lesson_client.core.config import Settings
from lesson_client.core.http import ApiClient
from lesson_client.core.storage import MemoryStorage

TEST_API_HOST = "http://lesson.test"


# ---------------------------------------------------------------------------
# 测试数据工厂
# ---------------------------------------------------------------------------

def make_envelope(data: Any = None, code: int = 200, message: str = "ok") -> dict[str, Any]:
    return {"code": code, "data": data, "message": message}


def make_page(items: list[dict[str, Any]], total: int | None = None, page_num: int = 1, page_size: int = 10) -> dict[str, Any]:
    return {
        "list": items,
        "total": len(items) if total is None else total,
        "pageNum": page_num,
        "pageSize": page_size,
    }


def json_response(payload: Any, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


class RecordingHandler:
    """MockTransport 处理器：记录每次请求，按顺序返回预设响应（最后一个可重复使用）。"""

    def __init__(self, *responses: httpx.Response | Callable[[httpx.Request], httpx.Response]):
        self.responses = list(responses) or [json_response(make_envelope())]
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        idx = min(len(self.requests) - 1, len(self.responses) - 1)
        response = self.responses[idx]
        if callable(response) and not isinstance(response, httpx.Response):
            return response(request)
        # 每次返回新的 Response，预设响应可被多次复用
        return httpx.Response(response.status_code, headers=response.headers, content=response.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)

    @property
    def call_count(self) -> int:
        return len(self.requests)


# ---------------------------------------------------------------------------
# fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> Settings:
    """不读取 .env 的测试配置。"""
    return Settings(
        _env_file=None,
        api_host=TEST_API_HOST,
        request_timeout_ms=2000,
        course_cache_ttl_ms=30000,
        env="development",
    )


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def token_accessor(storage: MemoryStorage) -> AuthTokenAccessor:
    return AuthTokenAccessor(storage)


@pytest.fixture
def campus_context(storage: MemoryStorage) -> CampusContext:
    return CampusContext(storage)


@pytest.fixture
def make_client(settings: Settings, token_accessor: AuthTokenAccessor):
    """构造挂在 MockTransport 上的 ApiClient。"""

    def _make(handler: Callable[[httpx.Request], Any], **kwargs: Any) -> ApiClient:
        return ApiClient(
            settings,
            token_accessor=token_accessor,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return _make


class FakeClock:
    """可手动推进的时钟，用于缓存过期测试。"""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000
