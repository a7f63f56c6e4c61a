"""请求 / 响应拦截器。

请求拦截器：非白名单接口注入 Authorization 头（原始 token，无 Bearer 前缀）。
响应拦截器：非 2xx 抛出 ApiError；401 时先同步清除登录态并触发会话过期回调，再抛错。
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any, Literal
from urllib.parse import urlsplit

import httpx

from lesson_client.core.auth import AuthTokenAccessor
from lesson_client.core.errors import HTTP_UNAUTHORIZED, ApiError
from lesson_client.observability.logging import get_logger

logger = get_logger(__name__)

AUTHORIZATION_HEADER = "Authorization"

Credentials = Literal["include", "same-origin", "omit"]
SessionExpiredCallback = Callable[[str], None | Awaitable[None]]

# 异步回调以后台任务运行，持有引用直到完成
_callback_tasks: set[asyncio.Future[Any]] = set()


@dataclass
class RequestConfig:
    """单次调用的请求配置，在请求拦截器与传输调用之间传递。"""

    method: str = "GET"
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None
    credentials: Credentials = "include"


def is_whitelisted(url: str, whitelist: Iterable[str]) -> bool:
    """URL 路径（忽略 query）以白名单中任一后缀结尾即视为免鉴权。"""
    path = urlsplit(url).path.rstrip("/")
    return any(suffix and path.endswith(suffix) for suffix in whitelist)


def request_interceptor(
    url: str,
    config: RequestConfig,
    token_accessor: AuthTokenAccessor,
    whitelist: Iterable[str],
) -> RequestConfig:
    """
    为非白名单请求附加 Authorization 头。
    不修改入参；无 token 时原样返回（交给服务端 401 处理）；内部任何异常都退化为返回原配置。
    """
    try:
        if is_whitelisted(url, whitelist):
            return config
        token = token_accessor.get_token()
        if not token:
            return config
        return replace(config, headers={**config.headers, AUTHORIZATION_HEADER: token})
    except Exception as exc:  # noqa: BLE001
        logger.warning("request_interceptor_failed", url=url, error=str(exc))
        return config


def _parse_error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {"message": response.reason_phrase or "HTTP Error"}
    if isinstance(body, dict):
        return body
    return {"message": response.reason_phrase or "HTTP Error", "body": body}


def _on_callback_done(task: asyncio.Future[Any]) -> None:
    _callback_tasks.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        logger.error("session_expired_callback_failed", error=repr(exc))


def _schedule_callback(result: Awaitable[Any], login_route: str) -> None:
    """异步回调不等待其完成：挂到当前事件循环上运行，异常记日志。"""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        if inspect.iscoroutine(result):
            result.close()
        logger.warning("session_expired_callback_skipped", login_route=login_route, reason="no running event loop")
        return
    task = asyncio.ensure_future(result, loop=loop)
    _callback_tasks.add(task)
    task.add_done_callback(_on_callback_done)


def handle_session_expired(
    token_accessor: AuthTokenAccessor,
    on_session_expired: SessionExpiredCallback | None,
    login_route: str,
) -> None:
    """清除 token 与用户缓存，并通知调用方跳转登录。

    回调可以是普通函数或 async 函数；async 回调在后台运行，不阻塞本次抛错。回调失败只记日志。
    """
    token_accessor.clear_auth_tokens()
    logger.warning("session_expired", login_route=login_route)
    if on_session_expired is None:
        return
    try:
        result = on_session_expired(login_route)
        if inspect.isawaitable(result):
            _schedule_callback(result, login_route)
    except Exception:  # noqa: BLE001
        logger.exception("session_expired_callback_failed", login_route=login_route)


def response_interceptor(
    response: httpx.Response,
    token_accessor: AuthTokenAccessor,
    on_session_expired: SessionExpiredCallback | None = None,
    login_route: str = "/login",
) -> httpx.Response:
    """2xx 原样返回；否则构造 ApiError(code=HTTP 状态码) 抛出。"""
    if response.is_success:
        return response

    status = response.status_code
    error_body = _parse_error_body(response)
    if status == HTTP_UNAUTHORIZED:
        handle_session_expired(token_accessor, on_session_expired, login_route)

    message = error_body.get("message") or f"请求失败: {status}"
    raise ApiError(str(message), status, error_body)
