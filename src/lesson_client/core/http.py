"""统一请求函数：所有资源模块都经由 ApiClient.request 访问后端。

一次调用的流程：
1. 合并默认请求头（调用方同名头优先），默认携带 cookie；
2. 请求拦截器注入 Authorization；
3. 在超时作用域内发起请求，作用域退出即撤销计时，不会残留；
4. 响应拦截器处理非 2xx（含 401 登出）；
5. 解析 JSON 信封并校验业务码（0 / 200 为成功）；
6. 返回完整信封，由资源模块自行取 data。

任何失败都以 ApiError 抛出，本层不重试。
"""

import asyncio
import time
from typing import Any

import httpx

from lesson_client.core.auth import AuthTokenAccessor
from lesson_client.core.config import Settings, get_settings
from lesson_client.core.errors import NETWORK_ERROR_CODE, TIMEOUT_ERROR_CODE, ApiError
from lesson_client.core.interceptors import (
    Credentials,
    RequestConfig,
    SessionExpiredCallback,
    request_interceptor,
    response_interceptor,
)
from lesson_client.observability.http_trace import body_preview, mask_headers
from lesson_client.observability.logging import api_call_context, get_logger
from lesson_client.observability.metrics import (
    api_errors_total,
    api_request_seconds,
    api_requests_total,
)
from lesson_client.schemas.common import ApiResponse, is_success_code

logger = get_logger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}


def merge_headers(headers: dict[str, str] | None = None) -> dict[str, str]:
    """默认头与调用方头合并，键名不区分大小写，调用方优先。"""
    merged = dict(DEFAULT_HEADERS)
    for key, value in (headers or {}).items():
        for existing in [k for k in merged if k.lower() == key.lower()]:
            del merged[existing]
        merged[key] = value
    return merged


class ApiClient:
    """持有 httpx.AsyncClient 与登录态访问器的统一请求入口。"""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        token_accessor: AuthTokenAccessor,
        on_session_expired: SessionExpiredCallback | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            settings: 客户端配置，不传则用 get_settings()
            token_accessor: token 读写入口，请求拦截器读取、401 时清除
            on_session_expired: 401 时的回调，参数为登录路由，用于跳转登录页 / 提示会话过期
            transport: 自定义 httpx 传输层，测试时传入 MockTransport / ASGITransport
            http_client: 直接复用外部 AsyncClient，此时由外部负责关闭
        """
        self.settings = settings or get_settings()
        self.token_accessor = token_accessor
        self.on_session_expired = on_session_expired
        self.whitelist = self.settings.get_auth_whitelist()
        self._owns_client = http_client is None
        # 超时由 request() 内的 asyncio.timeout 统一控制，httpx 自身不再设超时
        self._client = http_client or httpx.AsyncClient(
            base_url=self.settings.api_host,
            transport=transport,
            timeout=None,
        )

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._client

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _build_request(self, url: str, config: RequestConfig) -> httpx.Request:
        kwargs: dict[str, Any] = {"headers": config.headers}
        if config.body is not None:
            if isinstance(config.body, (str, bytes)):
                kwargs["content"] = config.body
            else:
                kwargs["json"] = config.body
        request = self._client.build_request(config.method, url, **kwargs)
        if config.credentials == "omit":
            request.headers.pop("cookie", None)
        elif config.credentials == "same-origin" and request.url.host != self._client.base_url.host:
            request.headers.pop("cookie", None)
        return request

    @staticmethod
    def _parse_envelope(response: httpx.Response) -> ApiResponse[Any]:
        payload = response.json()
        if not isinstance(payload, dict):
            raise ApiError("响应格式错误", NETWORK_ERROR_CODE, payload)
        code = payload.get("code")
        if not is_success_code(code):
            message = payload.get("message") or "业务处理失败"
            # 信封缺少合法 code 时无法归入业务错误，按未知错误处理
            error_code = code if isinstance(code, int) and not isinstance(code, bool) else NETWORK_ERROR_CODE
            raise ApiError(str(message), error_code, payload.get("data"))
        return ApiResponse[Any].model_validate(payload)

    async def request(
        self,
        url: str,
        *,
        method: str = "GET",
        headers: dict[str, str] | None = None,
        body: Any = None,
        credentials: Credentials = "include",
        timeout_ms: int | None = None,
    ) -> ApiResponse[Any]:
        """发起一次请求并返回完整信封；失败统一抛出 ApiError。"""
        timeout_ms = timeout_ms or self.settings.request_timeout_ms
        method = method.upper()
        config = RequestConfig(
            method=method,
            headers=merge_headers(headers),
            body=body,
            credentials=credentials,
        )
        config = request_interceptor(url, config, self.token_accessor, self.whitelist)

        outcome = "success"
        start = time.perf_counter()
        with api_call_context(method, url):
            logger.info(
                "api_request_start",
                url=url,
                headers=mask_headers(config.headers),
                body_preview=body_preview(config.body),
            )
            try:
                async with asyncio.timeout(timeout_ms / 1000):
                    response = await self._client.send(self._build_request(url, config))

                try:
                    response_interceptor(
                        response,
                        self.token_accessor,
                        self.on_session_expired,
                        self.settings.login_route,
                    )
                except ApiError as exc:
                    outcome = "http"
                    logger.warning(
                        "api_http_error",
                        url=url,
                        status_code=exc.code,
                        error=exc.message,
                    )
                    raise

                envelope = self._parse_envelope(response)
            except ApiError as exc:
                if outcome == "success":
                    outcome = "business" if exc.code != NETWORK_ERROR_CODE else "network"
                    logger.warning(
                        "api_business_error",
                        url=url,
                        code=exc.code,
                        error=exc.message,
                    )
                raise
            except asyncio.CancelledError:
                outcome = "cancelled"
                logger.info("api_request_cancelled")
                raise
            except (TimeoutError, httpx.TimeoutException) as exc:
                outcome = "timeout"
                logger.error("api_request_timeout", url=url, timeout_ms=timeout_ms)
                raise ApiError(
                    f"请求超时（{timeout_ms}ms），请稍后再试", TIMEOUT_ERROR_CODE
                ) from exc
            except Exception as exc:
                outcome = "network"
                logger.error("api_network_error", url=url, error=str(exc))
                raise ApiError(str(exc) or "网络请求失败", NETWORK_ERROR_CODE) from exc
            finally:
                duration = time.perf_counter() - start
                api_requests_total.labels(method=method, outcome=outcome).inc()
                api_request_seconds.labels(method=method).observe(duration)
                if outcome not in ("success", "cancelled"):
                    api_errors_total.labels(error_type=outcome).inc()

            logger.info(
                "api_request_finish",
                url=url,
                status_code=response.status_code,
                code=envelope.code,
                duration_ms=round(duration * 1000, 2),
                response_preview=body_preview(response.content),
            )
        return envelope
