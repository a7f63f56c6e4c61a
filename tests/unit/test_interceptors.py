"""请求 / 响应拦截器单元测试。"""

from unittest.mock import MagicMock

import httpx
import pytest

from lesson_client.core.auth import USER_KEY
from lesson_client.core.errors import ApiError
from lesson_client.core.interceptors import (
    RequestConfig,
    is_whitelisted,
    request_interceptor,
    response_interceptor,
)

WHITELIST = ("/auth/login", "/auth/register")


class TestWhitelist:
    @pytest.mark.parametrize(
        "url",
        [
            "/lesson/api/auth/login",
            "/lesson/api/auth/register",
            "http://lesson.test/lesson/api/auth/login?from=app",
            "/lesson/api/auth/login/",
        ],
    )
    def test_whitelisted(self, url):
        assert is_whitelisted(url, WHITELIST)

    @pytest.mark.parametrize(
        "url",
        ["/lesson/api/auth/logout", "/lesson/api/campus/list", "/lesson/api/auth/login-history"],
    )
    def test_not_whitelisted(self, url):
        assert not is_whitelisted(url, WHITELIST)


class TestRequestInterceptor:
    def test_injects_raw_token(self, token_accessor):
        token_accessor.set_token("tok-123")
        config = RequestConfig(headers={"Content-Type": "application/json"})
        out = request_interceptor("/lesson/api/campus/list", config, token_accessor, WHITELIST)
        assert out.headers["Authorization"] == "tok-123"
        assert out.headers["Content-Type"] == "application/json"

    def test_does_not_mutate_input(self, token_accessor):
        token_accessor.set_token("tok-123")
        config = RequestConfig()
        request_interceptor("/lesson/api/campus/list", config, token_accessor, WHITELIST)
        assert "Authorization" not in config.headers

    def test_whitelist_skips_token(self, token_accessor):
        token_accessor.set_token("tok-123")
        config = RequestConfig()
        out = request_interceptor("/lesson/api/auth/login", config, token_accessor, WHITELIST)
        assert "Authorization" not in out.headers

    def test_no_token_passes_through(self, token_accessor):
        config = RequestConfig()
        out = request_interceptor("/lesson/api/campus/list", config, token_accessor, WHITELIST)
        assert out is config

    def test_failure_returns_original(self):
        broken = MagicMock()
        broken.get_token.side_effect = RuntimeError("boom")
        config = RequestConfig()
        out = request_interceptor("/lesson/api/campus/list", config, broken, WHITELIST)
        assert out is config


class TestResponseInterceptor:
    def test_success_passthrough(self, token_accessor):
        response = httpx.Response(200, json={"code": 200})
        assert response_interceptor(response, token_accessor) is response

    def test_http_error_uses_body_message(self, token_accessor):
        response = httpx.Response(500, json={"message": "服务器内部错误"})
        with pytest.raises(ApiError) as exc_info:
            response_interceptor(response, token_accessor)
        assert exc_info.value.code == 500
        assert exc_info.value.message == "服务器内部错误"

    def test_http_error_non_json_falls_back_to_reason(self, token_accessor):
        response = httpx.Response(502, text="<html>bad gateway</html>")
        with pytest.raises(ApiError) as exc_info:
            response_interceptor(response, token_accessor)
        assert exc_info.value.code == 502
        assert exc_info.value.message == "Bad Gateway"

    def test_http_error_without_message(self, token_accessor):
        response = httpx.Response(404, json={"detail": "x"})
        with pytest.raises(ApiError) as exc_info:
            response_interceptor(response, token_accessor)
        assert exc_info.value.message == "请求失败: 404"

    def test_401_clears_tokens_and_calls_back(self, storage, token_accessor):
        token_accessor.set_token("tok")
        token_accessor.set_cached_user({"userId": 1})
        callback = MagicMock()
        response = httpx.Response(401, json={"message": "登录已过期"})

        with pytest.raises(ApiError) as exc_info:
            response_interceptor(response, token_accessor, callback, "/login")

        assert exc_info.value.code == 401
        assert exc_info.value.is_unauthorized
        assert token_accessor.get_token() is None
        assert storage.get_item(USER_KEY) is None
        callback.assert_called_once_with("/login")

    def test_401_callback_failure_still_raises(self, token_accessor):
        token_accessor.set_token("tok")
        callback = MagicMock(side_effect=RuntimeError("router gone"))
        with pytest.raises(ApiError) as exc_info:
            response_interceptor(httpx.Response(401), token_accessor, callback)
        assert exc_info.value.code == 401
        assert token_accessor.get_token() is None

    def test_401_async_callback_without_loop_is_skipped(self, token_accessor):
        token_accessor.set_token("tok")
        calls = []

        async def on_expired(route: str) -> None:
            calls.append(route)

        with pytest.raises(ApiError) as exc_info:
            response_interceptor(httpx.Response(401), token_accessor, on_expired)
        assert exc_info.value.code == 401
        assert token_accessor.get_token() is None
        assert calls == []

    def test_403_does_not_clear(self, token_accessor):
        token_accessor.set_token("tok")
        with pytest.raises(ApiError):
            response_interceptor(httpx.Response(403, json={}), token_accessor)
        assert token_accessor.get_token() == "tok"
