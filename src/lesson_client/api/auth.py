"""认证接口：登录、登出、注册与 token 刷新。

登录 / 刷新成功后 token 写入持久化存储，之后的请求由请求拦截器自动携带。
"""

from typing import Any

from lesson_client.api.base import BaseResource
from lesson_client.core.auth import AuthTokenAccessor
from lesson_client.core.errors import ApiError
from lesson_client.core.http import ApiClient
from lesson_client.observability.logging import get_logger
from lesson_client.schemas.auth import LoginParams, LoginResult, RegisterParams, RegisterResult

logger = get_logger(__name__)

AUTH_API_PATHS = {
    "login": "/lesson/api/auth/login",
    "logout": "/lesson/api/auth/logout",
    "register": "/lesson/api/auth/register",
    "refresh": "/lesson/api/auth/refresh",
}


class AuthApi(BaseResource):
    def __init__(self, client: ApiClient, token_accessor: AuthTokenAccessor) -> None:
        super().__init__(client)
        self._token_accessor = token_accessor

    async def login(self, params: LoginParams | dict[str, Any]) -> LoginResult:
        """登录并保存 token 与用户身份。"""
        params = LoginParams.model_validate(params)
        envelope = await self._client.request(
            AUTH_API_PATHS["login"], method="POST", body=params.to_payload()
        )
        result = LoginResult.model_validate(envelope.data)
        self._token_accessor.set_token(result.token)
        self._token_accessor.set_cached_user(result.identity())
        logger.info("login_success", phone=params.phone, user_id=result.user_id)
        return result

    async def logout(self) -> None:
        """通知后端登出；无论后端是否成功，本地登录态都会被清除。"""
        try:
            await self._client.request(AUTH_API_PATHS["logout"], method="POST")
        except ApiError as exc:
            logger.warning("logout_request_failed", code=exc.code, error=exc.message)
            raise
        finally:
            self._token_accessor.clear_auth_tokens()

    async def register(self, params: RegisterParams | dict[str, Any]) -> RegisterResult:
        """注册机构账号。必填项、手机号与密码长度在发请求前校验。"""
        params = RegisterParams.model_validate(params)
        envelope = await self._client.request(
            AUTH_API_PATHS["register"], method="POST", body=params.to_payload()
        )
        return RegisterResult.model_validate(envelope.data)

    async def refresh(self) -> str:
        """刷新 token 并写回存储，返回新 token。"""
        envelope = await self._client.request(AUTH_API_PATHS["refresh"], method="POST")
        data = envelope.data
        token = data.get("token") if isinstance(data, dict) else data
        if not token:
            raise ApiError("刷新 token 失败", envelope.code, data)
        self._token_accessor.set_token(str(token))
        return str(token)
