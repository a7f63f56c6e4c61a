"""登录态访问：token、缓存的用户信息与当前校区选择。"""

import json
from typing import Any

from lesson_client.core.storage import Storage
from lesson_client.observability.logging import get_logger

logger = get_logger(__name__)

TOKEN_KEY = "token"
USER_KEY = "user"
CAMPUS_ID_KEY = "currentCampusId"
CAMPUS_NAME_KEY = "currentCampusName"


class AuthTokenAccessor:
    """
    token 的唯一读写入口。
    请求拦截器只读；响应拦截器在 401 时调用 clear_auth_tokens 清除。
    """

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def get_token(self) -> str | None:
        """读取 token；不存在或存储不可读时返回 None，从不抛异常。"""
        try:
            token = self.storage.get_item(TOKEN_KEY)
        except Exception as exc:  # noqa: BLE001
            logger.warning("auth_token_read_failed", error=str(exc))
            return None
        return token or None

    def set_token(self, token: str) -> None:
        self.storage.set_item(TOKEN_KEY, token)

    def get_cached_user(self) -> dict[str, Any] | None:
        try:
            raw = self.storage.get_item(USER_KEY)
            if not raw:
                return None
            user = json.loads(raw)
        except Exception as exc:  # noqa: BLE001
            logger.warning("cached_user_read_failed", error=str(exc))
            return None
        return user if isinstance(user, dict) else None

    def set_cached_user(self, user: dict[str, Any]) -> None:
        self.storage.set_item(USER_KEY, json.dumps(user, ensure_ascii=False, default=str))

    def clear_auth_tokens(self) -> None:
        """清除 token 与缓存的用户信息，可重复调用；存储不可写时只记日志，从不抛异常。"""
        for key in (TOKEN_KEY, USER_KEY):
            try:
                self.storage.remove_item(key)
            except Exception as exc:  # noqa: BLE001
                logger.warning("auth_token_clear_failed", key=key, error=str(exc))

    @property
    def is_logged_in(self) -> bool:
        return self.get_token() is not None


class CampusContext:
    """当前选中的校区，供按校区查询的资源模块在未显式传参时使用。"""

    def __init__(self, storage: Storage) -> None:
        self.storage = storage

    def get_current_campus_id(self) -> int | None:
        try:
            raw = self.storage.get_item(CAMPUS_ID_KEY)
            return int(raw) if raw else None
        except (TypeError, ValueError):
            return None

    def get_current_campus_name(self) -> str | None:
        return self.storage.get_item(CAMPUS_NAME_KEY) or None

    def set_current_campus(self, campus_id: int, name: str | None = None) -> None:
        self.storage.set_item(CAMPUS_ID_KEY, str(campus_id))
        if name is not None:
            self.storage.set_item(CAMPUS_NAME_KEY, name)
        else:
            self.storage.remove_item(CAMPUS_NAME_KEY)

    def clear(self) -> None:
        self.storage.remove_item(CAMPUS_ID_KEY)
        self.storage.remove_item(CAMPUS_NAME_KEY)
