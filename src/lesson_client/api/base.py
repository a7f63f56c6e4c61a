"""资源模块基类与查询串构造。"""

from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import urlencode

from lesson_client.core.auth import CampusContext
from lesson_client.core.http import ApiClient

QueryValue = str | int | float | bool | Iterable[str | int] | None


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, (list, tuple, set, frozenset)):
        return len(value) == 0
    return False


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: Mapping[str, QueryValue]) -> str:
    """构造查询串（含前导 ?）。空值 / 空列表不追加，列表按同名键重复追加。"""
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        if _is_empty(value):
            continue
        if isinstance(value, (list, tuple, set, frozenset)):
            pairs.extend((key, _format(v)) for v in value if not _is_empty(v))
        else:
            pairs.append((key, _format(value)))
    return f"?{urlencode(pairs)}" if pairs else ""


class BaseResource:
    """资源模块基类：持有统一请求入口与当前校区上下文。

    子类各自从返回的信封中取 data 并转换为规范模型。
    """

    def __init__(self, client: ApiClient, campus_context: CampusContext | None = None) -> None:
        self._client = client
        self._campus_context = campus_context

    def _resolve_campus_id(self, campus_id: int | None) -> int | None:
        """显式传入优先，否则取当前选中的校区。"""
        if campus_id:
            return campus_id
        if self._campus_context is None:
            return None
        return self._campus_context.get_current_campus_id()

    def _require_campus_id(self, campus_id: int | None) -> int:
        resolved = self._resolve_campus_id(campus_id)
        if not resolved:
            raise ValueError("缺少校区 ID")
        return resolved
