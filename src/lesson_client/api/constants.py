"""系统常量接口：按类型读取下拉选项，以及常量的增删改。"""

from collections.abc import Sequence
from typing import Any

from lesson_client.api.base import BaseResource, build_query
from lesson_client.schemas.constants import Constant, ConstantSaveParams, ConstantUpdateParams

CONSTANTS_API_PATHS = {
    "list": "/lesson/api/constants/list",
    "save": "/lesson/api/constants/save",
    "update": "/lesson/api/constants/update",
    "delete": "/lesson/api/constants/delete",
}


class ConstantsApi(BaseResource):
    async def get_list_by_type(self, constant_type: str) -> list[Constant]:
        envelope = await self._client.request(
            f"{CONSTANTS_API_PATHS['list']}{build_query({'type': constant_type})}"
        )
        return [Constant.model_validate(item) for item in envelope.data or []]

    async def get_list_by_types(self, constant_types: Sequence[str]) -> list[Constant]:
        envelope = await self._client.request(
            f"{CONSTANTS_API_PATHS['list']}{build_query({'types': list(constant_types)})}"
        )
        return [Constant.model_validate(item) for item in envelope.data or []]

    async def save(self, params: ConstantSaveParams | dict[str, Any]) -> Constant | None:
        params = ConstantSaveParams.model_validate(params)
        envelope = await self._client.request(
            CONSTANTS_API_PATHS["save"], method="POST", body=params.to_payload()
        )
        return Constant.model_validate(envelope.data) if envelope.data else None

    async def update(self, params: ConstantUpdateParams | dict[str, Any]) -> bool:
        """type 字段不可修改，请求体中不携带。"""
        if isinstance(params, dict):
            params = {k: v for k, v in params.items() if k != "type"}
        params = ConstantUpdateParams.model_validate(params)
        await self._client.request(
            CONSTANTS_API_PATHS["update"], method="POST", body=params.to_payload()
        )
        return True

    async def delete(self, constant_id: int) -> bool:
        await self._client.request(
            f"{CONSTANTS_API_PATHS['delete']}{build_query({'id': constant_id})}", method="POST"
        )
        return True
