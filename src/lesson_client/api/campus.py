"""校区管理接口。"""

from typing import Any

from lesson_client.api.base import BaseResource, build_query
from lesson_client.schemas.campus import (
    Campus,
    CampusCreateParams,
    CampusQueryParams,
    CampusSimple,
    CampusUpdateParams,
)
from lesson_client.schemas.common import PaginatedResult

CAMPUS_API_PATHS = {
    "list": "/lesson/api/campus/list",
    "detail": "/lesson/api/campus/detail",
    "create": "/lesson/api/campus/create",
    "update": "/lesson/api/campus/update",
    "delete": "/lesson/api/campus/delete",
    "update_status": "/lesson/api/campus/updateStatus",
    "simple_list": "/lesson/api/campus/simple/list",
}


class CampusApi(BaseResource):
    async def get_list(
        self, params: CampusQueryParams | dict[str, Any] | None = None
    ) -> PaginatedResult[Campus]:
        params = CampusQueryParams.model_validate(params or {})
        query = build_query(params.to_payload())
        envelope = await self._client.request(f"{CAMPUS_API_PATHS['list']}{query}")
        return PaginatedResult[Campus].model_validate(envelope.data or {})

    async def get_detail(self, campus_id: int | str) -> Campus:
        envelope = await self._client.request(
            f"{CAMPUS_API_PATHS['detail']}{build_query({'id': campus_id})}"
        )
        return Campus.model_validate(envelope.data)

    async def create(self, params: CampusCreateParams | dict[str, Any]) -> Any:
        """新增校区，返回后端生成的校区 ID。"""
        params = CampusCreateParams.model_validate(params)
        envelope = await self._client.request(
            CAMPUS_API_PATHS["create"], method="POST", body=params.to_payload()
        )
        return envelope.data

    async def update(self, campus_id: int | str, params: CampusUpdateParams | dict[str, Any]) -> None:
        params = CampusUpdateParams.model_validate(params)
        await self._client.request(
            CAMPUS_API_PATHS["update"],
            method="POST",
            body={"id": campus_id, **params.to_payload()},
        )

    async def delete(self, campus_id: int | str) -> None:
        await self._client.request(
            f"{CAMPUS_API_PATHS['delete']}{build_query({'id': campus_id})}", method="POST"
        )

    async def update_status(self, campus_id: int | str, status: int | str) -> None:
        query = build_query({"id": campus_id, "status": status})
        await self._client.request(f"{CAMPUS_API_PATHS['update_status']}{query}", method="POST")

    async def get_simple_list(self) -> list[CampusSimple]:
        envelope = await self._client.request(CAMPUS_API_PATHS["simple_list"])
        return [CampusSimple.model_validate(item) for item in envelope.data or []]
