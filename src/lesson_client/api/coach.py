"""教练管理接口。"""

from typing import Any

from lesson_client.api.base import BaseResource, build_query
from lesson_client.schemas.coach import (
    Coach,
    CoachQueryParams,
    CoachSaveParams,
    CoachSimple,
    CoachStatus,
)
from lesson_client.schemas.common import PaginatedResult

COACH_API_PATHS = {
    "list": "/lesson/api/coach/list",
    "detail": "/lesson/api/coach/detail",
    "create": "/lesson/api/coach/create",
    "update": "/lesson/api/coach/update",
    "delete": "/lesson/api/coach/delete",
    "update_status": "/lesson/api/coach/updateStatus",
    "simple_list": "/lesson/api/coach/simple/list",
}


def coach_list_query(params: CoachQueryParams) -> str:
    """多选校区优先，单个 campusId 也以 campusIds 传；有排序字段时默认升序。"""
    campus_ids = params.campus_ids or ([params.campus_id] if params.campus_id else [])
    sort_order = (params.sort_order or "asc") if params.sort_field else None
    return build_query(
        {
            "pageNum": params.page_num,
            "pageSize": params.page_size,
            "name": params.name,
            "phone": params.phone,
            "keyword": params.keyword,
            "status": params.status,
            "jobTitle": params.job_title,
            "campusIds": campus_ids,
            "sortField": params.sort_field,
            "sortOrder": sort_order,
        }
    )


class CoachApi(BaseResource):
    async def get_list(
        self, params: CoachQueryParams | dict[str, Any] | None = None
    ) -> PaginatedResult[Coach]:
        params = CoachQueryParams.model_validate(params or {})
        envelope = await self._client.request(f"{COACH_API_PATHS['list']}{coach_list_query(params)}")
        return PaginatedResult[Coach].model_validate(envelope.data or {})

    async def get_detail(self, coach_id: int | str) -> Coach:
        envelope = await self._client.request(
            f"{COACH_API_PATHS['detail']}{build_query({'id': coach_id})}"
        )
        return Coach.model_validate(envelope.data)

    async def create(self, params: CoachSaveParams | dict[str, Any]) -> Any:
        params = CoachSaveParams.model_validate(params)
        envelope = await self._client.request(
            COACH_API_PATHS["create"], method="POST", body=params.to_payload()
        )
        return envelope.data

    async def update(self, params: CoachSaveParams | dict[str, Any]) -> None:
        params = CoachSaveParams.model_validate(params)
        if params.id is None:
            raise ValueError("缺少教练 ID")
        await self._client.request(COACH_API_PATHS["update"], method="POST", body=params.to_payload())

    async def delete(self, coach_id: int | str) -> None:
        await self._client.request(
            f"{COACH_API_PATHS['delete']}{build_query({'id': coach_id})}", method="POST"
        )

    async def update_status(self, coach_id: int | str, status: CoachStatus) -> None:
        await self._client.request(
            COACH_API_PATHS["update_status"],
            method="POST",
            body={"id": coach_id, "status": status},
        )

    async def get_simple_list(self, campus_id: int | None = None) -> list[CoachSimple]:
        query = build_query({"campusId": self._resolve_campus_id(campus_id)})
        envelope = await self._client.request(f"{COACH_API_PATHS['simple_list']}{query}")
        return [CoachSimple.model_validate(item) for item in envelope.data or []]
