"""机构管理接口（REST 风格路径）。"""

from typing import Any

from lesson_client.api.base import BaseResource, build_query
from lesson_client.schemas.common import PaginatedResult, PaginationParams
from lesson_client.schemas.user import Institution, InstitutionSaveParams

INSTITUTION_API_PATH = "/lesson/api/institutions"


class InstitutionApi(BaseResource):
    async def get_list(
        self, params: PaginationParams | dict[str, Any] | None = None
    ) -> PaginatedResult[Institution]:
        params = PaginationParams.model_validate(params or {})
        envelope = await self._client.request(
            f"{INSTITUTION_API_PATH}{build_query(params.to_payload())}"
        )
        return PaginatedResult[Institution].model_validate(envelope.data or {})

    async def get_detail(self, institution_id: int | str) -> Institution:
        envelope = await self._client.request(f"{INSTITUTION_API_PATH}/{institution_id}")
        return Institution.model_validate(envelope.data)

    async def create(self, params: InstitutionSaveParams | dict[str, Any]) -> Institution:
        params = InstitutionSaveParams.model_validate(params)
        envelope = await self._client.request(
            INSTITUTION_API_PATH, method="POST", body=params.to_payload()
        )
        return Institution.model_validate(envelope.data)

    async def update(
        self, institution_id: int | str, params: InstitutionSaveParams | dict[str, Any]
    ) -> Institution:
        params = InstitutionSaveParams.model_validate(params)
        envelope = await self._client.request(
            f"{INSTITUTION_API_PATH}/{institution_id}", method="PUT", body=params.to_payload()
        )
        return Institution.model_validate(envelope.data)

    async def delete(self, institution_id: int | str) -> None:
        await self._client.request(f"{INSTITUTION_API_PATH}/{institution_id}", method="DELETE")
