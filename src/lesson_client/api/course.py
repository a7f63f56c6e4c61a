"""课程管理接口。

课程列表带短时缓存：相同查询串在有效期内直接返回缓存结果，不发请求；
任何写操作都会清空缓存。
"""

from typing import Any

from lesson_client.api.base import BaseResource, build_query
from lesson_client.core.auth import CampusContext
from lesson_client.core.cache import TTLCache
from lesson_client.core.http import ApiClient
from lesson_client.observability.logging import get_logger
from lesson_client.schemas.common import PaginatedResult
from lesson_client.schemas.course import (
    Course,
    CourseCreateParams,
    CourseQueryParams,
    CourseUpdateParams,
    SimpleCourse,
)

logger = get_logger(__name__)

COURSE_API_PATHS = {
    "list": "/lesson/api/course/list",
    "detail": "/lesson/api/course/detail",
    "create": "/lesson/api/course/create",
    "update": "/lesson/api/course/update",
    "delete": "/lesson/api/course/delete",
    "update_status": "/lesson/api/course/updateStatus",
    "simple_list": "/lesson/api/course/simple/list",
}


class CourseApi(BaseResource):
    def __init__(
        self,
        client: ApiClient,
        campus_context: CampusContext | None = None,
        cache: TTLCache[PaginatedResult[Course]] | None = None,
    ) -> None:
        super().__init__(client, campus_context)
        self._cache = cache if cache is not None else TTLCache(client.settings.course_cache_ttl_ms)

    @property
    def cache(self) -> TTLCache[PaginatedResult[Course]]:
        return self._cache

    def clear_cache(self) -> None:
        self._cache.clear()

    async def get_list(
        self, params: CourseQueryParams | dict[str, Any] | None = None
    ) -> PaginatedResult[Course]:
        params = CourseQueryParams.model_validate(params or {})
        query = build_query(params.to_payload())
        cached = self._cache.get(query)
        if cached is not None:
            logger.debug("course_list_cache_hit", query=query)
            return cached

        generation = self._cache.generation
        envelope = await self._client.request(f"{COURSE_API_PATHS['list']}{query}")
        result = PaginatedResult[Course].model_validate(envelope.data or {})
        if not self._cache.set(query, result, generation) and self._cache.enabled:
            logger.debug("course_list_stale_result_dropped", query=query)
        return result

    async def get_detail(self, course_id: int | str) -> Course:
        envelope = await self._client.request(
            f"{COURSE_API_PATHS['detail']}{build_query({'id': course_id})}"
        )
        return Course.model_validate(envelope.data)

    async def create(self, params: CourseCreateParams | dict[str, Any]) -> Any:
        params = CourseCreateParams.model_validate(params)
        payload = params.to_payload()
        campus_id = self._resolve_campus_id(params.campus_id)
        if campus_id:
            payload["campusId"] = campus_id
        envelope = await self._client.request(COURSE_API_PATHS["create"], method="POST", body=payload)
        self.clear_cache()
        return envelope.data

    async def update(self, course_id: int | str, params: CourseUpdateParams | dict[str, Any]) -> None:
        params = CourseUpdateParams.model_validate(params)
        await self._client.request(
            COURSE_API_PATHS["update"],
            method="POST",
            body={"id": course_id, **params.to_payload()},
        )
        self.clear_cache()

    async def delete(self, course_id: int | str) -> None:
        await self._client.request(
            f"{COURSE_API_PATHS['delete']}{build_query({'id': course_id})}", method="POST"
        )
        self.clear_cache()

    async def update_status(self, course_id: int | str, status: str) -> None:
        query = build_query({"id": course_id, "status": status})
        await self._client.request(f"{COURSE_API_PATHS['update_status']}{query}", method="POST")
        self.clear_cache()

    async def get_simple_list(self, campus_id: int | None = None) -> list[SimpleCourse]:
        query = build_query({"campusId": self._resolve_campus_id(campus_id)})
        envelope = await self._client.request(f"{COURSE_API_PATHS['simple_list']}{query}")
        return [SimpleCourse.model_validate(item) for item in envelope.data or []]
