"""学员管理接口。

返回的学员数据统一经 Student 模型折叠新旧字段名；
创建 / 更新失败时以带前缀的提示重新抛出，业务码保持不变。
"""

from typing import Any

from pydantic import ValidationError

from lesson_client.api.base import BaseResource, build_query
from lesson_client.core.errors import ApiError
from lesson_client.observability.logging import get_logger
from lesson_client.schemas.common import PaginatedResult
from lesson_client.schemas.student import (
    ClassRecord,
    Student,
    StudentAttendanceQuery,
    StudentAttendanceRecord,
    StudentCreateParams,
    StudentPaymentParams,
    StudentPaymentRecord,
    StudentQueryParams,
    StudentUpdateParams,
)

logger = get_logger(__name__)

STUDENT_API_PATHS = {
    "list": "/lesson/api/student/list",
    "create": "/lesson/api/student/create",
    "update": "/lesson/api/student/update",
    "payment": "/lesson/api/student/payment",
    "attendance_list": "/lesson/api/student/attendance-list",
}


def _detail_path(student_id: int | str) -> str:
    return f"/lesson/api/student/{student_id}"


def _delete_path(student_id: int | str) -> str:
    return f"/lesson/api/student/delete/{student_id}"


def _records_path(student_id: int | str, kind: str) -> str:
    return f"/lesson/api/student/{student_id}/{kind}"


class StudentApi(BaseResource):
    async def get_list(
        self, params: StudentQueryParams | dict[str, Any] | None = None
    ) -> PaginatedResult[Student]:
        params = StudentQueryParams.model_validate(params or {})
        query_params = params.to_payload()
        query_params["campusId"] = self._resolve_campus_id(params.campus_id)
        envelope = await self._client.request(
            f"{STUDENT_API_PATHS['list']}{build_query(query_params)}"
        )
        return PaginatedResult[Student].model_validate(envelope.data or {})

    async def get_detail(self, student_id: int | str) -> Student:
        envelope = await self._client.request(_detail_path(student_id))
        return Student.model_validate(envelope.data)

    async def create_with_course(self, params: StudentCreateParams | dict[str, Any]) -> Any:
        """创建学员并同时报名课程，返回后端生成的学员 ID。"""
        try:
            params = StudentCreateParams.model_validate(params)
        except ValidationError as exc:
            raise ValueError("创建学员失败：请求参数不完整") from exc

        payload = params.to_payload()
        campus_id = self._resolve_campus_id(params.student_info.campus_id)
        if campus_id:
            payload["studentInfo"]["campusId"] = campus_id
        try:
            envelope = await self._client.request(
                STUDENT_API_PATHS["create"], method="POST", body=payload
            )
        except ApiError as exc:
            logger.warning("student_create_failed", code=exc.code, error=exc.message)
            raise ApiError(f"创建学员失败: {exc.message or '未知错误'}", exc.code, exc.data) from exc
        return envelope.data

    async def update_with_course(self, params: StudentUpdateParams | dict[str, Any]) -> None:
        """学员信息与课程信息一起更新。学员 ID / 课程 ID 必须为正整数。"""
        if not params:
            raise ValueError("更新学员失败：请求参数为空")
        params = StudentUpdateParams.model_validate(params)
        try:
            await self._client.request(
                STUDENT_API_PATHS["update"], method="POST", body=params.to_payload()
            )
        except ApiError as exc:
            logger.warning(
                "student_update_failed",
                student_id=params.student_id,
                code=exc.code,
                error=exc.message,
            )
            raise ApiError(f"更新学员失败: {exc.message or '未知错误'}", exc.code, exc.data) from exc

    async def delete(self, student_id: int | str) -> None:
        await self._client.request(_delete_path(student_id), method="DELETE")

    async def get_class_records(self, student_id: int | str) -> list[ClassRecord]:
        envelope = await self._client.request(_records_path(student_id, "class-records"))
        return [ClassRecord.model_validate(item) for item in envelope.data or []]

    async def get_payment_records(self, student_id: int | str) -> list[StudentPaymentRecord]:
        envelope = await self._client.request(_records_path(student_id, "payment-records"))
        return [StudentPaymentRecord.model_validate(item) for item in envelope.data or []]

    async def add_payment(self, params: StudentPaymentParams | dict[str, Any]) -> Any:
        params = StudentPaymentParams.model_validate(params)
        envelope = await self._client.request(
            STUDENT_API_PATHS["payment"], method="POST", body=params.to_payload()
        )
        return envelope.data

    async def get_attendance_list(
        self, params: StudentAttendanceQuery | dict[str, Any] | None = None
    ) -> PaginatedResult[StudentAttendanceRecord]:
        """学员打卡记录；未指定校区时使用当前校区，两者都没有则报错。"""
        params = StudentAttendanceQuery.model_validate(params or {})
        body = params.to_payload()
        body["campusId"] = self._require_campus_id(params.campus_id)
        envelope = await self._client.request(
            STUDENT_API_PATHS["attendance_list"], method="POST", body=body
        )
        return PaginatedResult[StudentAttendanceRecord].model_validate(envelope.data or {})
