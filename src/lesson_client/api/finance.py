"""缴费记录、财务收支与打卡消课接口。

这三类接口都按校区统计，campus_id 缺省时取当前校区。
"""

from typing import Any

from lesson_client.api.base import BaseResource, build_query
from lesson_client.schemas.common import PaginatedResult
from lesson_client.schemas.finance import (
    AttendanceFilter,
    AttendanceListParams,
    AttendanceRecordItem,
    AttendanceStatistics,
    FinanceListParams,
    FinanceRecord,
    FinanceRecordCreate,
    PaymentFilter,
    PaymentListParams,
    PaymentRecordItem,
    PaymentRecordUpdate,
    PaymentStatistics,
)

PAYMENT_API_PATHS = {
    "statistics": "/lesson/api/payment/record/stat",
    "list": "/lesson/api/payment/record/list",
    "update": "/lesson/api/payment/record/update",
}
FINANCE_API_PATHS = {
    "record": "/lesson/api/finance/record",
    "list": "/lesson/api/finance/list",
}
ATTENDANCE_API_PATHS = {
    "statistics": "/lesson/api/attendance/record/stat",
    "list": "/lesson/api/attendance/record/list",
}


class PaymentApi(BaseResource):
    def _query(self, params: PaymentFilter) -> str:
        query_params = params.to_payload()
        query_params["campusId"] = self._resolve_campus_id(params.campus_id)
        return build_query(query_params)

    async def get_statistics(
        self, params: PaymentFilter | dict[str, Any] | None = None
    ) -> PaymentStatistics:
        params = PaymentFilter.model_validate(params or {})
        envelope = await self._client.request(f"{PAYMENT_API_PATHS['statistics']}{self._query(params)}")
        return PaymentStatistics.model_validate(envelope.data or {})

    async def get_list(
        self, params: PaymentListParams | dict[str, Any] | None = None
    ) -> PaginatedResult[PaymentRecordItem]:
        params = PaymentListParams.model_validate(params or {})
        envelope = await self._client.request(f"{PAYMENT_API_PATHS['list']}{self._query(params)}")
        return PaginatedResult[PaymentRecordItem].model_validate(envelope.data or {})

    async def update_record(self, params: PaymentRecordUpdate | dict[str, Any]) -> None:
        params = PaymentRecordUpdate.model_validate(params)
        await self._client.request(PAYMENT_API_PATHS["update"], method="PUT", body=params.to_payload())


class FinanceApi(BaseResource):
    async def create_record(self, params: FinanceRecordCreate | dict[str, Any]) -> Any:
        params = FinanceRecordCreate.model_validate(params)
        body = params.to_payload()
        body["campusId"] = self._require_campus_id(params.campus_id)
        envelope = await self._client.request(FINANCE_API_PATHS["record"], method="POST", body=body)
        return envelope.data

    async def get_list(
        self, params: FinanceListParams | dict[str, Any] | None = None
    ) -> PaginatedResult[FinanceRecord]:
        params = FinanceListParams.model_validate(params or {})
        body = params.to_payload()
        body["campusId"] = self._require_campus_id(params.campus_id)
        envelope = await self._client.request(FINANCE_API_PATHS["list"], method="POST", body=body)
        return PaginatedResult[FinanceRecord].model_validate(envelope.data or {})


class AttendanceApi(BaseResource):
    def _body(self, params: AttendanceFilter) -> dict[str, Any]:
        body = params.to_payload()
        body["campusId"] = self._require_campus_id(params.campus_id)
        return body

    async def get_statistics(
        self, params: AttendanceFilter | dict[str, Any] | None = None
    ) -> AttendanceStatistics:
        params = AttendanceFilter.model_validate(params or {})
        envelope = await self._client.request(
            ATTENDANCE_API_PATHS["statistics"], method="POST", body=self._body(params)
        )
        return AttendanceStatistics.model_validate(envelope.data or {})

    async def get_list(
        self, params: AttendanceListParams | dict[str, Any] | None = None
    ) -> PaginatedResult[AttendanceRecordItem]:
        params = AttendanceListParams.model_validate(params or {})
        envelope = await self._client.request(
            ATTENDANCE_API_PATHS["list"], method="POST", body=self._body(params)
        )
        return PaginatedResult[AttendanceRecordItem].model_validate(envelope.data or {})
