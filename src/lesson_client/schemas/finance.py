"""缴费记录、财务收支与打卡消课的数据模型。"""

from typing import Literal

from pydantic import Field

from lesson_client.schemas.common import CamelModel, ResponseModel

TransactionType = Literal["INCOME", "EXPEND"]


class PaymentFilter(CamelModel):
    """缴费统计与列表共用的筛选条件；campus_id 缺省时取当前校区。"""

    campus_id: int | None = None
    student_id: int | None = None
    keyword: str | None = None
    course_id: int | None = None
    course_ids: list[int] | None = None
    lesson_type: str | None = None
    payment_type: str | None = None
    payment_types: list[str] | None = None
    pay_type: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class PaymentListParams(PaymentFilter):
    page_num: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)
    sort_field: str | None = None
    sort_order: Literal["asc", "desc"] | None = None


class PaymentStatistics(ResponseModel):
    payment_count: int = 0
    payment_total: float = 0
    refund_count: int = 0
    refund_total: float = 0


class PaymentRecordItem(ResponseModel):
    id: int
    date: str | None = None
    student: str | None = None
    student_id: str | int | None = None
    course: str | None = None
    amount: str | float | None = None
    hours: float | None = None
    lesson_type: str | None = None
    lesson_change: str | None = None
    payment_type: str | None = None
    pay_type: str | None = None
    gifted_hours: float | None = None


class PaymentRecordUpdate(CamelModel):
    id: int
    payment_type: str
    amount: float
    course_hours: float
    validity_period_id: int
    payment_method: str
    transaction_date: str
    gifted_hours: float = 0
    gift_ids: list[int] = Field(default_factory=list)
    remarks: str = ""


class FinanceRecordCreate(CamelModel):
    type: TransactionType
    date: str
    item: str
    amount: float
    category: str
    notes: str | None = None
    campus_id: int | None = None


class FinanceListParams(CamelModel):
    campus_id: int | None = None
    transaction_type: TransactionType | None = None
    keyword: str | None = None
    category: str | None = None
    start_date: str | None = None
    end_date: str | None = None
    page_num: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)


class FinanceRecord(ResponseModel):
    id: int | str
    type: str
    date: str | None = None
    item: str | None = None
    amount: float | None = None
    category: str | None = None
    notes: str | None = None
    operator: str | None = None
    campus_id: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class AttendanceFilter(CamelModel):
    campus_id: int | None = None
    student_id: int | None = None
    keyword: str | None = None
    course_id: int | None = None
    status: str | None = None
    start_date: str | None = None
    end_date: str | None = None


class AttendanceListParams(AttendanceFilter):
    page_num: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)


class AttendanceStatistics(ResponseModel):
    """出勤统计，字段随后端版本变化，保留全部返回字段。"""

    total_count: int | None = None
    checkin_count: int | None = None
    leave_count: int | None = None
    absent_count: int | None = None
    consumed_hours: float | None = None


class AttendanceRecordItem(ResponseModel):
    date: str | None = None
    student_name: str | None = None
    course_name: str | None = None
    coach_name: str | None = None
    class_time: str | None = None
    check_time: str | None = None
    status: str | None = None
