"""首页看板与统计分析的数据模型。"""

from typing import Literal

from pydantic import Field

from lesson_client.schemas.common import CamelModel, ResponseModel


class StudentAttendanceVO(ResponseModel):
    student_name: str
    time_slot: str | None = None
    status: str | None = Field(None, description="已完成 / 请假 / 未打卡")


class CourseDetailVO(ResponseModel):
    course_name: str
    coach_name: str | None = None
    hours: float | None = None
    remuneration: float | None = None
    sales_amount: float | None = None
    student_attendances: list[StudentAttendanceVO] = Field(default_factory=list)


class DashboardOverview(ResponseModel):
    """今日数据与周度汇总，字段较多，未列出的字段按 extra 保留。"""

    teacher_count: int | None = None
    class_count: int | None = None
    student_count: int | None = None
    checkin_count: int | None = None
    consumed_hours: float | None = None
    leave_count: int | None = None
    teacher_remuneration: float | None = None
    consumed_fees: float | None = None
    total_revenue: float | None = None
    total_profit: float | None = None
    total_students: int | None = None
    total_coaches: int | None = None
    current_week_attendance_rate: float | None = None


class TodayData(ResponseModel):
    overview: DashboardOverview
    course_details: list[CourseDetailVO] = Field(default_factory=list)


class StatisticsQuery(CamelModel):
    """统计分析接口的通用查询条件。"""

    time_type: Literal["WEEKLY", "MONTHLY", "QUARTERLY", "YEARLY"] = "MONTHLY"
    start_date: str | None = None
    end_date: str | None = None
    campus_id: int | None = None
    institution_id: int | None = None
    limit: int | None = Field(None, ge=1, description="排行类接口的返回条数")
