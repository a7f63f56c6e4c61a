"""学员相关的数据模型。

学员接口的返回字段存在新旧两套命名（studentName / name、enrollmentDate / enrollDate ……），
Student 在校验前统一折叠为一套字段，上层只面对规范后的模型。
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

from pydantic import Field, field_validator, model_validator

from lesson_client.observability.logging import get_logger
from lesson_client.schemas.common import CamelModel, ResponseModel

logger = get_logger(__name__)

# 新字段名 -> 规范字段名（均为线上 camelCase），新字段有值时优先
_STUDENT_FIELD_ALIASES = {
    "studentId": "id",
    "studentName": "name",
    "studentGender": "gender",
    "studentAge": "age",
    "studentPhone": "phone",
    "enrollmentDate": "enrollDate",
    "endDate": "expireDate",
    "lastClassTime": "lastClassDate",
    "remainingHours": "remainingClasses",
}
# 仅在规范字段缺失时才回填
_STUDENT_FALLBACK_ALIASES = {
    "courseTypeName": "courseType",
}


class ScheduleTime(CamelModel):
    weekday: str
    time: str
    end_time: Optional[str] = None


class StudentCourse(ResponseModel):
    course_id: Optional[int | str] = None
    course_name: Optional[str] = None
    course_type: Optional[str] = None
    coach_id: Optional[int | str] = None
    coach_name: Optional[str] = None
    status: Optional[str] = None
    total_hours: Optional[float] = None
    consumed_hours: Optional[float] = None
    remaining_hours: Optional[float] = None
    enrollment_date: Optional[str] = None
    end_date: Optional[str] = None


class Student(ResponseModel):
    id: int | str = Field(..., description="学员 ID，兼容 studentId")
    name: str = ""
    gender: Optional[str] = None
    age: Optional[int] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None
    student_display_id: Optional[str] = None
    course_id: Optional[int | str] = None
    course_name: Optional[str] = None
    course_type: Optional[str] = None
    coach_id: Optional[int | str] = None
    coach_name: Optional[str] = None
    last_class_date: Optional[str] = None
    enroll_date: Optional[str] = None
    expire_date: Optional[str] = None
    total_hours: Optional[float] = None
    consumed_hours: Optional[float] = None
    remaining_classes: Optional[float] = None
    status: Optional[str] = None
    campus_id: Optional[int] = None
    campus_name: Optional[str] = None
    institution_id: Optional[int] = None
    institution_name: Optional[str] = None
    schedule_times: List[ScheduleTime] = Field(default_factory=list)
    courses: List[StudentCourse] = Field(default_factory=list)
    created_time: Optional[str] = None
    updated_time: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def normalize_dto(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        out = dict(data)
        for src, dst in _STUDENT_FIELD_ALIASES.items():
            value = out.pop(src, None)
            if value not in (None, ""):
                out[dst] = value
        for src, dst in _STUDENT_FALLBACK_ALIASES.items():
            value = out.pop(src, None)
            if value not in (None, "") and out.get(dst) in (None, ""):
                out[dst] = value
        fixed = out.pop("fixedSchedule", None)
        if fixed and not out.get("scheduleTimes"):
            out["scheduleTimes"] = _parse_fixed_schedule(fixed)
        if out.get("courses") is None:
            out["courses"] = []
        return out

    @field_validator("remaining_classes", mode="before")
    @classmethod
    def parse_remaining(cls, v: Any) -> Any:
        if isinstance(v, str):
            return float(v) if v.strip() else None
        return v


def _parse_fixed_schedule(raw: Any) -> list[dict[str, Any]]:
    """fixedSchedule 是 JSON 字符串：[{weekday, from, to}]；解析失败只记日志。"""
    try:
        items = json.loads(raw) if isinstance(raw, str) else raw
    except json.JSONDecodeError as exc:
        logger.warning("fixed_schedule_parse_failed", raw=raw, error=str(exc))
        return []
    if not isinstance(items, list):
        return []
    return [
        {"weekday": item.get("weekday"), "time": item.get("from"), "endTime": item.get("to")}
        for item in items
        if isinstance(item, dict) and item.get("weekday") and item.get("from")
    ]


class StudentQueryParams(CamelModel):
    keyword: Optional[str] = None
    status: Optional[str] = None
    course_id: Optional[int | str] = None
    coach_id: Optional[int | str] = None
    campus_id: Optional[int] = None
    enroll_date_start: Optional[str] = None
    enroll_date_end: Optional[str] = None
    sort_field: Optional[str] = None
    sort_order: Optional[str] = None
    page_num: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)


class StudentInfo(CamelModel):
    name: str
    gender: str
    age: Optional[int] = None
    phone: str
    campus_id: Optional[int] = None
    source_id: Optional[int] = None
    address: Optional[str] = None
    parent_name: Optional[str] = None
    parent_phone: Optional[str] = None


class StudentCourseInfo(CamelModel):
    course_id: int = Field(..., gt=0)
    enroll_date: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    status: Optional[str] = None
    fixed_schedule: Optional[str] = Field(None, description="JSON 字符串 [{weekday, from, to}]")


class StudentCreateParams(CamelModel):
    student_info: StudentInfo
    course_info_list: List[StudentCourseInfo] = Field(..., min_length=1)


class StudentUpdateParams(CamelModel):
    """学员与课程一起更新；course_info.course_id 会与外层 course_id 对齐。"""

    student_id: int = Field(..., gt=0, description="无效的学员ID")
    course_id: int = Field(..., gt=0, description="无效的课程ID")
    student_info: StudentInfo
    course_info: StudentCourseInfo

    @model_validator(mode="after")
    def sync_course_id(self) -> "StudentUpdateParams":
        self.course_info.course_id = self.course_id
        return self


class ClassRecord(ResponseModel):
    id: int | str
    date: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    course_name: Optional[str] = None
    coach: Optional[str] = None
    content: Optional[str] = None
    feedback: Optional[str] = None


class StudentPaymentRecord(ResponseModel):
    id: int | str
    student_id: Optional[int | str] = None
    payment_type: Optional[str] = None
    amount: Optional[float] = None
    payment_method: Optional[str] = None
    transaction_date: Optional[str] = None
    regular_classes: Optional[float] = None
    bonus_classes: Optional[float] = None
    valid_until: Optional[str] = None
    course_id: Optional[int | str] = None
    course_name: Optional[str] = None
    remarks: Optional[str] = None


class StudentPaymentParams(CamelModel):
    student_id: int | str
    course_id: int | str
    payment_type: str
    amount: float
    payment_method: str
    transaction_date: str
    course_hours: Optional[float] = None
    gifted_hours: Optional[float] = None
    validity_period_id: Optional[int] = None
    gift_ids: Optional[List[int]] = None
    remarks: Optional[str] = None


class StudentAttendanceQuery(CamelModel):
    campus_id: Optional[int] = None
    student_id: Optional[int] = None
    course_id: Optional[int] = None
    status: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    page_num: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)


class StudentAttendanceRecord(ResponseModel):
    id: Optional[int | str] = None
    date: Optional[str] = None
    student_name: Optional[str] = None
    course_name: Optional[str] = None
    coach_name: Optional[str] = None
    status: Optional[str] = None
    hours: Optional[float] = None
