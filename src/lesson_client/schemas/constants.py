"""系统常量（下拉选项等可配置取值）与课表的数据模型。"""

from pydantic import Field

from lesson_client.schemas.common import CamelModel, ResponseModel


class Constant(ResponseModel):
    id: int
    constant_key: str
    constant_value: str
    description: str | None = None
    type: str | None = None
    status: int | None = None


class ConstantSaveParams(CamelModel):
    constant_key: str
    constant_value: str
    type: str
    description: str | None = None
    status: int = 1


class ConstantUpdateParams(CamelModel):
    """更新时后端不接受 type 字段。"""

    id: int
    constant_key: str
    constant_value: str
    description: str | None = None
    status: int | None = None


class ScheduleCourseInfo(ResponseModel):
    coach_id: int | None = None
    coach_name: str | None = None
    remain_hours: str | None = None
    total_hours: str | None = None
    unit_price: str | None = None
    course_name: str | None = None
    course_type: str | None = None
    description: str | None = None
    student_name: str | None = Field(None, description="多个学员以逗号分隔")


class FixedSchedule(ResponseModel):
    """固定课表：schedule[时间段][星期] -> 课程列表。"""

    time_slots: list[str] = Field(default_factory=list)
    days: list[str] = Field(default_factory=list)
    schedule: dict[str, dict[str, list[ScheduleCourseInfo]]] = Field(default_factory=dict)

    def courses_at(self, time_slot: str, day: str) -> list[ScheduleCourseInfo]:
        return self.schedule.get(time_slot, {}).get(day, [])
