"""课程相关的数据模型。"""

from pydantic import Field

from lesson_client.schemas.common import CamelModel, ResponseModel


class Course(ResponseModel):
    id: int | str
    name: str
    description: str | None = None
    type: str | None = Field(None, description="课程类型（常量值）")
    category: str | None = None
    price: float | None = None
    unit_price: float | None = None
    duration: int | None = None
    total_hours: float | None = None
    consumed_hours: float | None = None
    hours_per_class: float | None = None
    capacity: int | None = None
    status: str | None = None
    cover: str | None = None
    campus_id: int | str | None = None
    institution_id: int | str | None = None
    institution_name: str | None = None
    coaches: list[dict] | list[str] | None = None
    created_at: str | None = None
    updated_at: str | None = None


class SimpleCourse(ResponseModel):
    id: int | str
    name: str
    type_name: str | None = None
    status: str | None = None


class CourseQueryParams(CamelModel):
    """课程列表查询条件。"""

    keyword: str | None = None
    type_id: int | str | None = None
    status: str | None = None
    coach_id: int | str | None = None
    campus_id: int | None = None
    sort_field: str | None = None
    sort_order: str | None = None
    page_num: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)


class CourseCreateParams(CamelModel):
    name: str
    type_id: int | str
    status: str | None = None
    unit_hours: float | None = None
    total_hours: float | None = None
    coach_fee: float | None = None
    price: float | None = None
    campus_id: int | None = None
    coach_ids: list[int | str] | None = None
    description: str | None = None


class CourseUpdateParams(CamelModel):
    name: str | None = None
    type_id: int | str | None = None
    status: str | None = None
    unit_hours: float | None = None
    total_hours: float | None = None
    coach_fee: float | None = None
    price: float | None = None
    campus_id: int | None = None
    coach_ids: list[int | str] | None = None
    description: str | None = None
