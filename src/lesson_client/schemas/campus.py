"""校区相关的数据模型。"""

from typing import Literal

from pydantic import Field

from lesson_client.schemas.common import CamelModel, ResponseModel

CampusStatus = Literal["OPERATING", "CLOSED"]


class CampusManager(ResponseModel):
    id: int | str
    name: str
    phone: str | None = None


class Campus(ResponseModel):
    id: int | str
    name: str
    address: str | None = None
    phone: str | None = None
    contact_person: str | None = None
    capacity: int | None = None
    area: float | None = None
    facilities: list[str] | None = None
    status: str | None = Field(None, description="OPERATING 营业中 / CLOSED 已关闭")
    open_date: str | None = None
    student_count: int | None = None
    coach_count: int | None = None
    course_count: int | None = None
    pending_lesson_count: int | None = None
    monthly_rent: float | None = None
    property_fee: float | None = None
    utility_fee: float | None = None
    manager_name: str | None = None
    manager_phone: str | None = None
    manager: CampusManager | None = None
    editable: bool | None = None
    created_time: str | None = None
    update_time: str | None = None


class CampusSimple(ResponseModel):
    id: int | str
    name: str


class CampusCreateParams(CamelModel):
    name: str
    address: str
    status: CampusStatus | None = None
    monthly_rent: float | None = None
    property_fee: float | None = None
    utility_fee: float | None = None


class CampusUpdateParams(CamelModel):
    name: str | None = None
    address: str | None = None
    phone: str | None = None
    contact_person: str | None = None
    status: CampusStatus | None = None
    monthly_rent: float | None = None
    property_fee: float | None = None
    utility_fee: float | None = None


class CampusQueryParams(CamelModel):
    keyword: str | None = None
    status: str | None = None
    page_num: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)
