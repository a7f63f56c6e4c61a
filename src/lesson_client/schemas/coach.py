"""教练相关的数据模型。"""

from typing import Literal

from pydantic import Field

from lesson_client.schemas.common import CamelModel, ResponseModel

CoachStatus = Literal["ACTIVE", "VACATION", "RESIGNED"]
CoachGender = Literal["MALE", "FEMALE"]
CoachWorkType = Literal["FULLTIME", "PARTTIME"]


class Coach(ResponseModel):
    id: int | str
    name: str
    gender: str | None = None
    work_type: str | None = None
    id_number: str | None = None
    phone: str | None = None
    avatar: str | None = None
    job_title: str | None = None
    certifications: list[str] | str | None = None
    coaching_date: str | None = None
    status: str | None = None
    hire_date: str | None = None
    age: int | None = None
    experience: int | None = None
    base_salary: float | None = None
    guaranteed_hours: float | None = None
    class_fee: float | None = None
    social_insurance: float | None = None
    performance_bonus: float | None = None
    commission: float | None = None
    dividend: float | None = None
    campus_id: int | str | None = None
    campus_name: str | None = None


class CoachSimple(ResponseModel):
    id: int
    name: str
    class_fee: float | None = None
    base_salary: float | None = None
    performance_bonus: float | None = None


class CoachQueryParams(CamelModel):
    page_num: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)
    name: str | None = None
    phone: str | None = None
    keyword: str | None = None
    status: CoachStatus | None = None
    job_title: str | None = None
    campus_id: int | str | None = None
    campus_ids: list[int | str] | None = Field(None, description="多选校区，优先于 campus_id")
    sort_field: str | None = None
    sort_order: Literal["asc", "desc"] | None = None


class CoachSaveParams(CamelModel):
    """新增与修改共用；修改时需带 id。"""

    id: int | str | None = None
    name: str
    gender: CoachGender
    work_type: CoachWorkType
    id_number: str
    phone: str
    job_title: str
    certifications: list[str] | str
    coaching_date: str
    status: CoachStatus
    hire_date: str
    campus_id: int | str
    avatar: str | None = None
    base_salary: float | None = None
    guaranteed_hours: float | None = None
    class_fee: float | None = None
    social_insurance: float | None = None
    performance_bonus: float | None = None
    commission: float | None = None
    dividend: float | None = None
