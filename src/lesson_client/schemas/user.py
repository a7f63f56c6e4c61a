"""系统用户、角色与机构的数据模型。"""

from enum import IntEnum

from pydantic import Field

from lesson_client.schemas.common import CamelModel, ResponseModel


class UserStatus(IntEnum):
    INACTIVE = 0
    ACTIVE = 1


class Role(ResponseModel):
    id: int | str
    name: str
    code: str | None = None
    description: str | None = None


class User(ResponseModel):
    id: int | str
    phone: str
    real_name: str | None = None
    role_id: int | str | None = None
    role_name: str | None = None
    role: dict | None = None
    institution_id: int | str | None = None
    campus_id: int | str | None = None
    campus_name: str | None = None
    campus: dict | None = None
    status: int | None = None
    status_text: str | None = None
    created_time: str | None = None
    last_login_time: str | None = None


class UserQueryParams(CamelModel):
    page_num: int = Field(1, ge=1)
    page_size: int = Field(10, ge=1)
    phone: str | None = None
    real_name: str | None = None
    keyword: str | None = None
    role_id: int | str | None = None
    role_ids: list[int | str] | None = None
    campus_id: int | str | None = None
    campus_ids: list[int | str] | None = None
    status: str | None = Field(None, description="ENABLED / DISABLED")


class UserCreateParams(CamelModel):
    phone: str
    password: str = Field(..., min_length=6)
    real_name: str
    role_id: int | str
    institution_id: int | str | None = None
    campus_id: int | str | None = None


class UserUpdateParams(CamelModel):
    id: int | str
    phone: str | None = None
    real_name: str | None = None
    role_id: int | str | None = None
    campus_id: int | str | None = None


class Institution(ResponseModel):
    id: int | str
    name: str
    type: str | None = None
    description: str | None = None
    manager_name: str | None = None
    manager_phone: str | None = None
    address: str | None = None
    logo: str | None = None
    status: str | None = None
    contact_email: str | None = None
    website: str | None = None
    founded_year: int | None = None
    created_at: str | None = None
    updated_at: str | None = None


class InstitutionSaveParams(CamelModel):
    name: str | None = None
    type: str | None = None
    description: str | None = None
    manager_name: str | None = None
    manager_phone: str | None = None
    address: str | None = None
    logo: str | None = None
    status: str | None = None
    contact_email: str | None = None
    website: str | None = None
    founded_year: int | None = None
