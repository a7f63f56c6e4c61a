"""认证相关的数据模型。"""

import re
from typing import Any

from pydantic import Field, field_validator

from lesson_client.schemas.common import CamelModel, ResponseModel

# 大陆手机号
PHONE_PATTERN = re.compile(r"^1[3-9]\d{9}$")
MIN_PASSWORD_LENGTH = 6


class LoginParams(CamelModel):
    phone: str = Field(..., min_length=1, description="登录手机号")
    password: str = Field(..., min_length=1, description="登录密码")


class LoginResult(ResponseModel):
    """登录成功返回的 token 与用户身份。"""

    token: str = Field(..., description="鉴权 token，原样放入 Authorization 头")
    user_id: int | str | None = None
    phone: str | None = None
    real_name: str | None = None
    role_id: int | str | None = None
    role_name: str | None = None
    institution_id: int | str | None = None
    campus_id: int | str | None = None
    user: dict[str, Any] | None = None

    def identity(self) -> dict[str, Any]:
        """本地缓存的用户身份，不含 token。"""
        return self.model_dump(by_alias=True, exclude_none=True, exclude={"token"})


class RegisterParams(CamelModel):
    """机构注册表单；校验失败在发请求前以 ValidationError 抛出。"""

    password: str = Field(..., description="登录密码，至少 6 位")
    institution_name: str = Field(..., description="机构名称")
    manager_name: str = Field(..., description="负责人姓名")
    manager_phone: str = Field(..., description="负责人手机号，同时作为登录账号")
    phone: str | None = None
    real_name: str | None = None
    institution_type: str | None = None
    institution_description: str | None = None

    @field_validator("password", "institution_name", "manager_name", "manager_phone")
    @classmethod
    def require_non_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("请填写所有必填字段")
        return v

    @field_validator("manager_phone")
    @classmethod
    def validate_manager_phone(cls, v: str) -> str:
        if not PHONE_PATTERN.match(v):
            raise ValueError("请输入正确的手机号")
        return v

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"密码长度不能少于{MIN_PASSWORD_LENGTH}位")
        return v


class RegisterResult(ResponseModel):
    user_id: int | str
    phone: str | None = None
