"""通用 Response 契约：信封 {code, data, message}、分页结果与分页参数。"""

import math
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# 后端两种成功约定并存：0 与 200 都表示成功
SUCCESS_CODES = frozenset({0, 200})


def is_success_code(code: Any) -> bool:
    """全局唯一的业务成功判定。bool 不视为合法业务码。"""
    return isinstance(code, int) and not isinstance(code, bool) and code in SUCCESS_CODES


class CamelModel(BaseModel):
    """Python 侧 snake_case，线上 camelCase。"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """序列化为请求体：使用线上字段名，省略未填写的字段。"""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ResponseModel(CamelModel):
    """响应模型：保留后端额外返回的字段。"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")


class ApiResponse(BaseModel, Generic[T]):
    """统一响应信封。"""

    model_config = ConfigDict(extra="allow")

    code: int = Field(..., description="业务状态码，0 或 200 表示成功")
    message: str | None = Field("", description="提示信息")
    data: T | None = Field(None, description="业务数据")

    @property
    def ok(self) -> bool:
        return is_success_code(self.code)


class PaginatedResult(CamelModel, Generic[T]):
    """规范化后的分页结果。

    各接口的分页字段不统一（pageNum / page），在这里统一折叠为 page_num，
    上层不再区分字段变体。total 为全部记录数，与当前页 items 无关。
    """

    items: list[T] = Field(default_factory=list, alias="list", description="当前页数据")
    total: int = Field(0, description="总记录数")
    page_num: int | None = Field(None, description="当前页码，从 1 开始")
    page_size: int | None = Field(None, description="每页数量")
    pages: int | None = Field(None, description="总页数")

    @model_validator(mode="before")
    @classmethod
    def normalize_page_fields(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        out = dict(data)
        page = out.pop("page", None)
        if out.get("pageNum") is None and out.get("page_num") is None and page is not None:
            out["pageNum"] = page
        if out.get("list") is None and out.get("items") is None:
            out["list"] = []
        if out.get("total") is None:
            out["total"] = 0
        return out

    @model_validator(mode="after")
    def fill_pages(self) -> "PaginatedResult[T]":
        if self.pages is None and self.page_size:
            self.pages = math.ceil(self.total / self.page_size)
        return self


class PaginationParams(CamelModel):
    """分页请求参数，页码从 1 开始。"""

    page_num: int = Field(1, ge=1, description="页码")
    page_size: int = Field(10, ge=1, description="每页数量")
