"""系统用户与角色接口。"""

from typing import Any

from lesson_client.api.base import BaseResource, build_query
from lesson_client.schemas.common import PaginatedResult
from lesson_client.schemas.user import (
    Role,
    User,
    UserCreateParams,
    UserQueryParams,
    UserStatus,
    UserUpdateParams,
)

USER_API_PATHS = {
    "list": "/lesson/api/user/list",
    "create": "/lesson/api/user/create",
    "update": "/lesson/api/user/update",
    "delete": "/lesson/api/user/delete",
    "update_status": "/lesson/api/user/updateStatus",
    "reset_password": "/lesson/api/user/resetPassword",
    "roles": "/lesson/api/user/roles",
}


class UserApi(BaseResource):
    async def get_list(
        self, params: UserQueryParams | dict[str, Any] | None = None
    ) -> PaginatedResult[User]:
        params = UserQueryParams.model_validate(params or {})
        # 单选条件也以多选参数名传给后端
        role_ids = params.role_ids or ([params.role_id] if params.role_id else [])
        campus_ids = params.campus_ids or ([params.campus_id] if params.campus_id else [])
        query = build_query(
            {
                "pageNum": params.page_num,
                "pageSize": params.page_size,
                "phone": params.phone,
                "realName": params.real_name,
                "keyword": params.keyword,
                "roleIds": role_ids,
                "campusIds": campus_ids,
                "status": params.status,
            }
        )
        envelope = await self._client.request(f"{USER_API_PATHS['list']}{query}")
        return PaginatedResult[User].model_validate(envelope.data or {})

    async def create(self, params: UserCreateParams | dict[str, Any]) -> Any:
        params = UserCreateParams.model_validate(params)
        envelope = await self._client.request(
            USER_API_PATHS["create"], method="POST", body=params.to_payload()
        )
        return envelope.data

    async def update(self, params: UserUpdateParams | dict[str, Any]) -> None:
        params = UserUpdateParams.model_validate(params)
        await self._client.request(USER_API_PATHS["update"], method="POST", body=params.to_payload())

    async def delete(self, user_id: int | str) -> None:
        await self._client.request(
            f"{USER_API_PATHS['delete']}{build_query({'id': user_id})}", method="POST"
        )

    async def update_status(self, user_id: int | str, status: UserStatus | int) -> None:
        await self._client.request(
            USER_API_PATHS["update_status"],
            method="POST",
            body={"id": user_id, "status": int(status)},
        )

    async def reset_password(self, user_id: int | str, password: str | None = None) -> None:
        """不传 password 时由后端重置为默认密码。"""
        body: dict[str, Any] = {"id": user_id}
        if password:
            body["password"] = password
        await self._client.request(USER_API_PATHS["reset_password"], method="POST", body=body)

    async def get_roles(self) -> list[Role]:
        envelope = await self._client.request(USER_API_PATHS["roles"])
        return [Role.model_validate(item) for item in envelope.data or []]
